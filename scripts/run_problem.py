#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load the ride catalog, filter it, and solve for max ride time with the
dynamic solver at a few budgets.

This version does NOT use argparse.
Just set the variables at the top of the file and run (from the repo root):

    python -m scripts.run_problem
"""

from __future__ import annotations
import logging
from typing import List

# ====== CONFIGURATION ======
RIDES_PATH = "data/ride.csv"

# Pre-filter: inclusive time bounds; None keeps every matching ride
MIN_TIME = 1.0
MAX_TIME = 2500.0
MAX_ITEMS = None

# Budgets (dollars) to solve for
BUDGETS = [500, 5000]

# Print the chosen rides, not just the totals
SHOW_RIDES = False

LOG_LEVEL = logging.INFO
# ============================

from src.business_objects.rides import RideItem
from src.planning import Policy, Solution
from src.planning.solve_orchestrator import run_solve
from src.utils.read_rides import read_rides_csv
from src.utils.ride_vectors import format_ride_vector


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    rides: List[RideItem] = read_rides_csv(RIDES_PATH)
    policy = Policy(method="dynamic", min_time=MIN_TIME, max_time=MAX_TIME, max_items=MAX_ITEMS)

    print(f"\n=== Dynamic max-time solve ({len(rides)} rides loaded) ===")
    for budget in BUDGETS:
        solution: Solution = run_solve(rides, budget, policy)
        print(
            f"Budget {budget:>6}: {len(solution.rides)} rides, "
            f"cost {solution.total_cost}, time {solution.total_time:.2f}, "
            f"utilization {solution.utilization:.1%}"
        )
        if SHOW_RIDES:
            print(format_ride_vector(solution.rides))


if __name__ == "__main__":
    main()
