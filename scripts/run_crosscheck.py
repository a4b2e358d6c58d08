#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cross-check the dynamic solver against the exhaustive solver on growing
prefixes of the filtered ride catalog.

For n = 1..MAX_N the first n rides with time in [MIN_TIME, MAX_TIME] are
solved by both algorithms under BUDGET; any disagreement aborts the run.

Usage (from the repo root):
    python -m scripts.run_crosscheck
"""

from __future__ import annotations
import logging
import time

# ====== CONFIGURATION ======
RIDES_PATH = "data/ride.csv"

MIN_TIME = 1.0
MAX_TIME = 2000.0
BUDGET = 2000

# Exhaustive search doubles in cost with every extra ride; keep this small.
MAX_N = 20

LOG_LEVEL = logging.WARNING
# ===========================

from src.planning.solve_orchestrator import cross_check
from src.utils.read_rides import read_rides_csv
from src.utils.ride_vectors import filter_ride_vector


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    rides = read_rides_csv(RIDES_PATH)

    print("\n=== Dynamic vs exhaustive cross-check ===")
    print(f"{'n':>3}  {'time':>10}  {'cost':>6}  {'exhaustive s':>12}")
    for n in range(1, MAX_N + 1):
        small = filter_ride_vector(rides, MIN_TIME, MAX_TIME, n)
        started = time.perf_counter()
        _, exhaustive = cross_check(small, BUDGET)
        elapsed = time.perf_counter() - started
        print(f"{n:>3}  {exhaustive.total_time:>10.2f}  {exhaustive.total_cost:>6}  {elapsed:>12.3f}")

    print("\nAll sizes agree.")


if __name__ == "__main__":
    main()
