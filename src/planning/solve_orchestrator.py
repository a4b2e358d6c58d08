# -*- coding: utf-8 -*-
"""
Solve orchestrator: Policy -> filter -> solver -> Solution.

- Applies the Policy pre-filter (time bounds, size cap) via filter_ride_vector
- Dispatches to the dynamic or exhaustive solver
- Wraps the chosen rides into a Solution and logs a one-line summary

cross_check() runs both solvers on the same input and insists they agree on
the optimal total time; it is the oracle check used by scripts and tests.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from src.business_objects.errors import SolverMismatchError
from src.business_objects.rides import RideItem, RideVector
from src.planning.policy import Policy
from src.planning.solution import Solution
from src.planning.solvers.dynamic import dynamic_max_time
from src.planning.solvers.exhaustive import exhaustive_max_time
from src.utils.ride_vectors import filter_ride_vector

logger = logging.getLogger(__name__)

SolverFn = Callable[[Sequence[RideItem], float], RideVector]

SOLVERS: Dict[str, SolverFn] = {
    "dynamic": dynamic_max_time,
    "exhaustive": exhaustive_max_time,
}

# Totals are float sums taken in different orders by the two solvers.
TIME_TOLERANCE = 1e-6


def run_solve(
    rides: Sequence[RideItem],
    budget: float,
    policy: Optional[Policy] = None,
) -> Solution:
    """
    Filter `rides` per `policy` and solve under `budget`.

    Parameters
    ----------
    rides : Sequence[RideItem]
        Full catalog (or any subset of it); never modified.
    budget : float
        Dollar budget.
    policy : Policy | None
        Filter bounds and solver choice; defaults to Policy().

    Returns
    -------
    Solution
        The chosen rides with totals. An empty Solution means nothing fits;
        failures are raised, never returned.
    """
    if policy is None:
        policy = Policy()

    total_size = len(rides) if policy.max_items is None else policy.max_items
    candidates = filter_ride_vector(rides, policy.min_time, policy.max_time, total_size)

    chosen = SOLVERS[policy.method](candidates, budget)
    solution = Solution.from_rides(chosen, budget=budget, method=policy.method)

    logger.info(
        "%s solve: %d/%d candidate rides, budget=%s -> %d chosen, cost=%d, time=%.2f",
        policy.method, len(candidates), len(rides), budget,
        len(solution.rides), solution.total_cost, solution.total_time,
    )
    return solution


def cross_check(rides: Sequence[RideItem], budget: float) -> Tuple[Solution, Solution]:
    """
    Solve `rides` with both solvers (no pre-filter) and compare total times.

    Raises
    ------
    InputSizeError
        If there are too many rides for the exhaustive solver.
    SolverMismatchError
        If the two optimal total times differ.
    """
    dynamic = Solution.from_rides(dynamic_max_time(rides, budget), budget=budget, method="dynamic")
    exhaustive = Solution.from_rides(exhaustive_max_time(rides, budget), budget=budget, method="exhaustive")

    if abs(dynamic.total_time - exhaustive.total_time) > TIME_TOLERANCE:
        raise SolverMismatchError(
            f"dynamic found time {dynamic.total_time} but exhaustive found "
            f"{exhaustive.total_time} (n={len(rides)}, budget={budget})"
        )
    return dynamic, exhaustive
