# -*- coding: utf-8 -*-
"""
Dynamic-programming solver for the ride max-time problem (0/1 knapsack).

Table definition (1-indexed rides, integer budgets):
    T[0][b] = 0                                         for every b
    T[i][b] = T[i-1][b]                                 if cost_i > b
            = max(T[i-1][b], T[i-1][b - cost_i] + time_i) otherwise
The optimum is T[n][budget].

Only one value row is kept in memory (numpy, rolling). Alongside it, a boolean
(n, budget+1) table records for every ride and budget whether taking the ride
strictly improved the row; that is exactly the "T[i][b] != T[i-1][b]" test of
the classic traceback, so the chosen subset is recovered without the full
value table.

Reconstruction walks from the last ride back to the first, so the returned
RideVector lists the chosen rides in decreasing original index order.
"""

from __future__ import annotations
import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from src.business_objects.errors import StateValidationError
from src.business_objects.rides import RideItem, RideVector

logger = logging.getLogger(__name__)


def _normalize_budget(total_cost: float, cap: Optional[int] = None) -> int:
    # Costs are whole dollars, so flooring a fractional budget keeps the feasible set unchanged.
    if total_cost < 0:
        raise StateValidationError(f"Budget must be >= 0 (got {total_cost}).")
    # Past the sum of all costs every ride fits; a larger table adds nothing.
    if cap is not None and total_cost >= cap:
        return cap
    return int(math.floor(total_cost))


def _fill_choices(rides: Sequence[RideItem], budget: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Run the DP over all rides.

    Returns
    -------
    (best, taken)
        best  : float64 array of length budget+1, the final row T[n][*].
        taken : bool array of shape (n, budget+1); taken[i, b] is True when
                ride i (0-based) is part of the optimum for the first i+1 rides
                under budget b.
    """
    n = len(rides)
    best = np.zeros(budget + 1, dtype=np.float64)
    taken = np.zeros((n, budget + 1), dtype=bool)

    for i, ride in enumerate(rides):
        c = ride.cost
        if c > budget:
            continue
        # Both operands are read from the previous row before anything is written.
        with_ride = best[: budget + 1 - c] + ride.time
        improves = with_ride > best[c:]
        taken[i, c:] = improves
        best[c:] = np.where(improves, with_ride, best[c:])

    return best, taken


def dynamic_max_time(rides: Sequence[RideItem], total_cost: float) -> RideVector:
    """
    Compute the max-time subset of rides whose total cost fits in `total_cost`.

    Parameters
    ----------
    rides : Sequence[RideItem]
        Candidate rides; never modified.
    total_cost : float
        Budget in dollars, >= 0. Fractional budgets are floored; budgets
        above the total cost of all rides are clamped to that total.

    Returns
    -------
    RideVector
        Chosen rides, last-index first. Empty when the budget is 0 or no ride fits.

    Raises
    ------
    StateValidationError
        If the budget is negative.
    """
    budget = _normalize_budget(total_cost, cap=sum(ride.cost for ride in rides))
    best, taken = _fill_choices(rides, budget)

    chosen: RideVector = []
    b = budget
    for i in range(len(rides) - 1, -1, -1):
        if taken[i, b]:
            chosen.append(rides[i])
            b -= rides[i].cost

    logger.debug(
        "dynamic_max_time: n=%d budget=%d -> %d rides, time=%.2f",
        len(rides), budget, len(chosen), float(best[budget]),
    )
    return chosen


def dynamic_time_table(rides: Sequence[RideItem], total_cost: float) -> np.ndarray:
    """
    Build the full (n+1, budget+1) value table T for inspection.

    Memory is O(n * budget) floats; meant for small inputs and debugging
    (see utils.ride_vectors.format_2d_cache).
    """
    budget = _normalize_budget(total_cost)
    table = np.zeros((len(rides) + 1, budget + 1), dtype=np.float64)
    for i, ride in enumerate(rides, start=1):
        prev = table[i - 1]
        row = prev.copy()
        c = ride.cost
        if c <= budget:
            row[c:] = np.maximum(prev[c:], prev[: budget + 1 - c] + ride.time)
        table[i] = row
    return table
