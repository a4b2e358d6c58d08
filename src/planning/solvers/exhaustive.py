# -*- coding: utf-8 -*-
"""
Exhaustive-search solver for the ride max-time problem.

Every integer `bits` in [0, 2^n) names one subset: bit j set means ride j is
in. Each subset is scored and kept only if it fits the budget and either the
current best is empty or it strictly beats the current best time. Ties keep
the earliest mask, so lower-indexed combinations win.

Costs O(2^n * n); this is a correctness oracle for small inputs, not a
production solver. Inputs of MAX_EXHAUSTIVE_SIZE rides or more are refused.
"""

from __future__ import annotations
import logging
from typing import Sequence

from src.business_objects.errors import InputSizeError
from src.business_objects.rides import RideItem, RideVector

logger = logging.getLogger(__name__)

# Subsets are indexed by a 64-bit mask in the classic formulation.
MAX_EXHAUSTIVE_SIZE = 64


def exhaustive_max_time(rides: Sequence[RideItem], total_cost: float) -> RideVector:
    """
    Return the subset of `rides` with cost <= `total_cost` and maximal total time.

    Parameters
    ----------
    rides : Sequence[RideItem]
        Candidate rides; must hold fewer than MAX_EXHAUSTIVE_SIZE entries.
    total_cost : float
        Budget in dollars.

    Returns
    -------
    RideVector
        Chosen rides in increasing original index order (possibly empty).

    Raises
    ------
    InputSizeError
        If len(rides) >= MAX_EXHAUSTIVE_SIZE. Nothing is enumerated in that case.
    """
    n = len(rides)
    if n >= MAX_EXHAUSTIVE_SIZE:
        raise InputSizeError(
            f"exhaustive_max_time needs fewer than {MAX_EXHAUSTIVE_SIZE} rides, got {n}; "
            "filter the catalog first."
        )

    costs = [ride.cost for ride in rides]
    times = [ride.time for ride in rides]

    best_bits = 0
    best_time = 0.0
    for bits in range(1 << n):
        candidate_cost = 0
        candidate_time = 0.0
        remaining = bits
        while remaining:
            low = remaining & -remaining
            j = low.bit_length() - 1
            candidate_cost += costs[j]
            candidate_time += times[j]
            remaining ^= low

        if candidate_cost <= total_cost:
            if best_bits == 0 or candidate_time > best_time:
                best_bits = bits
                best_time = candidate_time

    chosen: RideVector = [rides[j] for j in range(n) if (best_bits >> j) & 1]
    logger.debug(
        "exhaustive_max_time: n=%d budget=%s -> %d rides, time=%.2f",
        n, total_cost, len(chosen), best_time,
    )
    return chosen
