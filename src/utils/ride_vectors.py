# -*- coding: utf-8 -*-
"""
Pure helpers over RideVector collections.

- sum_ride_vector     : total cost and total time in one pass
- filter_ride_vector  : bounded-size time-range filter (keeps exhaustive inputs small)
- format_ride_vector  : human-readable listing with grand totals
- format_2d_cache     : human-readable dump of a DP table

None of these mutate their inputs; derived vectors share the same RideItem objects.
"""

from __future__ import annotations
from typing import Sequence, Tuple

from src.business_objects.rides import RideItem, RideVector

# Tables wider or taller than this are not worth printing.
MAX_PRINTABLE_CACHE = 250


def sum_ride_vector(rides: Sequence[RideItem]) -> Tuple[int, float]:
    """Return (total_cost, total_time) of the given rides."""
    total_cost = 0
    total_time = 0.0
    for ride in rides:
        total_cost += ride.cost
        total_time += ride.time
    return total_cost, total_time


def filter_ride_vector(
    source: Sequence[RideItem],
    min_time: float,
    max_time: float,
    total_size: int,
) -> RideVector:
    """
    Select the first `total_size` rides whose time lies in [min_time, max_time].

    Rides with zero or negative time can never improve a solution, so they are
    dropped regardless of the bounds. Scanning stops as soon as `total_size`
    rides have been collected.

    Parameters
    ----------
    source : Sequence[RideItem]
        Rides to choose from; left untouched.
    min_time, max_time : float
        Inclusive time bounds.
    total_size : int
        Maximum number of rides in the output.

    Returns
    -------
    RideVector
        Matching rides in their original relative order.
    """
    result: RideVector = []
    if total_size <= 0:
        return result
    for ride in source:
        if ride.time > 0 and min_time <= ride.time <= max_time:
            result.append(ride)
            if len(result) >= total_size:
                break
    return result


def format_ride_vector(rides: Sequence[RideItem]) -> str:
    lines = ["*** ride Vector ***"]
    if not rides:
        lines.append("[empty ride list]")
        return "\n".join(lines)

    for ride in rides:
        lines.append(
            f"Ye olde {ride.description} ==> Cost of {ride.cost} dollars; time = {ride.time}"
        )
    total_cost, total_time = sum_ride_vector(rides)
    lines.append(f"> Grand total cost: {total_cost} dollars")
    lines.append(f"> Grand total time: {total_time}")
    return "\n".join(lines)


def format_2d_cache(table: Sequence[Sequence[float]]) -> str:
    """
    Render a DP table row by row, five characters per cell.
    Refuses tables larger than MAX_PRINTABLE_CACHE in either direction.
    """
    lines = ["*** 2D Cache ***"]
    if len(table) == 0:
        lines.append("[empty]")
    elif len(table) > MAX_PRINTABLE_CACHE or len(table[0]) > MAX_PRINTABLE_CACHE:
        lines.append("[too large]")
    else:
        for row in table:
            lines.append("".join(f"{value:>5g}" for value in row))
    return "\n".join(lines)
