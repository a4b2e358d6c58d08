# -*- coding: utf-8 -*-
"""
Solution model for ride max-time planning results.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

from src.business_objects.rides import RideItem
from src.utils.ride_vectors import sum_ride_vector


@dataclass(frozen=True)
class Solution:
    """
    Outcome of one solve.

    Attributes
    ----------
    rides : tuple[RideItem, ...]
        Chosen rides, in the order the solver produced them.
    total_cost : int
        Sum of the chosen rides' costs (always <= budget).
    total_time : float
        Sum of the chosen rides' times.
    budget : float
        Budget the solve ran under.
    method : str
        Solver that produced the result ("dynamic" | "exhaustive").
    """
    rides: Tuple[RideItem, ...]
    total_cost: int
    total_time: float
    budget: float
    method: str

    @classmethod
    def from_rides(cls, rides: Sequence[RideItem], budget: float, method: str) -> "Solution":
        total_cost, total_time = sum_ride_vector(rides)
        return cls(
            rides=tuple(rides),
            total_cost=total_cost,
            total_time=total_time,
            budget=budget,
            method=method,
        )

    @property
    def is_empty(self) -> bool:
        return not self.rides

    @property
    def utilization(self) -> float:
        """Share of the budget spent (0..1); 0 for a zero budget."""
        if self.budget <= 0:
            return 0.0
        return self.total_cost / self.budget
