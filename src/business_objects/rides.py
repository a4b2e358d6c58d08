# -*- coding: utf-8 -*-
"""
Ride model for the max-time planner.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

from .errors import StateValidationError


@dataclass(frozen=True)
class RideItem:
    """
    One ride that can be purchased at most once.

    Attributes
    ----------
    description : str
        Human-readable label, e.g. "new enchanted world". Must be non-empty.
    cost : int
        Ride cost in whole dollars. Must be positive.
    time : float
        Minutes spent at the ride; the quantity being maximised.
    """
    description: str
    cost: int
    time: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("RideItem.description must be non-empty.")
        if isinstance(self.cost, bool) or not math.isfinite(self.cost) or int(self.cost) != self.cost:
            raise StateValidationError(
                f"RideItem[{self.description}] cost must be a whole number of dollars."
            )
        if self.cost <= 0:
            raise StateValidationError(f"RideItem[{self.description}] cost must be > 0.")
        if not math.isfinite(self.time):
            raise StateValidationError(f"RideItem[{self.description}] time must be finite.")
        # Normalise 10.0 -> 10 so table indexing never sees a float cost.
        object.__setattr__(self, "cost", int(self.cost))


# Ordered sequence of shared, immutable rides.
RideVector = List[RideItem]
