# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a ride max-time solve.

Pre-filter (applied before solving):
  - min_time / max_time: inclusive time bounds; rides with time <= 0 are always dropped
  - max_items: cap on the number of rides handed to the solver (None = unbounded)

Solver:
  - method: "dynamic" (table DP, O(n * budget)) or "exhaustive" (2^n search, n < 64)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from src.business_objects.errors import StateValidationError

SOLVE_METHODS = ("dynamic", "exhaustive")


@dataclass(frozen=True)
class Policy:
    """
    Solve knobs (pure data holder).

    Attributes
    ----------
    method : str
        "dynamic" | "exhaustive".
    min_time : float
        Lower time bound for the pre-filter (inclusive).
    max_time : float
        Upper time bound for the pre-filter (inclusive).
    max_items : int | None
        Keep at most this many rides after filtering; None keeps all.
    """
    method: str = "dynamic"
    min_time: float = 0.0
    max_time: float = float("inf")
    max_items: Optional[int] = None

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.method not in SOLVE_METHODS:
            raise StateValidationError(
                f"Policy.method must be one of {SOLVE_METHODS}, got {self.method!r}."
            )
        if self.min_time > self.max_time:
            raise StateValidationError("Policy.min_time must be <= Policy.max_time.")
        if self.max_items is not None and self.max_items < 0:
            raise StateValidationError("Policy.max_items must be >= 0.")
