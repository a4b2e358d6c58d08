# -*- coding: utf-8 -*-
"""
Planning layer public API for the ride max-time planner.

This module exposes the planning-time data contracts:
  - Policy configuration
  - Solution model

Solvers (planning.solvers.dynamic, planning.solvers.exhaustive) and the
orchestrator are intentionally not exported here; import them explicitly.
"""

from .policy import Policy
from .solution import Solution

__all__ = [
    "Policy",
    "Solution",
]
