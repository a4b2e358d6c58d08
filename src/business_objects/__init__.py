# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    CatalogReadError,
    InputSizeError,
    SchemaError,
    SolverMismatchError,
    StateValidationError,
)
from .rides import RideItem, RideVector

__all__ = [
    # errors
    "SchemaError",
    "CatalogReadError",
    "StateValidationError",
    "InputSizeError",
    "SolverMismatchError",
    # core models
    "RideItem",
    "RideVector",
]
