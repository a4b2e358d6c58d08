# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when a ride catalog file violates the expected record layout."""


class CatalogReadError(OSError):
    """Raised when a ride catalog file cannot be opened or read at all."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InputSizeError(ValueError):
    """Raised when a solver is handed more rides than it can enumerate."""


class SolverMismatchError(ValueError):
    """Raised when two solvers disagree on the optimal total time."""
