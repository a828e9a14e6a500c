"""
Core infrastructure for PyQuadFit.

This module provides shared abstractions and utilities used by the
fitting domain (polynomial).

Key components:
    point: Point2D value type
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pyquadfit.core.point import Point2D
from pyquadfit.core.result import Result
from pyquadfit.core.exceptions import (
    PyQuadFitError,
    ValidationError,
    DimensionError,
    InsufficientPointsError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Data
    "Point2D",
    # Result
    "Result",
    # Exceptions
    "PyQuadFitError",
    "ValidationError",
    "DimensionError",
    "InsufficientPointsError",
    "NumericalError",
    "SingularMatrixError",
]
