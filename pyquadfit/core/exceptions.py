"""
Exception hierarchy for PyQuadFit.

All exceptions inherit from PyQuadFitError to allow catching any
library-specific error. Invalid input (ValidationError) and numerical
degeneracy (NumericalError) are disjoint branches so callers can tell
"bad shape of data" apart from "bad numerical properties of data".

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyQuadFitError(Exception):
    """Base exception for all PyQuadFit errors."""
    pass


class ValidationError(PyQuadFitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InsufficientPointsError(ValidationError):
    """
    Too few sample points for the requested fit.

    A quadratic has three free coefficients, so fewer than three points
    leave the normal equations underdetermined.

    Attributes:
        n_points: Number of points supplied
        min_points: Minimum number of points required
    """

    def __init__(self, message: str, n_points: int, min_points: int):
        super().__init__(message)
        self.n_points = n_points
        self.min_points = min_points


class NumericalError(PyQuadFitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination meets a pivot whose magnitude is below the
    singularity threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of columns eliminated before the failure
        expected_rank: Expected rank (the matrix order n)
        pivot_index: Column at which elimination failed
        pivot_value: Magnitude of the rejected pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
