"""
Public entry points for quadratic least squares.

Provides fit() and fit_arrays() (public API), the curve helpers
generate_polynomial_points() and curve_range(), and LeastSquaresFitter,
a reusable service object that bundles them with fixed thresholds.
"""

from __future__ import annotations

from typing import Iterable
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pyquadfit.core.point import Point2D
from pyquadfit.core.exceptions import ValidationError
from pyquadfit.core.compute.tolerances import (
    PIVOT_TOLERANCE,
    DEGENERATE_TSS_TOLERANCE,
    DEFAULT_CURVE_POINTS,
)
from pyquadfit.core.validation import (
    check_not_none,
    check_finite,
    check_positive_int,
    check_increasing_range,
    check_non_negative,
    check_positive,
)
from pyquadfit.polynomial.design import QuadraticDesign, points_to_arrays
from pyquadfit.polynomial.solution import PolynomialResult
from pyquadfit.polynomial.backends.cpu import CPUNormalEquationBackend


PointsLike = Iterable[Point2D | tuple[float, float]]


def fit(
    points: PointsLike | QuadraticDesign | None,
    *,
    pivot_tol: float = PIVOT_TOLERANCE,
    tss_tol: float = DEGENERATE_TSS_TOLERANCE,
) -> PolynomialResult:
    """
    Fit y = a + b·x + c·x² by least squares.

    Minimizes Σ(yᵢ - a - b·xᵢ - c·xᵢ²)² by solving the 3×3 normal
    equations. Input order affects only floating-point rounding.

    Args:
        points: Point2D instances or (x, y) pairs, or a QuadraticDesign
        pivot_tol: Smallest acceptable pivot in the elimination
        tss_tol: TSS at or below which R² is reported as 0

    Returns:
        PolynomialResult with coefficients, R², RMSE and diagnostics

    Raises:
        ValidationError: If points is None or malformed, or a threshold
            is NaN or out of range
        InsufficientPointsError: If fewer than 3 points are given
        SingularMatrixError: If the normal equations are singular
            (fewer than three distinct x values)

    Example:
        >>> from pyquadfit.polynomial import fit
        >>> result = fit([(0, 1), (1, 2), (2, 5)])
        >>> round(result.evaluate_at(3.0), 9)
        10.0
    """
    # This is the boundary - validate here, trust everywhere else
    if isinstance(points, QuadraticDesign):
        design = points
    else:
        design = QuadraticDesign.from_points(points)

    return _fit_design(design, pivot_tol, tss_tol, stacklevel=3)


def fit_arrays(
    x: ArrayLike,
    y: ArrayLike,
    *,
    pivot_tol: float = PIVOT_TOLERANCE,
    tss_tol: float = DEGENERATE_TSS_TOLERANCE,
) -> PolynomialResult:
    """
    Fit a quadratic to coordinate arrays.

    Same as fit() but takes x and y as separate 1D array-likes.
    """
    design = QuadraticDesign.from_arrays(x, y)
    return _fit_design(design, pivot_tol, tss_tol, stacklevel=3)


def _fit_design(
    design: QuadraticDesign,
    pivot_tol: float,
    tss_tol: float,
    stacklevel: int,
) -> PolynomialResult:
    backend = CPUNormalEquationBackend(pivot_tol=pivot_tol, tss_tol=tss_tol)
    result = backend.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)

    return PolynomialResult(_result=result)


def generate_polynomial_points(
    result: PolynomialResult | None,
    min_x: float,
    max_x: float,
    count: int = DEFAULT_CURVE_POINTS,
) -> list[Point2D]:
    """
    Sample the fitted curve at evenly spaced x.

    Produces count points x_i = min_x + i·step with
    step = (max_x - min_x) / (count - 1), so both ends are included.
    A single requested point is placed at min_x.

    Args:
        result: Fitted polynomial to evaluate
        min_x: First abscissa
        max_x: Last abscissa, must exceed min_x
        count: Number of points, must be positive

    Returns:
        Fully materialized list of Point2D

    Raises:
        ValidationError: If result is None, count <= 0 or max_x <= min_x
    """
    check_not_none(result, 'result')
    check_positive_int(count, 'count')
    min_x = float(min_x)
    max_x = float(max_x)
    check_increasing_range(min_x, max_x, 'min_x', 'max_x')

    if count == 1:
        xs = np.array([min_x])
    else:
        step = (max_x - min_x) / (count - 1)
        xs = min_x + np.arange(count) * step

    ys = result.evaluate_at(xs)
    return [Point2D(x, y) for x, y in zip(xs.tolist(), ys.tolist())]


def curve_range(points: PointsLike | None, margin: float = 0.1) -> tuple[float, float]:
    """
    X range for drawing a fitted curve over its data.

    Takes the span of the points' x values and widens it by margin times
    the span on each side, so the curve extends a little past the data.

    Args:
        points: Point2D instances or (x, y) pairs, at least one
        margin: Fraction of the span added on each side

    Returns:
        (min_x, max_x); equal when all points share one x

    Raises:
        ValidationError: If points is empty, x is non-finite or margin < 0
    """
    check_non_negative(margin, 'margin')
    x, _ = points_to_arrays(points, 'points')
    if x.shape[0] == 0:
        raise ValidationError("points: at least one point is required")
    check_finite(x, 'points.x')

    lo = float(np.min(x))
    hi = float(np.max(x))
    span = hi - lo
    return lo - span * margin, hi + span * margin


class LeastSquaresFitter:
    """
    Reusable quadratic least-squares service.

    Carries configuration only. Each call is self-contained, so a single
    instance may be shared between threads as long as the point
    collections passed in are not mutated concurrently.

    Example:
        >>> fitter = LeastSquaresFitter()
        >>> result = fitter.fit(points)
        >>> curve = fitter.generate_polynomial_points(result, 0.0, 1.0)
    """

    def __init__(
        self,
        *,
        pivot_tol: float = PIVOT_TOLERANCE,
        tss_tol: float = DEGENERATE_TSS_TOLERANCE,
        curve_points: int = DEFAULT_CURVE_POINTS,
    ):
        check_positive(pivot_tol, 'pivot_tol')
        check_non_negative(tss_tol, 'tss_tol')
        check_positive_int(curve_points, 'curve_points')
        self._pivot_tol = pivot_tol
        self._tss_tol = tss_tol
        self._curve_points = curve_points

    @property
    def pivot_tol(self) -> float:
        return self._pivot_tol

    @property
    def tss_tol(self) -> float:
        return self._tss_tol

    @property
    def curve_points(self) -> int:
        return self._curve_points

    def fit(self, points: PointsLike | QuadraticDesign | None) -> PolynomialResult:
        """Fit a quadratic to points. See pyquadfit.polynomial.fit()."""
        if isinstance(points, QuadraticDesign):
            design = points
        else:
            design = QuadraticDesign.from_points(points)
        return _fit_design(design, self._pivot_tol, self._tss_tol, stacklevel=3)

    def generate_polynomial_points(
        self,
        result: PolynomialResult | None,
        min_x: float,
        max_x: float,
        count: int | None = None,
    ) -> list[Point2D]:
        """Sample result over [min_x, max_x]; count defaults to curve_points."""
        if count is None:
            count = self._curve_points
        return generate_polynomial_points(result, min_x, max_x, count)

    def curve(
        self,
        result: PolynomialResult,
        points: PointsLike,
        margin: float = 0.1,
    ) -> list[Point2D]:
        """Sample result over the data's x range widened by margin."""
        points = list(points)
        min_x, max_x = curve_range(points, margin)
        return self.generate_polynomial_points(result, min_x, max_x)

    def __repr__(self) -> str:
        return (
            f"LeastSquaresFitter(pivot_tol={self._pivot_tol:g}, "
            f"tss_tol={self._tss_tol:g}, curve_points={self._curve_points})"
        )
