"""
Quadratic least-squares fitting.

Fits y = a + b·x + c·x² to a set of 2-D points through the normal
equations, reports R² and RMSE, and resamples the fitted curve for
plotting.

Public API:
    fit(points, ...) -> PolynomialResult
    fit_arrays(x, y, ...) -> PolynomialResult
    generate_polynomial_points(result, min_x, max_x, count=200) -> list[Point2D]
    curve_range(points, margin=0.1) -> (min_x, max_x)
    LeastSquaresFitter: reusable service bundling the above

Example:
    >>> from pyquadfit.polynomial import fit, generate_polynomial_points
    >>> result = fit([(0, 1), (1, 2), (2, 5)])
    >>> print(result)
    y = 1.0000 + 1.0000x²
    >>> curve = generate_polynomial_points(result, 0.0, 2.0, count=50)
"""

from pyquadfit.core.point import Point2D
from pyquadfit.polynomial.design import QuadraticDesign, NormalSums
from pyquadfit.polynomial.solution import PolynomialResult, QuadraticParams
from pyquadfit.polynomial.solvers import (
    fit,
    fit_arrays,
    generate_polynomial_points,
    curve_range,
    LeastSquaresFitter,
)
from pyquadfit.polynomial._format import format_equation
from pyquadfit.polynomial.datasets import DatasetInfo, get_all_datasets, get_dataset

__all__ = [
    "fit",
    "fit_arrays",
    "generate_polynomial_points",
    "curve_range",
    "LeastSquaresFitter",
    "Point2D",
    "QuadraticDesign",
    "NormalSums",
    "PolynomialResult",
    "QuadraticParams",
    "format_equation",
    "DatasetInfo",
    "get_all_datasets",
    "get_dataset",
]
