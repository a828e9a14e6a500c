"""
PyQuadFit: least-squares quadratic curve fitting for Python.

Fits y = a + b·x + c·x² to 2-D sample points, reports goodness-of-fit
statistics and produces dense curve samples for plotting.

Submodules:
    polynomial: Quadratic least-squares fitting
    core: Exceptions, result envelope, validation, linear algebra
"""

__version__ = "0.1.0"

from pyquadfit import core
from pyquadfit import polynomial
from pyquadfit.core import Point2D
from pyquadfit.polynomial import (
    fit,
    generate_polynomial_points,
    LeastSquaresFitter,
    PolynomialResult,
)

__all__ = [
    "__version__",
    "core",
    "polynomial",
    "Point2D",
    "fit",
    "generate_polynomial_points",
    "LeastSquaresFitter",
    "PolynomialResult",
]
