"""
Quadratic fit solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyquadfit.core.point import Point2D
from pyquadfit.core.result import Result
from pyquadfit.polynomial._format import format_equation


@dataclass(frozen=True)
class QuadraticParams:
    """
    Parameter payload for a quadratic least-squares fit.

    This is the immutable data computed by backends. fitted_values and
    residuals follow the order of the input points.
    """
    a: float
    b: float
    c: float
    r_squared: float
    rmse: float
    rss: float
    tss: float
    n_points: int
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]


def evaluate_quadratic(
    a: float,
    b: float,
    c: float,
    x: float | ArrayLike,
) -> float | NDArray[np.floating[Any]]:
    """
    Evaluate a + b·x + c·x².

    Scalars give a float, array-likes give an array of the same shape.
    NaN and Inf follow IEEE-754 arithmetic.
    """
    if np.ndim(x) == 0:
        x = float(x)
        return a + b * x + c * x * x
    x = np.asarray(x, dtype=np.float64)
    return a + b * x + c * x * x


@dataclass(frozen=True, eq=False)
class PolynomialResult:
    """
    User-facing result of a quadratic least-squares fit.

    Wraps the backend Result and provides convenient accessors for the
    coefficients of y = a + b·x + c·x² and the fit statistics. Holds no
    reference to the points it was fitted from. Compares and hashes by
    identity; compare coefficients explicitly.
    """
    _result: Result[QuadraticParams]

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float) -> PolynomialResult:
        """
        Wrap known coefficients without fitting.

        Statistics are unknown for such a result and are reported as NaN.
        """
        empty = np.empty(0, dtype=np.float64)
        params = QuadraticParams(
            a=float(a),
            b=float(b),
            c=float(c),
            r_squared=float('nan'),
            rmse=float('nan'),
            rss=float('nan'),
            tss=float('nan'),
            n_points=0,
            fitted_values=empty,
            residuals=empty,
        )
        return cls(_result=Result(
            params=params,
            info={'method': 'coefficients'},
            timing=None,
            backend_name='none',
        ))

    # === Coefficients ===

    @property
    def a(self) -> float:
        """Constant term."""
        return self._result.params.a

    @property
    def b(self) -> float:
        """Linear coefficient."""
        return self._result.params.b

    @property
    def c(self) -> float:
        """Quadratic coefficient."""
        return self._result.params.c

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients (a, b, c) in increasing power order."""
        return np.array([self.a, self.b, self.c], dtype=np.float64)

    # === Statistics ===

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def root_mean_square_error(self) -> float:
        return self._result.params.rmse

    @property
    def rmse(self) -> float:
        return self._result.params.rmse

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def n_points(self) -> int:
        return self._result.params.n_points

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    # === Envelope ===

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    # === Evaluation ===

    def evaluate_at(self, x: float | ArrayLike) -> float | NDArray[np.floating[Any]]:
        """Evaluate the fitted polynomial at x (scalar or array)."""
        return evaluate_quadratic(self.a, self.b, self.c, x)

    def residual_segments(
        self,
        points: Iterable[Point2D | tuple[float, float]],
    ) -> list[tuple[float, float, float]]:
        """
        Pair each point with the model prediction at its x.

        Returns:
            (x, observed y, predicted y) per point, for drawing the
            vertical residual lines between data and curve
        """
        segments = []
        for x, y in points:
            segments.append((float(x), float(y), self.evaluate_at(x)))
        return segments

    # === Rendering ===

    @property
    def equation(self) -> str:
        """Equation text, e.g. 'y = 1.0000 - 2.0000x + 0.5000x²'."""
        return format_equation(self.a, self.b, self.c)

    def summary(self) -> str:
        """Generate a plain-text report of the fit."""
        lines = [
            "Quadratic Least Squares Fit",
            "=" * 48,
            f"Points: {self.n_points}",
            f"Equation: {self.equation}",
            "",
            "Coefficients:",
            "-" * 48,
            f"  a (1):   {self.a:16.6f}",
            f"  b (x):   {self.b:16.6f}",
            f"  c (x²):  {self.c:16.6f}",
            "-" * 48,
            f"R-squared: {self.r_squared:.4f}",
            f"RMSE: {self.rmse:.6f}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.equation

    def __repr__(self) -> str:
        return (
            f"PolynomialResult(a={self.a:.6g}, b={self.b:.6g}, c={self.c:.6g}, "
            f"r_squared={self.r_squared:.4f}, n_points={self.n_points})"
        )
