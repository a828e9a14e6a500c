"""
Quadratic fitting design.

QuadraticDesign holds the validated sample coordinates and knows how to
reduce them to the 3×3 normal equations of y = a + b·x + c·x².
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyquadfit.core.point import Point2D
from pyquadfit.core.exceptions import ValidationError, DimensionError
from pyquadfit.core.compute.tolerances import MIN_POINTS
from pyquadfit.core.compute.summation import running_total
from pyquadfit.core.validation import (
    check_not_none,
    check_array,
    check_1d,
    check_2d,
    check_consistent_length,
    check_min_samples,
    count_nonfinite,
)


@dataclass(frozen=True)
class NormalSums:
    """
    Power sums that fully determine the quadratic normal equations.

    Each sum is a plain double-precision total over all points.
    """
    n: int
    sum_x: float
    sum_x2: float
    sum_x3: float
    sum_x4: float
    sum_y: float
    sum_xy: float
    sum_x2y: float

    def matrix(self) -> NDArray[np.floating[Any]]:
        """Symmetric normal-equation matrix X'X for columns (1, x, x²)."""
        return np.array([
            [self.n, self.sum_x, self.sum_x2],
            [self.sum_x, self.sum_x2, self.sum_x3],
            [self.sum_x2, self.sum_x3, self.sum_x4],
        ], dtype=np.float64)

    def rhs(self) -> NDArray[np.floating[Any]]:
        """Right-hand side X'y."""
        return np.array([self.sum_y, self.sum_xy, self.sum_x2y], dtype=np.float64)

    def as_dict(self) -> dict[str, float]:
        return {
            'n': self.n,
            'sum_x': self.sum_x,
            'sum_x2': self.sum_x2,
            'sum_x3': self.sum_x3,
            'sum_x4': self.sum_x4,
            'sum_y': self.sum_y,
            'sum_xy': self.sum_xy,
            'sum_x2y': self.sum_x2y,
        }


@dataclass(frozen=True)
class QuadraticDesign:
    """
    Validated sample data for a quadratic least-squares fit.

    Immutable after construction.

    Construction:
        QuadraticDesign.from_points([Point2D(0, 1), Point2D(1, 2), ...])
        QuadraticDesign.from_points([(0, 1), (1, 2), ...])
        QuadraticDesign.from_arrays(x, y)

    Non-finite coordinates are accepted; they propagate into the fit and
    are counted in n_nonfinite so the backend can report them.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_points(cls, points: Iterable[Point2D | tuple[float, float]] | None) -> QuadraticDesign:
        """
        Build design from a collection of points.

        Args:
            points: Point2D instances or (x, y) pairs, in any order

        Raises:
            ValidationError: If points is None or not a collection of pairs
            InsufficientPointsError: If fewer than 3 points are given
        """
        x, y = points_to_arrays(points, 'points')
        return cls._build(x, y)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> QuadraticDesign:
        """Build design directly from coordinate arrays."""
        check_not_none(x, 'x')
        check_not_none(y, 'y')
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> QuadraticDesign:
        """Internal builder with validation."""
        check_min_samples(x, MIN_POINTS, 'points')
        # Private copies so later mutation of caller arrays cannot leak in
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y, _n=int(x.shape[0]))

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Sample abscissae (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Sample ordinates (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of points."""
        return self._n

    @property
    def n_nonfinite(self) -> int:
        """Number of NaN/Inf coordinates across x and y."""
        return sum(count_nonfinite(self._x)) + sum(count_nonfinite(self._y))

    def sums(self) -> NormalSums:
        """
        Accumulate the seven power sums of the normal equations.

        Each sum is a plain running total in input order.
        """
        x, y = self._x, self._y
        x2 = x * x
        x3 = x2 * x
        x4 = x3 * x
        return NormalSums(
            n=self._n,
            sum_x=running_total(x),
            sum_x2=running_total(x2),
            sum_x3=running_total(x3),
            sum_x4=running_total(x4),
            sum_y=running_total(y),
            sum_xy=running_total(x * y),
            sum_x2y=running_total(x2 * y),
        )

    def normal_equations(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Return (X'X, X'y) for the model columns (1, x, x²)."""
        sums = self.sums()
        return sums.matrix(), sums.rhs()


def points_to_arrays(
    points: Iterable[Point2D | tuple[float, float]] | None,
    name: str,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Split a collection of points into x and y arrays.

    Generators are consumed once. Point2D instances and plain (x, y)
    pairs may be mixed.

    Raises:
        ValidationError: If points is None or an element is not a pair
    """
    check_not_none(points, name)
    try:
        pairs = [tuple(p) for p in points]
    except TypeError as e:
        raise ValidationError(f"{name}: expected a collection of (x, y) pairs: {e}") from e

    if not pairs:
        empty = np.empty(0, dtype=np.float64)
        return empty, empty.copy()

    coords = check_array(pairs, name)
    check_2d(coords, name)
    if coords.shape[1] != 2:
        raise DimensionError(
            f"{name}: expected (x, y) pairs, got elements of length {coords.shape[1]}"
        )
    return coords[:, 0].copy(), coords[:, 1].copy()
