"""
Two-dimensional sample point.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point2D:
    """
    Immutable (x, y) pair of real coordinates.

    Non-finite coordinates are accepted and propagate through any
    arithmetic that uses them.

    Unpacks like a tuple:
        >>> x, y = Point2D(1.0, 2.0)
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
