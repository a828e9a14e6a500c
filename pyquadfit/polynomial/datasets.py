"""
Reference datasets for quadratic fitting examples and regression tests.

Values are exact and must not be edited; the regression baselines in
the test suite depend on them.
"""

from dataclasses import dataclass

from pyquadfit.core.point import Point2D


@dataclass(frozen=True)
class DatasetInfo:
    """A named collection of sample points."""
    name: str
    description: str
    points: tuple[Point2D, ...]


MZ_OMEGA_Z = DatasetInfo(
    name='MzOmegaZ',
    description='MzOmegaZ data set',
    points=(
        Point2D(0.0, -13.0),
        Point2D(0.2, -13.1),
        Point2D(0.4, -13.2),
        Point2D(0.6, -13.7),
        Point2D(0.8, -14.7),
        Point2D(0.9, -15.9),
        Point2D(1.0, -14.2),
    ),
)

MX_DELTA_H = DatasetInfo(
    name='MxDeltaH',
    description='MxDeltaH data set',
    points=(
        Point2D(0.6, -0.0004),
        Point2D(0.7, -0.000399),
        Point2D(0.8, -0.000399),
        Point2D(0.9, -0.00032),
        Point2D(1.0, -0.00026),
        Point2D(1.05, -0.000255),
    ),
)

_ALL = (MZ_OMEGA_Z, MX_DELTA_H)


def get_all_datasets() -> list[DatasetInfo]:
    """All bundled datasets, in display order."""
    return list(_ALL)


def get_dataset(name: str) -> DatasetInfo:
    """
    Look up a bundled dataset by name.

    Raises:
        KeyError: If no dataset has that name
    """
    for info in _ALL:
        if info.name == name:
            return info
    available = [info.name for info in _ALL]
    raise KeyError(f"No dataset named {name!r}. Available: {available}")
