"""
Numerical thresholds and tolerance tiers.

The thresholds below are the library-wide defaults. Every one that
affects a computation can be overridden per call through keyword
arguments on fit() / LeastSquaresFitter; nothing reads them at import
time, so changing a constant here changes the default everywhere.

The tolerance tiers are used by the test suite to compare results
against independent references.
"""

from dataclasses import dataclass


# Elimination fails when the selected pivot magnitude drops below this
PIVOT_TOLERANCE = 1e-12

# Below this total sum of squares, all y are treated as identical and R² = 0
DEGENERATE_TSS_TOLERANCE = 1e-12

# Coefficients smaller than this are left out of the rendered equation
TERM_DISPLAY_TOLERANCE = 1e-10

# Default number of samples in a generated curve
DEFAULT_CURVE_POINTS = 200

# A quadratic has three coefficients
MIN_POINTS = 3


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Agreement with an independent double-precision solver
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches numpy.linalg reference',
)

# Recovery of exact quadratic coefficients through the normal equations
EXACT_FIT = ToleranceTier(
    rtol=0.0,
    atol=1e-8,
    name='exact_fit',
    description='Noise-free data lying on a known quadratic',
)

# Comparison against stored regression baselines
BASELINE = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='baseline',
    description='Reproducibility against recorded reference values',
)
