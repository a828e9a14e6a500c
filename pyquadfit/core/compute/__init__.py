"""
Shared compute infrastructure for PyQuadFit.

This module provides timing utilities, numerical tolerances and linear
algebra kernels shared by domain backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    summation: Sequential running totals
    tolerances: Numerical thresholds and tolerance tiers
    linalg: Linear algebra kernels (Gaussian elimination)
"""

from pyquadfit.core.compute.timing import Timer
from pyquadfit.core.compute.summation import running_total
from pyquadfit.core.compute.linalg import solve_linear_system

__all__ = [
    # Timing
    "Timer",
    # Summation
    "running_total",
    # Linear algebra
    "solve_linear_system",
]
