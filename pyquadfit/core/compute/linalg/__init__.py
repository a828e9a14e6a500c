"""
Linear algebra kernels for PyQuadFit.

All functions follow these conventions:
    - Inputs are array-likes, converted and validated at the boundary
    - Outputs are float64 NumPy arrays
    - Errors are raised immediately with clear messages

Submodules:
    gauss: Gaussian elimination with partial pivoting
"""

from pyquadfit.core.compute.linalg.gauss import solve_linear_system

__all__ = [
    "solve_linear_system",
]
