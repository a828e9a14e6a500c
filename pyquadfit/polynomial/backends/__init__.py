"""
Quadratic fitting backends.

Available backends:
    CPUNormalEquationBackend: normal equations solved by Gaussian elimination
"""

from pyquadfit.polynomial.backends.cpu import CPUNormalEquationBackend

__all__ = [
    "CPUNormalEquationBackend",
]
