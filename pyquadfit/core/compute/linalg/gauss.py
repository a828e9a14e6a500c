"""
Gaussian elimination with partial pivoting.

A dense direct solver for square systems A x = b. It works for any order
n; the quadratic fitter only ever calls it with the 3×3 normal equations.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyquadfit.core.exceptions import SingularMatrixError
from pyquadfit.core.compute.tolerances import PIVOT_TOLERANCE
from pyquadfit.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_square,
    check_consistent_length,
    check_positive,
)


def solve_linear_system(
    matrix: ArrayLike,
    rhs: ArrayLike,
    *,
    pivot_tol: float = PIVOT_TOLERANCE,
    matrix_name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Algorithm:
        1. Build the augmented matrix [A | b] (n x n+1); inputs are not modified
        2. For each column k, swap in the row among k..n-1 with the largest
           |entry| in column k, then eliminate column k from the rows below
        3. Back-substitute from row n-1 up to row 0

    Args:
        matrix: Square coefficient matrix (n x n)
        rhs: Right-hand side vector (n,)
        pivot_tol: Smallest acceptable pivot magnitude after row selection
        matrix_name: Name used in the error raised for a singular system

    Returns:
        Solution vector x (n,)

    Raises:
        DimensionError: If matrix is not square or rhs length differs from n
        ValidationError: If pivot_tol is not positive
        SingularMatrixError: If a selected pivot magnitude is below pivot_tol
    """
    check_positive(pivot_tol, 'pivot_tol')
    A = check_array(matrix, 'matrix')
    b = check_array(rhs, 'rhs')
    check_2d(A, 'matrix')
    check_square(A, 'matrix')
    check_1d(b, 'rhs')
    check_consistent_length(A, b, names=('matrix', 'rhs'))

    n = b.shape[0]
    augmented = np.column_stack([A, b])

    # === Forward elimination ===
    for k in range(n):
        # argmax keeps the first row on ties, so equal candidates never swap
        pivot_row = k + int(np.argmax(np.abs(augmented[k:, k])))
        if pivot_row != k:
            augmented[[k, pivot_row]] = augmented[[pivot_row, k]]

        pivot = augmented[k, k]
        if abs(pivot) < pivot_tol:
            raise SingularMatrixError(
                f"System is singular or ill-conditioned: pivot |{pivot:.3e}| "
                f"in column {k} is below {pivot_tol:.1e}",
                matrix_name=matrix_name,
                rank=k,
                expected_rank=n,
                pivot_index=k,
                pivot_value=float(abs(pivot)),
            )

        factors = augmented[k + 1:, k] / pivot
        augmented[k + 1:, k:] -= np.outer(factors, augmented[k, k:])

    # === Back substitution ===
    solution = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        known = augmented[i, i + 1:n] @ solution[i + 1:]
        solution[i] = (augmented[i, n] - known) / augmented[i, i]

    return solution
