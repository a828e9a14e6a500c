"""
Tests for Gaussian elimination with partial pivoting.

Validates:
    - Agreement with numpy.linalg.solve on well-conditioned systems of any order
    - Row exchanges when a leading entry is zero or small
    - Singular and near-singular systems raise SingularMatrixError
    - Configurable pivot tolerance
    - Shape validation and input immutability
"""

import numpy as np
import pytest

from pyquadfit.core.compute.linalg import solve_linear_system
from pyquadfit.core.compute.tolerances import CPU_FP64
from pyquadfit.core.exceptions import (
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Correct solutions
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_identity(self):
        x = solve_linear_system(np.eye(3), [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])

    def test_known_3x3(self):
        A = [[2.0, 1.0, -1.0],
             [-3.0, -1.0, 2.0],
             [-2.0, 1.0, 2.0]]
        b = [8.0, -11.0, -3.0]
        x = solve_linear_system(A, b)
        np.testing.assert_allclose(x, [2.0, 3.0, -1.0], rtol=0, atol=1e-12)

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 10])
    def test_matches_numpy(self, rng, n):
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        b = rng.standard_normal(n)
        x = solve_linear_system(A, b)
        np.testing.assert_allclose(
            x, np.linalg.solve(A, b), rtol=CPU_FP64.rtol, atol=CPU_FP64.atol
        )

    def test_zero_leading_entry_requires_swap(self):
        A = [[0.0, 1.0],
             [1.0, 0.0]]
        x = solve_linear_system(A, [3.0, 4.0])
        np.testing.assert_array_equal(x, [4.0, 3.0])

    def test_small_leading_entry(self):
        """Partial pivoting keeps accuracy where naive elimination loses it."""
        A = [[1e-10, 1.0],
             [1.0, 1.0]]
        b = [1.0, 2.0]
        x = solve_linear_system(A, b)
        np.testing.assert_allclose(x, np.linalg.solve(A, b), rtol=1e-12)

    def test_returns_float64_vector(self):
        x = solve_linear_system([[4]], [2])
        assert x.dtype == np.float64
        assert x.shape == (1,)
        assert x[0] == 0.5

    def test_empty_system(self):
        x = solve_linear_system(np.zeros((0, 0)), np.zeros(0))
        assert x.shape == (0,)

    def test_inputs_not_modified(self):
        A = np.array([[0.0, 2.0], [3.0, 1.0]])
        b = np.array([4.0, 5.0])
        A_copy, b_copy = A.copy(), b.copy()
        solve_linear_system(A, b)
        np.testing.assert_array_equal(A, A_copy)
        np.testing.assert_array_equal(b, b_copy)


# ═══════════════════════════════════════════════════════════════════════
# Singular systems
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError, match="singular or ill-conditioned") as exc_info:
            solve_linear_system(np.zeros((3, 3)), np.ones(3))
        err = exc_info.value
        assert err.pivot_index == 0
        assert err.rank == 0
        assert err.expected_rank == 3

    def test_dependent_rows(self):
        A = [[1.0, 2.0, 3.0],
             [2.0, 4.0, 6.0],
             [1.0, 0.0, 1.0]]
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_linear_system(A, [1.0, 2.0, 3.0])
        assert exc_info.value.pivot_index == 2
        assert exc_info.value.rank == 2

    def test_matrix_name_in_error(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_linear_system(np.zeros((2, 2)), np.zeros(2), matrix_name="X'X")
        assert exc_info.value.matrix_name == "X'X"

    def test_is_numerical_not_validation(self):
        with pytest.raises(NumericalError):
            solve_linear_system(np.zeros((2, 2)), np.zeros(2))
        try:
            solve_linear_system(np.zeros((2, 2)), np.zeros(2))
        except SingularMatrixError as err:
            assert not isinstance(err, ValidationError)

    def test_pivot_just_below_threshold(self):
        with pytest.raises(SingularMatrixError):
            solve_linear_system([[5e-13]], [1.0])

    def test_pivot_at_threshold_accepted(self):
        x = solve_linear_system([[1e-12]], [1e-12])
        np.testing.assert_allclose(x, [1.0])

    def test_custom_pivot_tolerance(self):
        A = [[1e-6, 0.0], [0.0, 1.0]]
        solve_linear_system(A, [1.0, 1.0])
        with pytest.raises(SingularMatrixError):
            solve_linear_system(A, [1.0, 1.0], pivot_tol=1e-3)

    @pytest.mark.parametrize("pivot_tol", [float('nan'), 0.0, -1e-12])
    def test_invalid_pivot_tolerance(self, pivot_tol):
        with pytest.raises(ValidationError, match="pivot_tol"):
            solve_linear_system([[1.0, 1.0], [1.0, 1.0]], [1.0, 2.0], pivot_tol=pivot_tol)


# ═══════════════════════════════════════════════════════════════════════
# Shape validation
# ═══════════════════════════════════════════════════════════════════════


class TestShapes:

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            solve_linear_system(np.zeros((2, 3)), np.zeros(2))

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            solve_linear_system(np.eye(3), np.zeros(2))

    def test_matrix_not_2d(self):
        with pytest.raises(DimensionError):
            solve_linear_system(np.zeros(3), np.zeros(3))

    def test_rhs_not_1d(self):
        with pytest.raises(DimensionError):
            solve_linear_system(np.eye(2), np.zeros((2, 1)))
