"""
CPU backend for quadratic least squares.

Solves the 3×3 normal equations with Gaussian elimination and partial
pivoting, then evaluates the fitted model at every input point to
compute the goodness-of-fit statistics.
"""

from typing import Any

from pyquadfit.core.result import Result
from pyquadfit.core.compute.timing import Timer
from pyquadfit.core.compute.linalg.gauss import solve_linear_system
from pyquadfit.core.compute.tolerances import PIVOT_TOLERANCE, DEGENERATE_TSS_TOLERANCE
from pyquadfit.core.validation import check_positive, check_non_negative
from pyquadfit.polynomial.design import QuadraticDesign
from pyquadfit.polynomial.solution import QuadraticParams, evaluate_quadratic
from pyquadfit.polynomial._statistics import compute_fit_statistics


class CPUNormalEquationBackend:
    """
    CPU backend using the normal equations.

    Holds only its thresholds, never per-fit state, so one instance can
    serve any number of fits from any number of threads.
    """

    def __init__(
        self,
        *,
        pivot_tol: float = PIVOT_TOLERANCE,
        tss_tol: float = DEGENERATE_TSS_TOLERANCE,
    ):
        check_positive(pivot_tol, 'pivot_tol')
        check_non_negative(tss_tol, 'tss_tol')
        self._pivot_tol = pivot_tol
        self._tss_tol = tss_tol

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: QuadraticDesign) -> Result[QuadraticParams]:
        """
        Fit y = a + b·x + c·x² to the design's points.

        Algorithm:
            1. Accumulate Σx, Σx², Σx³, Σx⁴, Σy, Σxy, Σx²y
            2. Assemble the normal equations X'X β = X'y
            3. Solve for β = (a, b, c) by Gaussian elimination
            4. Compute fitted values, residuals, TSS, RSS, R², RMSE

        Args:
            design: Validated quadratic design

        Returns:
            Result containing QuadraticParams

        Raises:
            SingularMatrixError: If the normal matrix is singular, e.g.
                fewer than three distinct x values
        """
        timer = Timer()
        timer.start()

        warnings: list[str] = []
        n_nonfinite = design.n_nonfinite
        if n_nonfinite:
            warnings.append(
                f"Input contains {n_nonfinite} non-finite coordinate(s); "
                f"NaN/Inf will propagate into the fit"
            )

        # === Normal equations ===
        with timer.section('sums'):
            sums = design.sums()
            matrix = sums.matrix()
            rhs = sums.rhs()

        with timer.section('solve'):
            a, b, c = solve_linear_system(
                matrix, rhs, pivot_tol=self._pivot_tol, matrix_name="X'X"
            ).tolist()

        # === Fit quality ===
        with timer.section('statistics'):
            fitted_values = evaluate_quadratic(a, b, c, design.x)
            residuals = design.y - fitted_values
            stats = compute_fit_statistics(design.y, fitted_values, tss_tol=self._tss_tol)

        timer.stop()

        fitted_values.flags.writeable = False
        residuals.flags.writeable = False

        params = QuadraticParams(
            a=a,
            b=b,
            c=c,
            r_squared=stats.r_squared,
            rmse=stats.rmse,
            rss=stats.rss,
            tss=stats.tss,
            n_points=design.n,
            fitted_values=fitted_values,
            residuals=residuals,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'solver': 'gauss_partial_pivoting',
            'n_points': design.n,
            'mean_y': stats.mean_y,
            'normal_sums': sums.as_dict(),
            'pivot_tol': self._pivot_tol,
            'tss_tol': self._tss_tol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
