"""
Goodness-of-fit statistics for a fitted quadratic.

These are descriptive only: they are computed after the coefficients are
solved and never influence the fit.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyquadfit.core.compute.tolerances import DEGENERATE_TSS_TOLERANCE
from pyquadfit.core.compute.summation import running_total


@dataclass(frozen=True)
class FitStatistics:
    """Sums of squares and the summary measures derived from them."""
    mean_y: float
    tss: float
    rss: float
    r_squared: float
    rmse: float


def r_squared(rss: float, tss: float, *, tss_tol: float = DEGENERATE_TSS_TOLERANCE) -> float:
    """
    Coefficient of determination 1 - RSS/TSS.

    When TSS does not exceed tss_tol (all y identical) R² is defined as
    exactly 0.0 rather than dividing by a near-zero total.
    """
    if tss > tss_tol:
        return 1.0 - rss / tss
    return 0.0


def compute_fit_statistics(
    y: NDArray[np.floating[Any]],
    fitted: NDArray[np.floating[Any]],
    *,
    tss_tol: float = DEGENERATE_TSS_TOLERANCE,
) -> FitStatistics:
    """
    Compute TSS, RSS, R² and RMSE.

    Args:
        y: Observed values (n,)
        fitted: Model predictions at the observed x (n,)
        tss_tol: Threshold below which TSS is treated as zero

    Returns:
        FitStatistics with RMSE = sqrt(RSS / n)
    """
    n = y.shape[0]
    mean_y = running_total(y) / n
    residuals = y - fitted
    deviations = y - mean_y

    tss = running_total(deviations * deviations)
    rss = running_total(residuals * residuals)

    return FitStatistics(
        mean_y=mean_y,
        tss=tss,
        rss=rss,
        r_squared=r_squared(rss, tss, tss_tol=tss_tol),
        rmse=float(np.sqrt(rss / n)),
    )
