"""
Sequential floating-point accumulation.

np.sum uses pairwise summation, which rounds differently from a plain
left-to-right loop once there are more than a handful of terms. The
normal-equation sums are defined as plain running totals, so they go
through running_total() instead.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def running_total(values: NDArray[np.floating[Any]]) -> float:
    """
    Sum values left to right in float64, one addition per element.

    Equivalent to

        total = 0.0
        for v in values:
            total += v

    but evaluated by np.cumsum, which accumulates strictly in order.

    Args:
        values: 1D array

    Returns:
        The running total after the last element (0.0 when empty)
    """
    if values.shape[0] == 0:
        return 0.0
    return float(np.cumsum(values, dtype=np.float64)[-1])
