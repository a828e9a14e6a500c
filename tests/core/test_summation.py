"""
Tests for sequential running totals.
"""

import numpy as np

from pyquadfit.core.compute.summation import running_total


def _loop_total(values):
    total = 0.0
    for v in values:
        total += float(v)
    return total


class TestRunningTotal:

    def test_empty(self):
        assert running_total(np.empty(0)) == 0.0

    def test_small(self):
        assert running_total(np.array([1.0, 2.0, 3.5])) == 6.5

    def test_matches_plain_loop_bitwise(self, rng):
        values = rng.uniform(-1e3, 1e3, 1000) ** 4
        assert running_total(values) == _loop_total(values)

    def test_small_terms_absorbed_in_order(self):
        # each 1e-16 is lost against the leading 1.0 when added left to right
        values = np.array([1.0] + [1e-16] * 1000)
        assert running_total(values) == 1.0

    def test_order_matters(self):
        values = np.array([1e-16] * 1000 + [1.0])
        assert running_total(values) > 1.0

    def test_returns_python_float(self):
        assert isinstance(running_total(np.arange(4, dtype=np.float64)), float)

    def test_nan_propagates(self):
        assert np.isnan(running_total(np.array([1.0, np.nan, 2.0])))
