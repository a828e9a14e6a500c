"""
Tests for goodness-of-fit statistics.
"""

import math

import numpy as np
import pytest

from pyquadfit.polynomial._statistics import compute_fit_statistics, r_squared


class TestRSquared:

    def test_perfect_fit(self):
        assert r_squared(0.0, 10.0) == 1.0

    def test_regular(self):
        assert r_squared(2.0, 8.0) == pytest.approx(0.75)

    def test_worse_than_mean_is_negative(self):
        assert r_squared(20.0, 10.0) == pytest.approx(-1.0)

    @pytest.mark.parametrize("tss", [0.0, 1e-13, 1e-12])
    def test_degenerate_tss_is_zero(self, tss):
        value = r_squared(0.0, tss)
        assert value == 0.0
        assert not math.isnan(value)

    def test_just_above_threshold(self):
        assert r_squared(0.0, 2e-12) == 1.0

    def test_custom_tolerance(self):
        assert r_squared(0.5, 1.0, tss_tol=1.0) == 0.0
        assert r_squared(0.5, 1.0, tss_tol=0.1) == 0.5


class TestComputeFitStatistics:

    def test_known_values(self):
        y = np.array([1.0, 2.0, 3.0, 4.0])
        fitted = np.array([1.5, 1.5, 3.5, 3.5])
        stats = compute_fit_statistics(y, fitted)
        assert stats.mean_y == 2.5
        assert stats.tss == 5.0
        assert stats.rss == 1.0
        assert stats.r_squared == pytest.approx(0.8)
        assert stats.rmse == pytest.approx(0.5)

    def test_constant_y(self):
        y = np.full(5, 3.0)
        stats = compute_fit_statistics(y, y.copy())
        assert stats.tss == 0.0
        assert stats.r_squared == 0.0
        assert stats.rmse == 0.0

    def test_nan_propagates(self):
        y = np.array([1.0, np.nan, 3.0])
        stats = compute_fit_statistics(y, np.array([1.0, 2.0, 3.0]))
        assert math.isnan(stats.rss)
        assert math.isnan(stats.rmse)
