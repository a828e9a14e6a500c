"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyquadfit.core.point import Point2D


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_quadratic_points():
    """Noise-free points on y = 2 - 3x + 0.5x² with distinct x."""
    a, b, c = 2.0, -3.0, 0.5
    xs = [-2.0, -1.0, 0.0, 0.5, 1.5, 3.0, 4.0]
    points = [Point2D(x, a + b * x + c * x * x) for x in xs]
    return points, (a, b, c)


@pytest.fixture
def noisy_quadratic_data(rng):
    """100 noisy samples of y = 1 + 2x - 0.75x² on [-3, 3]."""
    n = 100
    beta_true = np.array([1.0, 2.0, -0.75])
    x = rng.uniform(-3.0, 3.0, n)
    y = beta_true[0] + beta_true[1] * x + beta_true[2] * x ** 2 + rng.standard_normal(n) * 0.1
    return x, y, beta_true
