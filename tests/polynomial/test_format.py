"""
Tests for equation rendering.
"""

import pytest

from pyquadfit.polynomial import fit, format_equation, PolynomialResult


class TestFormatEquation:

    @pytest.mark.parametrize("a,b,c,expected", [
        (1.0, 2.0, 3.0, "y = 1.0000 + 2.0000x + 3.0000x²"),
        (1.0, -2.0, 0.5, "y = 1.0000 - 2.0000x + 0.5000x²"),
        (-1.0, -2.0, -3.0, "y = -1.0000 - 2.0000x - 3.0000x²"),
        (0.0, 3.0, 0.0, "y = 3.0000x"),
        (0.0, -3.0, 2.0, "y = -3.0000x + 2.0000x²"),
        (0.0, 0.0, -1.5, "y = -1.5000x²"),
        (5.0, 0.0, 0.0, "y = 5.0000"),
        (2.0, 0.0, -1.0, "y = 2.0000 - 1.0000x²"),
        (0.0, 0.0, 0.0, "y = 0"),
    ])
    def test_rendering(self, a, b, c, expected):
        assert format_equation(a, b, c) == expected

    def test_tiny_terms_omitted(self):
        assert format_equation(1e-11, 2.0, -5e-11) == "y = 2.0000x"

    def test_all_tiny_is_zero(self):
        assert format_equation(1e-11, -1e-12, 0.0) == "y = 0"

    def test_term_at_threshold_kept(self):
        assert format_equation(0.0, 0.0, 1e-10) == "y = 0.0000x²"

    def test_precision(self):
        assert format_equation(1.23456789, 0.0, 0.0, precision=2) == "y = 1.23"

    def test_custom_tolerance(self):
        assert format_equation(0.01, 1.0, 0.0, tol=0.1) == "y = 1.0000x"


class TestResultRendering:

    def test_str_of_fit(self):
        assert str(fit([(0, 1), (1, 2), (2, 5)])) == "y = 1.0000 + 1.0000x²"

    def test_equation_property(self):
        result = PolynomialResult.from_coefficients(0.0, -2.0, 1.0)
        assert result.equation == "y = -2.0000x + 1.0000x²"
        assert str(result) == result.equation
