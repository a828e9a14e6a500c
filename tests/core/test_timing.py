"""
Tests for execution timing utilities.
"""

import pytest

from pyquadfit.core.compute.timing import Timer


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('sums'):
            pass
        with timer.section('solve'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'sums', 'solve'}
        assert all(v >= 0.0 for v in result.values())

    def test_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section('solve'):
            pass
        first = timer._sections['solve']
        with timer.section('solve'):
            pass
        timer.stop()
        assert timer.result()['solve'] >= first

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
