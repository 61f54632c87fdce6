"""
Tests for the section Timer.
"""

import pytest

from pyols.core.compute.timing import Timer


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('gram'):
            pass
        with timer.section('invert'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'gram', 'invert'}
        assert all(v >= 0.0 for v in result.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('fit'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'fit']

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('bad'):
                1 / 0
        timer.stop()
        assert 'bad' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
