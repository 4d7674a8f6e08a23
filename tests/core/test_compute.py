"""
Tests for shared compute infrastructure: Timer and tolerance tiers.
"""

import pytest

from pylinalg.core.compute import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    Timer,
    select_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('elimination'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert result['elimination'] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('step'):
            pass
        first = timer._sections['step']
        with timer.section('step'):
            pass
        timer.stop()
        assert timer.result()['step'] >= first

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:

    def test_default_is_fp64(self):
        assert select_tolerance() is CPU_FP64

    def test_well_conditioned(self):
        assert select_tolerance(10.0) is CPU_FP64

    def test_ill_conditioned(self):
        assert select_tolerance(1e8) is CPU_FP64_ILL_CONDITIONED

    def test_ill_conditioned_is_looser(self):
        assert CPU_FP64_ILL_CONDITIONED.rtol > CPU_FP64.rtol
        assert CPU_FP64_ILL_CONDITIONED.atol > CPU_FP64.atol
