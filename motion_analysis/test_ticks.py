"""Tests for motion_analysis.ticks -- nice axis ticks and domains."""

import math

import pytest

from motion_analysis.ticks import nice_step, plan_series_ticks, plan_ticks


def _steps(ticks):
    return [round(b - a, 9) for a, b in zip(ticks, ticks[1:])]


class TestNiceStep:

    @pytest.mark.parametrize("raw, expected", [
        (0.2, 0.2),
        (0.7, 1.0),
        (1.5, 2.0),
        (3.0, 5.0),
        (7.0, 10.0),
        (20.0, 20.0),
        (2100.0, 5000.0),
    ])
    def test_rounds_to_one_two_five(self, raw, expected):
        assert nice_step(raw) == pytest.approx(expected)


class TestLoosePadding:

    def test_unit_range(self):
        plan = plan_ticks(0, 1, 6, False)
        assert plan.ticks == pytest.approx([-0.2, 0.0, 0.2, 0.4, 0.6, 0.8, 1.0, 1.2])
        assert all(a < b for a, b in zip(plan.ticks, plan.ticks[1:]))
        assert plan.domain[0] <= 0 and plan.domain[1] >= 1
        assert plan.ticks[0] <= 0 and plan.ticks[-1] >= 1

    def test_domain_is_step_aligned(self):
        plan = plan_ticks(0, 10.5, 6, False)
        assert plan.domain == pytest.approx((-5.0, 15.0))
        assert plan.ticks == pytest.approx([-5.0, 0.0, 5.0, 10.0, 15.0])

    def test_ticks_are_rounded(self):
        plan = plan_ticks(0.1, 0.7, 6)
        assert all(t == round(t, 10) for t in plan.ticks)
        assert 0.30000000000000004 not in plan.ticks

    def test_swapped_bounds(self):
        assert plan_ticks(10, -3) == plan_ticks(-3, 10)


class TestTightPadding:

    def test_hundred_range(self):
        plan = plan_ticks(0, 100, 6, True)
        assert plan.ticks == pytest.approx([-20.0, 0.0, 20.0, 40.0, 60.0, 80.0, 100.0, 120.0])
        assert plan.domain == pytest.approx((-20.0, 120.0))

    def test_step_not_much_larger_than_raw(self):
        plan = plan_ticks(0, 10.5, 6, True)
        # raw step 2.1 would round to 5, which is more than twice the raw step
        assert set(_steps(plan.ticks)) == {0.5}
        assert plan.domain == pytest.approx((-0.5, 11.0))

    def test_expansion_is_capped(self):
        lo, hi = -3.7, 81.2
        plan = plan_ticks(lo, hi, 6, True)
        step = plan.ticks[1] - plan.ticks[0]
        limit = max((hi - lo) * 0.15, step * 2) + step
        assert lo - plan.domain[0] <= limit
        assert plan.domain[1] - hi <= limit
        assert plan.domain[0] <= lo and plan.domain[1] >= hi


class TestDegenerateRange:

    def test_equal_bounds_loose(self):
        plan = plan_ticks(5, 5)
        assert plan.ticks == [5]
        assert plan.domain == pytest.approx((4.9, 5.1))

    def test_equal_bounds_tight(self):
        plan = plan_ticks(5, 5, tight_padding=True)
        assert plan.domain == pytest.approx((4.5, 5.5))

    def test_zero_tight_uses_minimum_padding(self):
        plan = plan_ticks(0, 0, tight_padding=True)
        assert plan.ticks == [0]
        assert plan.domain == pytest.approx((-0.01, 0.01))

    def test_non_finite(self):
        plan = plan_ticks(float("nan"), float("nan"))
        assert plan.ticks == [0.0]
        assert all(math.isfinite(v) for v in plan.domain)

    def test_tick_count_below_two_raises(self):
        with pytest.raises(ValueError):
            plan_ticks(0, 1, 1)


class TestExtremeRanges:

    def test_range_wider_than_float_max(self):
        plan = plan_ticks(-1e308, 1e308, 6)
        assert all(math.isfinite(t) for t in plan.ticks)
        assert plan.domain[0] <= -1e308 and plan.domain[1] >= 1e308
        assert all(math.isfinite(v) for v in plan.domain)

    @pytest.mark.parametrize("tight", [False, True])
    def test_padded_bound_overflows(self, tight):
        plan = plan_ticks(0.0, 1.7e308, 6, tight)
        assert all(math.isfinite(t) for t in plan.ticks)
        assert plan.ticks == sorted(plan.ticks)
        assert plan.domain[0] <= 0.0 and plan.domain[1] >= 1.7e308

    def test_subnormal_range(self):
        plan = plan_ticks(0.0, 1e-320, 6)
        assert all(math.isfinite(t) for t in plan.ticks)
        assert plan.domain[0] <= 0.0 and plan.domain[1] >= 1e-320


class TestSeriesTicks:

    def test_empty_series_placeholder(self):
        plan = plan_series_ticks([])
        assert plan.ticks == [0.0]
        assert plan.domain == (0.0, 1.0)

    def test_ignores_non_finite_values(self):
        assert plan_series_ticks([0.0, float("nan"), 1.0, float("inf")]) == plan_ticks(0.0, 1.0)
