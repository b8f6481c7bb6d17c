"""Tests for band and linear scales."""

import math

import pytest

from rainfall.scales import (
    EMPTY_DOMAIN_MAX,
    BandScale,
    LinearScale,
    nice_ticks,
    value_domain_max,
)


class TestBandScale:
    def test_slots_are_uniform_and_ordered(self):
        band = BandScale(["a", "b", "c"], (0, 790), padding=0.3)

        xs = [band(c) for c in ["a", "b", "c"]]

        assert xs == sorted(xs)
        assert xs[1] - xs[0] == pytest.approx(band.step)
        assert xs[2] - xs[1] == pytest.approx(band.step)

    def test_padding_is_gap_fraction_of_step(self):
        band = BandScale(["a", "b", "c", "d"], (0, 790), padding=0.3)
        assert band.bandwidth == pytest.approx(band.step * 0.7)

    def test_bands_are_centred_in_range(self):
        band = BandScale(["a", "b"], (0, 790), padding=0.3)

        left_gap = band("a")
        right_gap = 790 - (band("b") + band.bandwidth)

        assert left_gap == pytest.approx(right_gap)
        assert left_gap == pytest.approx(band.step * 0.3)

    def test_single_category(self):
        band = BandScale(["only"], (0, 100), padding=0.3)
        assert band("only") + band.bandwidth / 2 == pytest.approx(50)

    def test_unknown_category(self):
        band = BandScale(["a"], (0, 100))
        assert band("zzz") is None
        assert band.center("zzz") is None

    def test_empty_domain(self):
        band = BandScale([], (0, 790))
        assert band("a") is None

    def test_rejects_full_padding(self):
        with pytest.raises(ValueError):
            BandScale(["a"], (0, 100), padding=1.0)


class TestLinearScale:
    def test_inverted_range(self):
        y = LinearScale((0, 100), (360, 0))

        assert y(0) == pytest.approx(360)
        assert y(100) == pytest.approx(0)
        assert y(50) == pytest.approx(180)

    def test_higher_values_never_below_baseline(self):
        y = LinearScale((0, 57.5), (360, 0))
        for v in [0, 0.1, 10, 50, 57.5]:
            assert y(v) <= y(0)

    def test_empty_domain_rejected(self):
        with pytest.raises(ValueError):
            LinearScale((0, 0), (360, 0))

    def test_tick_format_decimals_follow_step(self):
        assert LinearScale((0, 230), (360, 0)).tick_format(8)(20.0) == "20"
        assert LinearScale((0, 1), (360, 0)).tick_format(8)(0.1) == "0.1"


class TestDomainMax:
    def test_headroom(self):
        assert value_domain_max([10, 50, 20]) == pytest.approx(57.5)

    def test_all_zero_falls_back(self):
        assert value_domain_max([0, 0]) == EMPTY_DOMAIN_MAX

    def test_empty_falls_back(self):
        assert value_domain_max([]) == EMPTY_DOMAIN_MAX

    def test_headroom_is_dropped_when_it_would_overflow(self):
        assert value_domain_max([1.7e308]) == 1.7e308


class TestNiceTicks:
    def test_round_steps(self):
        assert nice_ticks(0, 230, 8) == [0, 20, 40, 60, 80, 100, 120, 140, 160, 180, 200, 220]

    def test_small_steps_are_exact(self):
        assert nice_ticks(0, 1, 8) == [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]

    def test_ticks_stay_within_domain(self):
        ticks = nice_ticks(0, 384.4, 8)
        assert ticks[0] == 0
        assert ticks[-1] <= 384.4
        steps = {round(b - a, 9) for a, b in zip(ticks, ticks[1:])}
        assert len(steps) == 1

    def test_zero_count(self):
        assert nice_ticks(0, 10, 0) == []

    def test_domain_near_float_max(self):
        ticks = nice_ticks(0, 1.7e308, 8)
        assert ticks[0] == 0
        assert all(math.isfinite(t) for t in ticks)
        assert ticks[-1] <= 1.7e308
