"""Tests for the overlap indicators and the indicator registry.

Tests for:
- Identity / WindowIdentity / Delay
- Sum, SMA, EMA (including Wilder's smoothing)
- Maximum / Minimum and their periods-since counters
- MovingAverageType selection
- make_indicator / supported_kinds
"""

import pytest

from pandas_ta_incremental.incremental import (
    INDICATOR_REGISTRY,
    Delay,
    ExponentialMovingAverage,
    Identity,
    IndicatorFactory,
    Maximum,
    Minimum,
    MovingAverageType,
    SimpleMovingAverage,
    Sum,
    WindowIdentity,
    make_indicator,
    smoothing_factor_default,
    supported_kinds,
)


def run(indicator, ticks, values):
    """Feed *values* one per tick; return (value, is_ready) after each."""
    out = []
    for i, value in enumerate(values):
        ready = indicator.update(ticks(i), value)
        out.append((indicator.current.value, ready))
    return out


class TestIdentity:
    def test_passes_values_through(self, ticks) -> None:
        identity = Identity()
        assert not identity.is_ready
        assert run(identity, ticks, [3.0, -1.0]) == [(3.0, True), (-1.0, True)]
        assert identity.name == "identity"

    def test_window_identity_waits_for_period(self, ticks) -> None:
        node = WindowIdentity(3)
        out = run(node, ticks, [1.0, 2.0, 3.0])
        assert out == [(1.0, False), (2.0, False), (3.0, True)]
        assert node.name == "WINDOW3"


class TestDelay:
    def test_repeats_oldest_until_full(self, ticks) -> None:
        delay = Delay(2)
        out = run(delay, ticks, [1.0, 2.0, 3.0, 4.0, 5.0])
        assert out == [(1.0, False), (1.0, False), (1.0, True), (2.0, True), (3.0, True)]

    def test_period_is_the_delay(self) -> None:
        delay = Delay(3)
        assert delay.period == 3
        assert delay.window.size == 4

    def test_zero_delay_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Delay(0)


class TestSum:
    def test_rolling_sum(self, ticks) -> None:
        total = Sum(3)
        out = run(total, ticks, [1.0, 2.0, 3.0, 4.0, 5.0])
        assert [value for value, _ in out] == [1.0, 3.0, 6.0, 9.0, 12.0]
        assert [ready for _, ready in out] == [False, False, True, True, True]

    def test_reset_clears_running_sum(self, ticks) -> None:
        total = Sum(2)
        run(total, ticks, [5.0, 5.0, 5.0])
        total.reset()
        total.update(ticks(10), 1.0)
        assert total.current.value == 1.0


class TestSimpleMovingAverage:
    def test_partial_then_full_window(self, ticks) -> None:
        sma = SimpleMovingAverage(3)
        out = run(sma, ticks, [1.0, 2.0, 3.0, 4.0, 5.0])
        assert [value for value, _ in out] == [1.0, 1.5, 2.0, 3.0, 4.0]
        assert [ready for _, ready in out] == [False, False, True, True, True]

    def test_zero_period_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="period"):
            SimpleMovingAverage(0)


class TestExponentialMovingAverage:
    def test_first_sample_passes_through(self, ticks) -> None:
        ema = ExponentialMovingAverage(3)
        out = run(ema, ticks, [1.0, 2.0, 3.0])
        assert ema.smoothing_factor == 0.5
        assert out == [(1.0, False), (1.5, False), (2.25, True)]

    def test_default_smoothing_factor(self) -> None:
        assert smoothing_factor_default(9) == pytest.approx(0.2)

    @pytest.mark.parametrize("k", [0.0, -0.1, 1.5])
    def test_smoothing_factor_out_of_range(self, k) -> None:
        with pytest.raises(ValueError, match="smoothing_factor"):
            ExponentialMovingAverage(3, k)

    def test_zero_period_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ExponentialMovingAverage(0)


class TestMaximumMinimum:
    def test_maximum_rescans_when_extreme_expires(self, ticks) -> None:
        highest = Maximum(3)
        seen = []
        for i, value in enumerate([3.0, 1.0, 2.0, 0.0]):
            highest.update(ticks(i), value)
            seen.append((highest.current.value, highest.periods_since_maximum))
        assert seen == [(3.0, 0), (3.0, 1), (3.0, 2), (2.0, 1)]
        assert highest.is_ready

    def test_minimum_rescans_when_extreme_expires(self, ticks) -> None:
        lowest = Minimum(3)
        seen = []
        for i, value in enumerate([1.0, 3.0, 2.0, 4.0]):
            lowest.update(ticks(i), value)
            seen.append((lowest.current.value, lowest.periods_since_minimum))
        assert seen == [(1.0, 0), (1.0, 1), (1.0, 2), (2.0, 1)]

    def test_equal_value_restarts_the_count(self, ticks) -> None:
        highest = Maximum(2)
        run(highest, ticks, [5.0, 5.0, 1.0])
        assert highest.current.value == 5.0
        assert highest.periods_since_maximum == 1

    def test_ready_after_period_samples(self, ticks) -> None:
        lowest = Minimum(2)
        out = run(lowest, ticks, [2.0, 1.0])
        assert [ready for _, ready in out] == [False, True]

    def test_reset(self, ticks) -> None:
        highest = Maximum(3)
        run(highest, ticks, [3.0, 1.0])
        highest.reset()
        assert highest.periods_since_maximum == 0
        assert highest.samples == 0
        highest.update(ticks(5), -4.0)
        assert highest.current.value == -4.0


class TestMovingAverageType:
    def test_simple(self) -> None:
        ma = MovingAverageType.SIMPLE.as_indicator("fast", 5)
        assert isinstance(ma, SimpleMovingAverage)
        assert ma.name == "fast"

    def test_exponential(self) -> None:
        ma = MovingAverageType.EXPONENTIAL.as_indicator("fast", 5)
        assert isinstance(ma, ExponentialMovingAverage)
        assert ma.smoothing_factor == pytest.approx(1.0 / 3.0)

    def test_wilders(self) -> None:
        ma = MovingAverageType("rma").as_indicator("slow", 4)
        assert isinstance(ma, ExponentialMovingAverage)
        assert ma.smoothing_factor == 0.25


class TestRegistry:
    def test_supported_kinds(self) -> None:
        kinds = supported_kinds()
        assert kinds == sorted(kinds)
        assert {"identity", "delay", "sum", "sma", "ema", "rma", "max", "min",
                "macd", "apo", "aroon"} <= set(kinds)

    def test_entries_are_factories(self) -> None:
        for kind, factory in INDICATOR_REGISTRY.items():
            assert isinstance(factory, IndicatorFactory)
            assert factory.kind == kind

    def test_builds_fresh_instances(self) -> None:
        first = make_indicator("sma", {"length": 4})
        second = make_indicator("sma", {"length": 4})
        assert first is not second
        assert first.period == 4

    @pytest.mark.parametrize("params", [None, {}, {"length": None}, {"length": "10"}])
    def test_missing_params_use_defaults(self, params) -> None:
        assert make_indicator("sma", params).period == 10

    def test_rma_uses_wilders_smoothing(self) -> None:
        rma = make_indicator("rma", {"length": 5})
        assert rma.smoothing_factor == 0.2
        assert rma.name == "RMA5"

    def test_rma_zero_length(self) -> None:
        with pytest.raises(ValueError, match="length"):
            make_indicator("rma", {"length": 0})

    def test_ema_explicit_smoothing_factor(self) -> None:
        ema = make_indicator("ema", {"length": 5, "smoothing_factor": 0.5})
        assert ema.smoothing_factor == 0.5

    @pytest.mark.parametrize(
        "kind, params, key",
        [
            ("sma", {"length": "ten"}, "length"),
            ("max", {"length": [3]}, "length"),
            ("ema", {"length": 5, "smoothing_factor": "half"}, "smoothing_factor"),
            ("macd", {"fast": "x"}, "fast"),
        ],
    )
    def test_non_numeric_params_are_rejected(self, kind, params, key) -> None:
        with pytest.raises(ValueError, match=key):
            make_indicator(kind, params)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="not found"):
            make_indicator("nope")
