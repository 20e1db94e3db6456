"""Tests for indicators that own a sub-graph.

Tests for:
- MACD line, signal and histogram
- APO built from the composition operators
- Aroon oscillator over TradeBars
- Reset cascades into every owned node
"""

import pytest

from pandas_ta_incremental.incremental import (
    AbsolutePriceOscillator,
    AroonOscillator,
    ExponentialMovingAverage,
    MovingAverageConvergenceDivergence,
    MovingAverageType,
    TradeBar,
    make_indicator,
)


class TestMACD:
    def test_line_signal_and_histogram(self, ticks) -> None:
        macd = MovingAverageConvergenceDivergence(2, 3, 2)
        ready = [macd.update(ticks(i), v) for i, v in enumerate([1.0, 2.0, 4.0, 8.0, 16.0])]

        assert ready == [False, False, False, True, True]
        assert macd.current.value == pytest.approx(8.0 / 3.0)
        assert macd.signal.current.value == pytest.approx(2.0)
        assert macd.histogram == pytest.approx(2.0 / 3.0)

    def test_signal_waits_for_both_averages(self, ticks) -> None:
        macd = MovingAverageConvergenceDivergence(2, 3, 2)
        macd.update(ticks(0), 1.0)
        macd.update(ticks(1), 2.0)
        assert macd.signal.samples == 0

    def test_exponential_mode(self) -> None:
        macd = MovingAverageConvergenceDivergence(12, 26, 9, MovingAverageType.EXPONENTIAL)
        assert isinstance(macd.fast, ExponentialMovingAverage)
        assert macd.name == "MACD(12,26)"
        assert macd.fast.name == "MACD(12,26)_Fast"

    def test_slow_must_exceed_fast(self) -> None:
        with pytest.raises(ValueError, match="slow_period"):
            MovingAverageConvergenceDivergence(5, 5, 3)

    def test_reset(self, ticks) -> None:
        macd = MovingAverageConvergenceDivergence(2, 3, 2)
        for i in range(5):
            macd.update(ticks(i), float(i))
        macd.reset()
        for node in (macd, macd.fast, macd.slow, macd.signal):
            assert node.samples == 0
            assert not node.is_ready

    def test_registry(self) -> None:
        macd = make_indicator("macd", {"fast": 3, "slow": 6, "signal": 2, "mamode": "EMA"})
        assert isinstance(macd, MovingAverageConvergenceDivergence)
        assert isinstance(macd.signal, ExponentialMovingAverage)
        assert macd.slow.period == 6


class TestAbsolutePriceOscillator:
    def test_values(self, ticks) -> None:
        apo = AbsolutePriceOscillator(2, 3)
        ready = [apo.update(ticks(i), v) for i, v in enumerate([1.0, 2.0, 3.0])]

        assert ready == [False, False, True]
        assert apo.current.value == pytest.approx(23.0 / 9.0 - 9.0 / 4.0)

    def test_one_output_per_input(self, ticks, recorder) -> None:
        apo = AbsolutePriceOscillator(2, 3)
        produced = recorder(apo)
        inner = recorder(apo.difference)
        for i in range(4):
            apo.update(ticks(i), float(i))
        assert len(produced) == 4
        assert len(inner) == 4

    def test_reset_cascades(self, ticks) -> None:
        apo = AbsolutePriceOscillator(2, 3)
        for i in range(5):
            apo.update(ticks(i), 10.0 + i)
        assert apo.is_ready

        apo.reset()

        for node in (apo, apo.price, apo.fast, apo.slow, apo.difference):
            assert node.samples == 0
            assert not node.is_ready
        apo.update(ticks(0), 4.0)
        assert apo.current.value == 0.0

    def test_registry(self) -> None:
        apo = make_indicator("apo", {"fast": 5, "slow": 10})
        assert apo.fast.period == 5
        assert apo.slow.period == 10


class TestAroonOscillator:
    HIGHS = [10.0, 11.0, 12.0, 11.0, 10.0]
    LOWS = [1.0, 2.0, 3.0, 4.0, 5.0]

    def bars(self, ticks):
        return [
            TradeBar(ticks(i), open=low, high=high, low=low, close=high)
            for i, (high, low) in enumerate(zip(self.HIGHS, self.LOWS))
        ]

    def test_oscillator(self, ticks) -> None:
        aroon = AroonOscillator(2, 2)
        values, ready = [], []
        for bar in self.bars(ticks):
            ready.append(aroon.update(bar))
            values.append(aroon.current.value)

        assert values == [0.0, 50.0, 100.0, 50.0, 0.0]
        assert ready == [False, False, True, True, True]

    def test_up_and_down_components(self, ticks) -> None:
        aroon = AroonOscillator(2, 2)
        for bar in self.bars(ticks):
            aroon.update(bar)
        assert aroon.aroon_up.current.value == 0.0
        assert aroon.aroon_down.current.value == 0.0

    def test_reset(self, ticks) -> None:
        aroon = AroonOscillator(2, 2)
        for bar in self.bars(ticks):
            aroon.update(bar)
        aroon.reset()
        for node in (aroon, aroon.aroon_up, aroon.aroon_down):
            assert node.samples == 0
            assert not node.is_ready

    def test_bad_period(self) -> None:
        with pytest.raises(ValueError, match="up_period"):
            AroonOscillator(0, 2)

    def test_registry_length_fills_both_sides(self) -> None:
        aroon = make_indicator("aroon", {"length": 5, "down": 3})
        assert aroon.name == "AROON(5,3)"
