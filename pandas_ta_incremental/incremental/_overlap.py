# -*- coding: utf-8 -*-
"""pandas-ta incremental -- overlap / rolling indicators.

Each section follows the pattern:
  1. Indicator class  (formula body plugged into the base contract)
  2. _<kind>_build(params) helper
  3. INDICATOR_REGISTRY["<kind>"] = IndicatorFactory(...)

Readiness legend used throughout:
  samples  -- ready once ``samples >= period`` (recursive formulas)
  window   -- ready once the rolling window is full
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from ._base import (
    Indicator,
    IndicatorBase,
    IndicatorDataPoint,
    IndicatorFactory,
    INDICATOR_REGISTRY,
    _param,
    _as_int,
    _as_float,
    _check_period,
)
from ._window import RollingWindow, WindowIndicator


# ===========================================================================
# Identity
# ===========================================================================
# Passes its input straight through; the usual leaf of a graph.

class Identity(Indicator):
    def __init__(self, name: str = "identity") -> None:
        super().__init__(name)

    @property
    def is_ready(self) -> bool:
        return self.samples > 0

    def _compute_next_value(self, input: IndicatorDataPoint) -> float:
        return input.value


def _identity_build(params: Dict[str, Any]) -> Identity:
    return Identity(str(_param(params, "name", "identity")))


INDICATOR_REGISTRY["identity"] = IndicatorFactory(
    kind="identity",
    build=_identity_build,
    description="pass-through leaf",
)


# ===========================================================================
# WindowIdentity  (window)
# ===========================================================================

class WindowIdentity(WindowIndicator):
    """Identity that is only ready once *period* samples were seen."""

    def __init__(self, period: int, name: Optional[str] = None) -> None:
        super().__init__(name or f"WINDOW{period}", period)

    def _compute_window(self, window: RollingWindow, input: IndicatorDataPoint) -> float:
        return input.value


# ===========================================================================
# Delay  (window)
# ===========================================================================
# Emits the value from `period` samples ago.  Window holds period + 1 items;
# before it fills, the oldest item seen so far is repeated.

class Delay(WindowIndicator):
    def __init__(self, period: int, name: Optional[str] = None) -> None:
        _check_period(period)
        super().__init__(name or f"DELAY{period}", period + 1)
        self._delay = period

    @property
    def period(self) -> int:
        return self._delay

    def _compute_window(self, window: RollingWindow, input: IndicatorDataPoint) -> float:
        return window[len(window) - 1].value


def _delay_build(params: Dict[str, Any]) -> Delay:
    return Delay(_as_int(_param(params, "length", 1), "length"))


INDICATOR_REGISTRY["delay"] = IndicatorFactory(
    kind="delay",
    build=_delay_build,
    description="value from `length` samples ago",
)


# ===========================================================================
# Sum  (window)
# ===========================================================================
# sum[t] = sum[t-1] + x[t] - x[t-period]; the evicted element comes from
# RollingWindow.most_recently_removed.

class Sum(WindowIndicator):
    def __init__(self, period: int, name: Optional[str] = None) -> None:
        super().__init__(name or f"SUM{period}", period)
        self._sum = 0.0

    def _compute_window(self, window: RollingWindow, input: IndicatorDataPoint) -> float:
        self._sum += input.value
        if window.has_removed:
            self._sum -= window.most_recently_removed.value
        return self._sum

    def reset(self) -> None:
        self._sum = 0.0
        super().reset()


def _sum_build(params: Dict[str, Any]) -> Sum:
    return Sum(_as_int(_param(params, "length", 10), "length"))


INDICATOR_REGISTRY["sum"] = IndicatorFactory(
    kind="sum",
    build=_sum_build,
    description="rolling sum",
)


# ===========================================================================
# SMA  (window)
# ===========================================================================
# Mean of the values currently held; until the window fills this is the
# mean of everything seen so far.

class SimpleMovingAverage(WindowIndicator):
    def __init__(self, period: int, name: Optional[str] = None) -> None:
        super().__init__(name or f"SMA{period}", period)
        self._sum = 0.0

    def _compute_window(self, window: RollingWindow, input: IndicatorDataPoint) -> float:
        self._sum += input.value
        if window.has_removed:
            self._sum -= window.most_recently_removed.value
        return self._sum / len(window)

    def reset(self) -> None:
        self._sum = 0.0
        super().reset()


def _sma_build(params: Dict[str, Any]) -> SimpleMovingAverage:
    return SimpleMovingAverage(_as_int(_param(params, "length", 10), "length"))


INDICATOR_REGISTRY["sma"] = IndicatorFactory(
    kind="sma",
    build=_sma_build,
    description="simple moving average",
)


# ===========================================================================
# EMA  (samples)
# ===========================================================================
# ema[0] = x[0];  ema[t] = k * x[t] + (1 - k) * ema[t-1]
# k = 2 / (period + 1) unless a smoothing factor is given (Wilder: 1/period).

def smoothing_factor_default(period: int) -> float:
    return 2.0 / (period + 1.0)


class ExponentialMovingAverage(Indicator):
    def __init__(
        self,
        period: int,
        smoothing_factor: Optional[float] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name or f"EMA{period}")
        self.period = _check_period(period)
        k = smoothing_factor_default(period) if smoothing_factor is None else smoothing_factor
        if not 0.0 < k <= 1.0:
            raise ValueError(f"smoothing_factor must be in (0, 1], got {k}")
        self.smoothing_factor = k

    @property
    def is_ready(self) -> bool:
        return self.samples >= self.period

    def _compute_next_value(self, input: IndicatorDataPoint) -> float:
        if self.samples == 1:
            return input.value
        k = self.smoothing_factor
        return input.value * k + self.current.value * (1.0 - k)


def _ema_build(params: Dict[str, Any]) -> ExponentialMovingAverage:
    length = _as_int(_param(params, "length", 10), "length")
    k = _param(params, "smoothing_factor", None)
    return ExponentialMovingAverage(length, None if k is None else _as_float(k, "smoothing_factor"))


def _rma_build(params: Dict[str, Any]) -> ExponentialMovingAverage:
    length = _as_int(_param(params, "length", 10), "length")
    _check_period(length, "length")
    return ExponentialMovingAverage(length, 1.0 / length, name=f"RMA{length}")


INDICATOR_REGISTRY["ema"] = IndicatorFactory(
    kind="ema",
    build=_ema_build,
    description="exponential moving average",
)
INDICATOR_REGISTRY["rma"] = IndicatorFactory(
    kind="rma",
    build=_rma_build,
    description="Wilder's moving average, k = 1/length",
)


# ===========================================================================
# MAX / MIN  (samples)
# ===========================================================================
# Track how many periods ago the extreme was seen.  Only when it is about
# to leave the window is the window rescanned.

class Maximum(WindowIndicator):
    def __init__(self, period: int, name: Optional[str] = None) -> None:
        super().__init__(name or f"MAX{period}", period)
        self.periods_since_maximum = 0

    @property
    def is_ready(self) -> bool:
        return self.samples >= self.period

    def _compute_window(self, window: RollingWindow, input: IndicatorDataPoint) -> float:
        if self.samples == 1 or input.value >= self.current.value:
            self.periods_since_maximum = 0
            return input.value

        if self.periods_since_maximum >= self.period - 1:
            # newest-first scan, so ties resolve to the most recent sample
            index = max(range(len(window)), key=lambda i: window[i].value)
            self.periods_since_maximum = index
            return window[index].value

        self.periods_since_maximum += 1
        return self.current.value

    def reset(self) -> None:
        self.periods_since_maximum = 0
        super().reset()


class Minimum(WindowIndicator):
    def __init__(self, period: int, name: Optional[str] = None) -> None:
        super().__init__(name or f"MIN{period}", period)
        self.periods_since_minimum = 0

    @property
    def is_ready(self) -> bool:
        return self.samples >= self.period

    def _compute_window(self, window: RollingWindow, input: IndicatorDataPoint) -> float:
        if self.samples == 1 or input.value <= self.current.value:
            self.periods_since_minimum = 0
            return input.value

        if self.periods_since_minimum >= self.period - 1:
            index = min(range(len(window)), key=lambda i: window[i].value)
            self.periods_since_minimum = index
            return window[index].value

        self.periods_since_minimum += 1
        return self.current.value

    def reset(self) -> None:
        self.periods_since_minimum = 0
        super().reset()


def _max_build(params: Dict[str, Any]) -> Maximum:
    return Maximum(_as_int(_param(params, "length", 10), "length"))


def _min_build(params: Dict[str, Any]) -> Minimum:
    return Minimum(_as_int(_param(params, "length", 10), "length"))


INDICATOR_REGISTRY["max"] = IndicatorFactory(
    kind="max",
    build=_max_build,
    description="rolling maximum",
)
INDICATOR_REGISTRY["min"] = IndicatorFactory(
    kind="min",
    build=_min_build,
    description="rolling minimum",
)


# ===========================================================================
# Moving-average selector
# ===========================================================================

class MovingAverageType(Enum):
    SIMPLE = "sma"
    EXPONENTIAL = "ema"
    WILDERS = "rma"

    def as_indicator(self, name: str, period: int) -> IndicatorBase:
        if self is MovingAverageType.SIMPLE:
            return SimpleMovingAverage(period, name=name)
        if self is MovingAverageType.WILDERS:
            _check_period(period)
            return ExponentialMovingAverage(period, 1.0 / period, name=name)
        return ExponentialMovingAverage(period, name=name)
