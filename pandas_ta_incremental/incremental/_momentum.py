# -*- coding: utf-8 -*-
"""pandas-ta incremental -- momentum indicators built from sub-indicators.

Each section follows the pattern:
  1. Indicator class owning its sub-graph
  2. _<kind>_build(params) helper
  3. INDICATOR_REGISTRY["<kind>"] = IndicatorFactory(...)

Sub-graphs are built once in ``__init__``; ``reset()`` cascades into every
owned node before resetting the outer indicator.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ._base import (
    Indicator,
    IndicatorBase,
    IndicatorDataPoint,
    IndicatorFactory,
    INDICATOR_REGISTRY,
    TradeBar,
    _param,
    _as_int,
    _check_period,
)
from ._functional import FunctionalIndicator
from ._overlap import Identity, Maximum, Minimum, MovingAverageType


# ===========================================================================
# MACD
# ===========================================================================
# MACD   = MA(close, fast) - MA(close, slow)
# Signal = MA(MACD, signal)   -- fed once both fast and slow are ready
# Defaults: fast=12, slow=26, signal=9, simple moving averages

class MovingAverageConvergenceDivergence(Indicator):
    def __init__(
        self,
        fast_period: int,
        slow_period: int,
        signal_period: int,
        ma_type: MovingAverageType = MovingAverageType.SIMPLE,
        name: Optional[str] = None,
    ) -> None:
        name = name or f"MACD({fast_period},{slow_period})"
        super().__init__(name)
        _check_period(fast_period, "fast_period")
        _check_period(signal_period, "signal_period")
        if slow_period <= fast_period:
            raise ValueError(f"slow_period must be > fast_period, got {slow_period} <= {fast_period}")
        self.fast = ma_type.as_indicator(f"{name}_Fast", fast_period)
        self.slow = ma_type.as_indicator(f"{name}_Slow", slow_period)
        self.signal = ma_type.as_indicator(f"{name}_Signal", signal_period)

    @property
    def is_ready(self) -> bool:
        return self.signal.is_ready

    @property
    def histogram(self) -> float:
        return self.current.value - self.signal.current.value

    def _compute_next_value(self, input: IndicatorDataPoint) -> float:
        self.fast.update(input)
        self.slow.update(input)

        macd = self.fast.current.value - self.slow.current.value
        if self.fast.is_ready and self.slow.is_ready:
            self.signal.update(input.time, macd)
        return macd

    def reset(self) -> None:
        self.fast.reset()
        self.slow.reset()
        self.signal.reset()
        super().reset()


def _macd_build(params: Dict[str, Any]) -> MovingAverageConvergenceDivergence:
    fast   = _as_int(_param(params, "fast",   12), "fast")
    slow   = _as_int(_param(params, "slow",   26), "slow")
    signal = _as_int(_param(params, "signal",  9), "signal")
    mamode = str(_param(params, "mamode", "sma")).lower()
    return MovingAverageConvergenceDivergence(fast, slow, signal, MovingAverageType(mamode))


INDICATOR_REGISTRY["macd"] = IndicatorFactory(
    kind="macd",
    build=_macd_build,
    description="moving average convergence divergence",
)


# ===========================================================================
# APO  -- absolute price oscillator, expressed with the composition operators
# ===========================================================================
# APO = EMA(close, fast) - EMA(close, slow)
# Graph:  price -> ema_fast \
#                            >- difference
#         price -> ema_slow /

class AbsolutePriceOscillator(Indicator):
    def __init__(self, fast_period: int, slow_period: int, name: Optional[str] = None) -> None:
        super().__init__(name or f"APO({fast_period},{slow_period})")
        _check_period(fast_period, "fast_period")
        if slow_period <= fast_period:
            raise ValueError(f"slow_period must be > fast_period, got {slow_period} <= {fast_period}")
        self.price = Identity(f"{self.name}_Price")
        self.fast = self.price.ema(fast_period, wait_for_first_to_ready=False)
        self.slow = self.price.ema(slow_period, wait_for_first_to_ready=False)
        self.difference = self.fast.minus(self.slow, name=f"{self.name}_Difference")

    @property
    def is_ready(self) -> bool:
        return self.difference.is_ready

    def _compute_next_value(self, input: IndicatorDataPoint) -> float:
        self.price.update(input)
        return self.difference.current.value

    def reset(self) -> None:
        self.price.reset()
        self.difference.reset()
        super().reset()


def _apo_build(params: Dict[str, Any]) -> AbsolutePriceOscillator:
    fast = _as_int(_param(params, "fast", 12), "fast")
    slow = _as_int(_param(params, "slow", 26), "slow")
    return AbsolutePriceOscillator(fast, slow)


INDICATOR_REGISTRY["apo"] = IndicatorFactory(
    kind="apo",
    build=_apo_build,
    description="EMA(fast) - EMA(slow) built from composition operators",
)


# ===========================================================================
# AROON oscillator  (TradeBar input)
# ===========================================================================
# AroonUp   = 100 * (up   - periods since max(high, up + 1))   / up
# AroonDown = 100 * (down - periods since min(low,  down + 1)) / down
# Oscillator = AroonUp - AroonDown, in [-100, 100]

class AroonOscillator(IndicatorBase):
    def __init__(self, up_period: int, down_period: int, name: Optional[str] = None) -> None:
        name = name or f"AROON({up_period},{down_period})"
        super().__init__(name)
        _check_period(up_period, "up_period")
        _check_period(down_period, "down_period")

        highest = Maximum(up_period + 1, name=f"{name}_Max")
        self.aroon_up = FunctionalIndicator(
            f"{name}_AroonUp",
            lambda input: _aroon(up_period, highest, input, highest_side=True),
            lambda aroon_up: highest.is_ready,
            highest.reset,
        )

        lowest = Minimum(down_period + 1, name=f"{name}_Min")
        self.aroon_down = FunctionalIndicator(
            f"{name}_AroonDown",
            lambda input: _aroon(down_period, lowest, input, highest_side=False),
            lambda aroon_down: lowest.is_ready,
            lowest.reset,
        )

    @property
    def is_ready(self) -> bool:
        return self.aroon_up.is_ready and self.aroon_down.is_ready

    def _compute_next_value(self, input: TradeBar) -> float:
        self.aroon_up.update(input.time, input.high)
        self.aroon_down.update(input.time, input.low)
        return self.aroon_up.current.value - self.aroon_down.current.value

    def reset(self) -> None:
        self.aroon_up.reset()
        self.aroon_down.reset()
        super().reset()


def _aroon(period: int, extreme: Any, input: IndicatorDataPoint, highest_side: bool) -> float:
    extreme.update(input)
    since = extreme.periods_since_maximum if highest_side else extreme.periods_since_minimum
    return 100.0 * (period - since) / period


def _aroon_build(params: Dict[str, Any]) -> AroonOscillator:
    length = _as_int(_param(params, "length", 14), "length")
    up = _as_int(_param(params, "up", length), "up")
    down = _as_int(_param(params, "down", length), "down")
    return AroonOscillator(up, down)


INDICATOR_REGISTRY["aroon"] = IndicatorFactory(
    kind="aroon",
    build=_aroon_build,
    description="Aroon oscillator over high/low bars",
)
