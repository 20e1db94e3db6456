# -*- coding: utf-8 -*-
"""pandas-ta incremental – graph-building operators.

Every function here allocates and returns a new node wired to its
arguments.  Arguments are never mutated beyond subscribing listeners.
Numbers are accepted wherever an indicator is, and become
``ConstantIndicator``s named after the number.

    >>> price = Identity("price")
    >>> spread = price.ema(12) - price.ema(26)      # composite
    >>> ratio = price.sma(5) / price.sma(20)        # MATH_ERROR on 0
"""
from __future__ import annotations

from typing import Any, Optional

from ._base import (
    IndicatorBase,
    IndicatorDataPoint,
    IndicatorResult,
)
from ._composite import CompositeIndicator, ConstantIndicator
from ._overlap import (
    ExponentialMovingAverage,
    Maximum,
    Minimum,
    SimpleMovingAverage,
    Sum,
    WindowIdentity,
)


def _lift(x: Any) -> IndicatorBase:
    """Indicators pass through, numbers become constants."""
    if isinstance(x, IndicatorBase):
        return x
    value = float(x)
    return ConstantIndicator(repr(x), value)


# ---------------------------------------------------------------------------
# Arithmetic composites
# ---------------------------------------------------------------------------

def plus(left: Any, right: Any, name: Optional[str] = None) -> CompositeIndicator:
    """value = left + right"""
    return CompositeIndicator(
        _lift(left), _lift(right),
        lambda l, r: l.current.value + r.current.value,
        name,
    )


def minus(left: Any, right: Any, name: Optional[str] = None) -> CompositeIndicator:
    """value = left - right"""
    return CompositeIndicator(
        _lift(left), _lift(right),
        lambda l, r: l.current.value - r.current.value,
        name,
    )


def times(left: Any, right: Any, name: Optional[str] = None) -> CompositeIndicator:
    """value = left * right"""
    return CompositeIndicator(
        _lift(left), _lift(right),
        lambda l, r: l.current.value * r.current.value,
        name,
    )


def _ratio(left: IndicatorBase, right: IndicatorBase) -> IndicatorResult:
    denominator = right.current.value
    if denominator == 0.0:
        return IndicatorResult.math_error()
    return IndicatorResult.success(left.current.value / denominator)


def over(left: Any, right: Any, name: Optional[str] = None) -> CompositeIndicator:
    """value = left / right

    A zero denominator yields ``MATH_ERROR``: the composite keeps its last
    good value and does not notify.
    """
    return CompositeIndicator(_lift(left), _lift(right), _ratio, name)


# ---------------------------------------------------------------------------
# Chaining
# ---------------------------------------------------------------------------

def of(second: IndicatorBase, first: IndicatorBase,
       wait_for_first_to_ready: bool = True) -> IndicatorBase:
    """Feed every value *first* produces into *second*; returns *second*.

    With *wait_for_first_to_ready* (default) values are only forwarded
    once *first* is ready.
    """
    def forward(sender: IndicatorBase, data: IndicatorDataPoint) -> None:
        if not wait_for_first_to_ready or first.is_ready:
            second.update(data)

    first.subscribe(forward)
    return second


def weighted_by(value: IndicatorBase, weight: IndicatorBase, period: int) -> CompositeIndicator:
    """Rolling average of *value* weighted by *weight* over *period* samples.

    result = sum(value * weight) / sum(weight)

    A product is only accumulated once both sides have delivered the same
    number of samples, so the two streams may update in either order.
    """
    x = WindowIdentity(period, name=f"{value.name}_X")
    y = WindowIdentity(period, name=f"{weight.name}_Y")
    numerator = Sum(period, name="Sum_xy")
    denominator = Sum(period, name="Sum_y")

    def on_value(sender: IndicatorBase, data: IndicatorDataPoint) -> None:
        x.update(data)
        if x.samples == y.samples:
            numerator.update(data.time, data.value * y.current.value)

    def on_weight(sender: IndicatorBase, data: IndicatorDataPoint) -> None:
        y.update(data)
        if x.samples == y.samples:
            numerator.update(data.time, data.value * x.current.value)
        denominator.update(data)

    value.subscribe(on_value)
    weight.subscribe(on_weight)

    return CompositeIndicator(
        numerator, denominator, _ratio,
        name=f"{value.name}_WeightedBy_{weight.name}",
        owned=(x, y),
    )


# ---------------------------------------------------------------------------
# Standard indicators of an indicator
# ---------------------------------------------------------------------------

def sma(left: IndicatorBase, period: int,
        wait_for_first_to_ready: bool = True) -> SimpleMovingAverage:
    """SMA of *left*."""
    return of(SimpleMovingAverage(period, name=f"SMA{period}_Of_{left.name}"),
              left, wait_for_first_to_ready)


def ema(left: IndicatorBase, period: int, smoothing_factor: Optional[float] = None,
        wait_for_first_to_ready: bool = True) -> ExponentialMovingAverage:
    """EMA of *left*; *smoothing_factor* defaults to 2 / (period + 1)."""
    return of(ExponentialMovingAverage(period, smoothing_factor, name=f"EMA{period}_Of_{left.name}"),
              left, wait_for_first_to_ready)


def maximum(left: IndicatorBase, period: int,
            wait_for_first_to_ready: bool = True) -> Maximum:
    return of(Maximum(period, name=f"MAX{period}_Of_{left.name}"),
              left, wait_for_first_to_ready)


def minimum(left: IndicatorBase, period: int,
            wait_for_first_to_ready: bool = True) -> Minimum:
    return of(Minimum(period, name=f"MIN{period}_Of_{left.name}"),
              left, wait_for_first_to_ready)
