# -*- coding: utf-8 -*-
"""pandas-ta.incremental – streaming indicator engine.

Category modules populate INDICATOR_REGISTRY at import time.  This package
re-exports the registry plus the shared base API, the window, functional
and composite nodes, and the composition operators.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    NAN,
    DEFAULT_TIME,
    IndicatorDataPoint,
    TradeBar,
    IndicatorStatus,
    IndicatorResult,
    SourceKind,
    ForwardOnlyError,
    IndicatorBase,
    Indicator,
    IndicatorFactory,
    INDICATOR_REGISTRY,
    as_result,
    make_indicator,
    supported_kinds,
)
from ._window import RollingWindow, WindowIndicator
from ._functional import FunctionalIndicator
from ._composite import CompositeIndicator, ConstantIndicator

# ---------------------------------------------------------------------------
# Category modules – each populates the shared registry on import
# ---------------------------------------------------------------------------
from ._overlap import (  # identity, sma, ema, rma, sum, max, min, delay
    Identity,
    WindowIdentity,
    Delay,
    Sum,
    SimpleMovingAverage,
    ExponentialMovingAverage,
    Maximum,
    Minimum,
    MovingAverageType,
    smoothing_factor_default,
)
from ._momentum import (  # macd, apo, aroon
    MovingAverageConvergenceDivergence,
    AbsolutePriceOscillator,
    AroonOscillator,
)
from ._algebra import plus, minus, times, over, of, weighted_by, sma, ema, maximum, minimum
from ._replay import replay

__all__ = [
    # base
    "NAN",
    "DEFAULT_TIME",
    "IndicatorDataPoint",
    "TradeBar",
    "IndicatorStatus",
    "IndicatorResult",
    "SourceKind",
    "ForwardOnlyError",
    "IndicatorBase",
    "Indicator",
    "IndicatorFactory",
    "INDICATOR_REGISTRY",
    "as_result",
    "make_indicator",
    "supported_kinds",
    # nodes
    "RollingWindow",
    "WindowIndicator",
    "FunctionalIndicator",
    "CompositeIndicator",
    "ConstantIndicator",
    # indicators
    "Identity",
    "WindowIdentity",
    "Delay",
    "Sum",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "Maximum",
    "Minimum",
    "MovingAverageType",
    "smoothing_factor_default",
    "MovingAverageConvergenceDivergence",
    "AbsolutePriceOscillator",
    "AroonOscillator",
    # algebra
    "plus",
    "minus",
    "times",
    "over",
    "of",
    "weighted_by",
    "sma",
    "ema",
    "maximum",
    "minimum",
    # pandas
    "replay",
]
