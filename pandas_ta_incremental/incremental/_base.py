# -*- coding: utf-8 -*-
"""pandas-ta incremental – shared base: data points, results, the indicator
contract, helpers and the registry.

All category modules (``_overlap``, ``_momentum``, …) import from here
and populate ``INDICATOR_REGISTRY`` at load time.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

import logging

logger = logging.getLogger(__name__)

NAN = float("nan")
DEFAULT_TIME = datetime.min


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing → default."""
    value = params.get(key, default)
    return default if value is None else value


def _as_int(value: Any, key: str) -> int:
    """Coerce param *key*; anything non-numeric is a config error."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def _as_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None


def _check_period(period: int, name: str = "period", floor: int = 1) -> int:
    if period < floor:
        raise ValueError(f"{name} must be >= {floor}, got {period}")
    return period


# ---------------------------------------------------------------------------
# Data points & results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndicatorDataPoint:
    """A single timestamped scalar: indicator input and output."""
    time: Any
    value: float

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        time = self.time.isoformat() if hasattr(self.time, "isoformat") else self.time
        return f"{time} - {self.value}"


@dataclass(frozen=True)
class TradeBar:
    """OHLCV bar.  ``value`` is the close, so bars can feed scalar indicators."""
    time: Any
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def value(self) -> float:
        return self.close


class IndicatorStatus(Enum):
    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    MATH_ERROR = "math_error"


@dataclass(frozen=True)
class IndicatorResult:
    """Outcome of one compute step.

    Only ``SUCCESS`` advances ``current``.  Failures carry ``NAN``.
    """
    value: float
    status: IndicatorStatus = IndicatorStatus.SUCCESS

    @classmethod
    def success(cls, value: float) -> "IndicatorResult":
        return cls(value, IndicatorStatus.SUCCESS)

    @classmethod
    def invalid_input(cls) -> "IndicatorResult":
        return cls(NAN, IndicatorStatus.INVALID_INPUT)

    @classmethod
    def math_error(cls) -> "IndicatorResult":
        return cls(NAN, IndicatorStatus.MATH_ERROR)

    @property
    def ok(self) -> bool:
        return self.status is IndicatorStatus.SUCCESS


def as_result(value: Union[float, IndicatorResult]) -> IndicatorResult:
    """Lift a bare number into a success; pass results through."""
    if isinstance(value, IndicatorResult):
        return value
    return IndicatorResult.success(value)


class SourceKind(Enum):
    """How a node produces values.  Constants never need to notify."""
    STREAM = "stream"
    CONSTANT = "constant"


class ForwardOnlyError(ValueError):
    """Raised when an indicator receives an input older than the previous one."""


UpdatedHandler = Callable[["IndicatorBase", IndicatorDataPoint], None]


# ---------------------------------------------------------------------------
# Indicator contract
# ---------------------------------------------------------------------------

class IndicatorBase(ABC):
    """Base type for every streaming indicator.

    An indicator consumes one input at a time (anything with a ``time``
    attribute), produces at most one ``IndicatorDataPoint`` per input and
    notifies its subscribers each time it does.  Inputs must arrive in
    non-decreasing time order.
    """

    source_kind: SourceKind = SourceKind.STREAM

    def __init__(self, name: str) -> None:
        self.name = name
        self.samples = 0
        self.current = IndicatorDataPoint(DEFAULT_TIME, 0.0)
        self._previous_input: Optional[Any] = None
        self._listeners: List[UpdatedHandler] = []
        self._updating = False

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once enough samples were seen for the value to be meaningful."""

    # -- listeners ---------------------------------------------------------

    def subscribe(self, handler: UpdatedHandler) -> UpdatedHandler:
        """Call *handler(indicator, data_point)* after every produced value."""
        self._listeners.append(handler)
        return handler

    def unsubscribe(self, handler: UpdatedHandler) -> None:
        self._listeners.remove(handler)

    def _on_updated(self, data: IndicatorDataPoint) -> None:
        for handler in list(self._listeners):
            handler(self, data)

    # -- update / reset ----------------------------------------------------

    def update(self, input: Any, value: Optional[float] = None) -> bool:
        """Feed one input; returns ``is_ready`` afterwards.

        ``update(time, value)`` is shorthand for
        ``update(IndicatorDataPoint(time, value))``.
        """
        if value is not None:
            input = IndicatorDataPoint(input, value)

        previous = self._previous_input
        if previous is not None and input.time < previous.time:
            logger.error("%s received %s after %s", self.name, input.time, previous.time)
            raise ForwardOnlyError(
                f"This is a forward only indicator: {self.name} "
                f"Input: {input.time} Previous: {previous.time}"
            )
        if previous is not None and self._is_redelivery(input, previous):
            return self.is_ready

        if self._updating:
            raise RuntimeError(f"{self.name} was updated from its own update; cycle in the wiring?")
        self._updating = True
        try:
            samples, self.samples = self.samples, self.samples + 1
            self._previous_input = input
            try:
                result = self._validate_and_compute_next_value(input)
            except Exception:
                # a raising formula leaves no trace of the input
                self.samples, self._previous_input = samples, previous
                raise
            if result.ok:
                self.current = IndicatorDataPoint(input.time, result.value)
                self._on_updated(self.current)
            else:
                logger.debug("%s skipped input at %s: %s", self.name, input.time, result.status.value)
        finally:
            self._updating = False
        return self.is_ready

    def _is_redelivery(self, input: Any, previous: Any) -> bool:
        return input is previous or input == previous

    def reset(self) -> None:
        """Return to the post-construction state."""
        self.samples = 0
        self._previous_input = None
        self.current = IndicatorDataPoint(DEFAULT_TIME, 0.0)

    # -- formula hooks -----------------------------------------------------

    def _compute_next_value(self, input: Any) -> float:
        raise NotImplementedError(f"{type(self).__name__} must implement _compute_next_value")

    def _validate_and_compute_next_value(self, input: Any) -> IndicatorResult:
        # default: the formula body always succeeds
        return IndicatorResult.success(self._compute_next_value(input))

    # -- composition sugar (see _algebra) ----------------------------------

    def plus(self, other: Any, name: Optional[str] = None) -> "IndicatorBase":
        from ._algebra import plus
        return plus(self, other, name)

    def minus(self, other: Any, name: Optional[str] = None) -> "IndicatorBase":
        from ._algebra import minus
        return minus(self, other, name)

    def times(self, other: Any, name: Optional[str] = None) -> "IndicatorBase":
        from ._algebra import times
        return times(self, other, name)

    def over(self, other: Any, name: Optional[str] = None) -> "IndicatorBase":
        from ._algebra import over
        return over(self, other, name)

    def of(self, first: "IndicatorBase", wait_for_first_to_ready: bool = True) -> "IndicatorBase":
        from ._algebra import of
        return of(self, first, wait_for_first_to_ready)

    def weighted_by(self, weight: "IndicatorBase", period: int) -> "IndicatorBase":
        from ._algebra import weighted_by
        return weighted_by(self, weight, period)

    def sma(self, period: int, wait_for_first_to_ready: bool = True) -> "IndicatorBase":
        from ._algebra import sma
        return sma(self, period, wait_for_first_to_ready)

    def ema(self, period: int, smoothing_factor: Optional[float] = None,
            wait_for_first_to_ready: bool = True) -> "IndicatorBase":
        from ._algebra import ema
        return ema(self, period, smoothing_factor, wait_for_first_to_ready)

    def maximum(self, period: int, wait_for_first_to_ready: bool = True) -> "IndicatorBase":
        from ._algebra import maximum
        return maximum(self, period, wait_for_first_to_ready)

    def minimum(self, period: int, wait_for_first_to_ready: bool = True) -> "IndicatorBase":
        from ._algebra import minimum
        return minimum(self, period, wait_for_first_to_ready)

    def __add__(self, other: Any) -> "IndicatorBase":
        return self.plus(other)

    def __radd__(self, other: Any) -> "IndicatorBase":
        from ._algebra import plus
        return plus(other, self)

    def __sub__(self, other: Any) -> "IndicatorBase":
        return self.minus(other)

    def __rsub__(self, other: Any) -> "IndicatorBase":
        from ._algebra import minus
        return minus(other, self)

    def __mul__(self, other: Any) -> "IndicatorBase":
        return self.times(other)

    def __rmul__(self, other: Any) -> "IndicatorBase":
        from ._algebra import times
        return times(other, self)

    def __truediv__(self, other: Any) -> "IndicatorBase":
        return self.over(other)

    def __rtruediv__(self, other: Any) -> "IndicatorBase":
        from ._algebra import over
        return over(other, self)

    # -- value semantics ---------------------------------------------------
    # Equality stays identity so indicators remain hashable; ordering
    # compares current values so lists of indicators sort like numbers.

    def __float__(self) -> float:
        return float(self.current.value)

    def _other_value(self, other: Any) -> float:
        if isinstance(other, IndicatorBase):
            return other.current.value
        return float(other)

    def __lt__(self, other: Any) -> bool:
        return self.current.value < self._other_value(other)

    def __le__(self, other: Any) -> bool:
        return self.current.value <= self._other_value(other)

    def __gt__(self, other: Any) -> bool:
        return self.current.value > self._other_value(other)

    def __ge__(self, other: Any) -> bool:
        return self.current.value >= self._other_value(other)

    __hash__ = object.__hash__

    def __str__(self) -> str:
        # at least one decimal, at most five
        text = f"{self.current.value:.5f}".rstrip("0")
        return text + "0" if text.endswith(".") else text

    def to_detailed_string(self) -> str:
        return f"{self.name} - {self}"

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} name={self.name!r} samples={self.samples} "
                f"ready={self.is_ready} current={self.current.value!r}>")


class Indicator(IndicatorBase):
    """Indicator over scalar ``IndicatorDataPoint`` inputs."""


# ---------------------------------------------------------------------------
# Registry  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndicatorFactory:
    """Immutable descriptor: builds a fresh indicator graph from params."""
    kind:        str
    build:       Callable[[Dict[str, Any]], IndicatorBase]
    description: str = ""


INDICATOR_REGISTRY: Dict[str, IndicatorFactory] = {}


def make_indicator(kind: str, params: Optional[Dict[str, Any]] = None) -> IndicatorBase:
    """Build a new indicator of *kind*; ``None`` params fall back to defaults."""
    factory = INDICATOR_REGISTRY.get(kind)
    if factory is None:
        raise ValueError(f"Indicator '{kind}' not found in INDICATOR_REGISTRY")
    return factory.build(params or {})


def supported_kinds() -> List[str]:
    """Return sorted list of registered indicator kinds."""
    return sorted(INDICATOR_REGISTRY.keys())
