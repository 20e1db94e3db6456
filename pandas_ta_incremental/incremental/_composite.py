# -*- coding: utf-8 -*-
"""pandas-ta incremental – constant and binary composite nodes.

A ``CompositeIndicator`` joins two upstream indicators: it recomputes
once both sides have produced a new value since its last computation.
A side flagged ``SourceKind.CONSTANT`` counts as always present.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Union

from ._base import (
    DEFAULT_TIME,
    NAN,
    IndicatorBase,
    IndicatorDataPoint,
    IndicatorResult,
    SourceKind,
    as_result,
)

Composer = Callable[[IndicatorBase, IndicatorBase], Union[float, IndicatorResult]]


class ConstantIndicator(IndicatorBase):
    """Always ready, always *value*."""

    source_kind = SourceKind.CONSTANT

    def __init__(self, name: str, value: float) -> None:
        super().__init__(name)
        self.value = value
        self.current = IndicatorDataPoint(DEFAULT_TIME, value)

    @property
    def is_ready(self) -> bool:
        return True

    def _compute_next_value(self, input: Any) -> float:
        return self.value

    def reset(self) -> None:
        super().reset()
        self.current = IndicatorDataPoint(DEFAULT_TIME, self.value)


class CompositeIndicator(IndicatorBase):
    """Output is ``composer(left, right)`` over the two sides' current values.

    *owned* lists helper nodes built only for this composite (e.g. the
    windows behind ``weighted_by``); they are reset together with it.
    """

    def __init__(
        self,
        left: IndicatorBase,
        right: IndicatorBase,
        composer: Composer,
        name: Optional[str] = None,
        owned: Iterable[IndicatorBase] = (),
    ) -> None:
        super().__init__(name or f"COMPOSE({left.name},{right.name})")
        self.left = left
        self.right = right
        self._composer = composer
        self._owned: List[IndicatorBase] = list(owned)
        self._pending_left: Optional[IndicatorDataPoint] = None
        self._pending_right: Optional[IndicatorDataPoint] = None
        left.subscribe(self._on_left_updated)
        right.subscribe(self._on_right_updated)

    @property
    def is_ready(self) -> bool:
        return self.left.is_ready and self.right.is_ready

    def _validate_and_compute_next_value(self, input: Any) -> IndicatorResult:
        return as_result(self._composer(self.left, self.right))

    def _is_redelivery(self, input: Any, previous: Any) -> bool:
        # every synthetic input stands for a new pair of upstream values
        return input is previous

    def _on_left_updated(self, sender: IndicatorBase, updated: IndicatorDataPoint) -> None:
        self._pending_left = updated
        if self._pending_right is not None or self.right.source_kind is SourceKind.CONSTANT:
            self._combine(updated)

    def _on_right_updated(self, sender: IndicatorBase, updated: IndicatorDataPoint) -> None:
        self._pending_right = updated
        if self._pending_left is not None or self.left.source_kind is SourceKind.CONSTANT:
            self._combine(updated)

    def _combine(self, updated: IndicatorDataPoint) -> None:
        pending = self._pending_left, self._pending_right
        samples = self.samples
        self._pending_left = None
        self._pending_right = None
        try:
            self.update(IndicatorDataPoint(self._max_time(updated), NAN))
        except Exception:
            # composer raised: the pair is still waiting to be combined
            if self.samples == samples:
                self._pending_left, self._pending_right = pending
            raise

    def _max_time(self, updated: IndicatorDataPoint) -> Any:
        times = [updated.time]
        times.extend(side.current.time for side in (self.left, self.right)
                     if side.current.time != DEFAULT_TIME)
        return max(times)

    def reset(self) -> None:
        self.left.reset()
        self.right.reset()
        for node in self._owned:
            node.reset()
        self._pending_left = None
        self._pending_right = None
        super().reset()
