# -*- coding: utf-8 -*-
"""pandas-ta incremental – lookback window and window-based indicators.

``RollingWindow`` is a fixed-size ring buffer indexed newest-first that
remembers the element evicted by the latest ``add``.  Rolling formulas
(sum, max/min, delay) use that element to stay O(1) per update instead of
rescanning history.
"""
from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from ._base import (
    IndicatorBase,
    IndicatorResult,
    _check_period,
)

T = TypeVar("T")


class RollingWindow(Generic[T]):
    """Window with list access semantics: ``window[0]`` is the most recent
    item and ``window[len(window) - 1]`` the oldest one still held."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"RollingWindow must have size of at least 1, got {size}")
        self._size = size
        self._list: List[T] = []
        self._tail = 0                  # physical index of the oldest item once full
        self._samples = 0
        self._most_recently_removed: Optional[T] = None

    @property
    def size(self) -> int:
        return self._size

    @property
    def count(self) -> int:
        return len(self._list)

    def __len__(self) -> int:
        return len(self._list)

    @property
    def samples(self) -> int:
        """Number of items added over the lifetime of the window."""
        return self._samples

    @property
    def is_ready(self) -> bool:
        return len(self._list) >= self._size

    @property
    def has_removed(self) -> bool:
        return self._samples > self._size

    @property
    def most_recently_removed(self) -> T:
        """The item that fell off the back on the latest ``add``."""
        if not self.has_removed:
            raise IndexError("No items have been removed yet!")
        return self._most_recently_removed

    def _physical(self, i: int) -> int:
        count = len(self._list)
        if not 0 <= i < count:
            raise IndexError(f"Must be between 0 and count {count}, got {i}")
        return (count + self._tail - i - 1) % count

    def __getitem__(self, i: int) -> T:
        return self._list[self._physical(i)]

    def __setitem__(self, i: int, item: T) -> None:
        self._list[self._physical(i)] = item

    def __iter__(self) -> Iterator[T]:
        # snapshot, newest first
        return iter([self[i] for i in range(len(self._list))])

    def add(self, item: T) -> None:
        self._samples += 1
        if len(self._list) == self._size:
            self._most_recently_removed = self._list[self._tail]
            self._list[self._tail] = item
            self._tail = (self._tail + 1) % self._size
        else:
            self._list.append(item)

    def reset(self) -> None:
        self._list.clear()
        self._tail = 0
        self._samples = 0
        self._most_recently_removed = None

    def __repr__(self) -> str:
        return f"RollingWindow(size={self._size}, items={list(self)!r})"


class WindowIndicator(IndicatorBase):
    """Indicator whose formula sees the trailing *period* inputs.

    Subclasses implement ``_compute_window(window, input)`` or, when the
    formula can fail, ``_validate_and_compute_window``.
    """

    def __init__(self, name: str, period: int) -> None:
        super().__init__(name)
        _check_period(period)
        self._window: RollingWindow[Any] = RollingWindow(period)

    @property
    def period(self) -> int:
        return self._window.size

    @property
    def window(self) -> RollingWindow[Any]:
        return self._window

    @property
    def is_ready(self) -> bool:
        return self._window.is_ready

    def _validate_and_compute_next_value(self, input: Any) -> IndicatorResult:
        self._window.add(input)
        return self._validate_and_compute_window(self._window, input)

    def _validate_and_compute_window(self, window: RollingWindow[Any], input: Any) -> IndicatorResult:
        return IndicatorResult.success(self._compute_window(window, input))

    def _compute_window(self, window: RollingWindow[Any], input: Any) -> float:
        raise NotImplementedError(f"{type(self).__name__} must implement _compute_window")

    def reset(self) -> None:
        self._window.reset()
        super().reset()
