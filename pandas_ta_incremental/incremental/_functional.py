# -*- coding: utf-8 -*-
"""pandas-ta incremental – closure-backed indicator."""
from __future__ import annotations

from typing import Any, Callable, Optional, Union

from ._base import IndicatorBase, IndicatorResult, as_result


class FunctionalIndicator(IndicatorBase):
    """Indicator defined by three closures instead of a subclass.

    compute_next_value(input) -> float | IndicatorResult
        A bare number counts as success.
    is_ready(indicator) -> bool
        Receives this indicator.
    reset() -> None
        Optional; resets whatever the closures captured.
    """

    def __init__(
        self,
        name: str,
        compute_next_value: Callable[[Any], Union[float, IndicatorResult]],
        is_ready: Callable[["FunctionalIndicator"], bool],
        reset: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(name)
        self._compute = compute_next_value
        self._is_ready = is_ready
        self._reset = reset

    @property
    def is_ready(self) -> bool:
        return self._is_ready(self)

    def _validate_and_compute_next_value(self, input: Any) -> IndicatorResult:
        return as_result(self._compute(input))

    def reset(self) -> None:
        if self._reset is not None:
            self._reset()
        super().reset()
