"""Shared fixtures for indicator tests."""

from datetime import datetime, timedelta
from typing import Callable, List

import pytest

from pandas_ta_incremental.incremental import IndicatorBase, IndicatorDataPoint


@pytest.fixture
def t0() -> datetime:
    return datetime(2025, 1, 2, 9, 30)


@pytest.fixture
def ticks(t0: datetime) -> Callable[[int], datetime]:
    """ticks(i) -> the i-th one-minute timestamp after t0."""
    return lambda i: t0 + timedelta(minutes=i)


@pytest.fixture
def recorder() -> Callable[[IndicatorBase], List[IndicatorDataPoint]]:
    """Subscribe to an indicator and collect every value it produces."""

    def attach(indicator: IndicatorBase) -> List[IndicatorDataPoint]:
        produced: List[IndicatorDataPoint] = []
        indicator.subscribe(lambda sender, data: produced.append(data))
        return produced

    return attach
