# -*- coding: utf-8 -*-
"""pandas-ta incremental – drive an indicator from pandas objects.

``replay`` walks a Series or an OHLCV DataFrame forward in index order and
collects what the indicator produced on each row.  It is a convenience for
research and tests; live code calls ``update`` directly.
"""
from __future__ import annotations

from typing import Any, List

import logging

from ._base import NAN, IndicatorBase, IndicatorDataPoint, TradeBar

logger = logging.getLogger(__name__)

OHLC_COLUMNS = ("open", "high", "low", "close")


def _bar_inputs(df: Any) -> List[Any]:
    import pandas as pd          # lazy – pandas not required at module load
    missing = [c for c in OHLC_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame is missing OHLC columns: {missing}")
    has_volume = "volume" in df.columns
    inputs: List[Any] = []
    for ts, row in df.iterrows():
        if any(pd.isna(row[c]) for c in OHLC_COLUMNS):
            inputs.append(None)
            continue
        inputs.append(TradeBar(
            time=ts,
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]) if has_volume and not pd.isna(row["volume"]) else 0.0,
        ))
    return inputs


def _point_inputs(series: Any) -> List[Any]:
    import pandas as pd
    return [None if pd.isna(v) else IndicatorDataPoint(ts, float(v)) for ts, v in series.items()]


def replay(indicator: IndicatorBase, data: Any, ready_only: bool = True) -> Any:
    """Feed *data* into *indicator* and return its outputs as a Series.

    *data* is a ``pd.Series`` (values become ``IndicatorDataPoint``s) or a
    ``pd.DataFrame`` with open/high/low/close[/volume] columns (rows become
    ``TradeBar``s).  The index is the time axis and must be sorted.
    Rows with NaN inputs are skipped.  An output row is NaN when the
    indicator produced nothing for it, or was not ready and *ready_only*.
    """
    import pandas as pd

    if isinstance(data, pd.DataFrame):
        inputs = _bar_inputs(data)
    elif isinstance(data, pd.Series):
        inputs = _point_inputs(data)
    else:
        raise TypeError(f"replay expects a pandas Series or DataFrame, got {type(data).__name__}")

    produced: List[float] = []
    last = None

    def collect(sender: IndicatorBase, point: IndicatorDataPoint) -> None:
        nonlocal last
        last = point

    indicator.subscribe(collect)
    skipped = 0
    try:
        for item in inputs:
            if item is None:
                skipped += 1
                produced.append(NAN)
                continue
            last = None
            ready = indicator.update(item)
            if last is None or (ready_only and not ready):
                produced.append(NAN)
            else:
                produced.append(last.value)
    finally:
        indicator.unsubscribe(collect)

    if skipped:
        logger.debug("%s: skipped %d NaN rows", indicator.name, skipped)
    return pd.Series(produced, index=data.index, name=indicator.name, dtype=float)
