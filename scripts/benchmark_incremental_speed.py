#!/usr/bin/env python3
"""Benchmark incremental update speed of a composed indicator graph.

Feeds `rows - tail` bars of history (not timed), then times the last
`tail` updates.  Per-update cost should stay flat as history grows.
"""
from __future__ import annotations

import argparse
import os
import sys
from time import perf_counter
from typing import Dict, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_incremental as ta


def make_ohlcv(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows)
    return pd.DataFrame(
        {
            "open": open_,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=idx,
    )


def parse_list(value: str) -> List[int]:
    return [int(v.strip()) for v in value.split(",") if v.strip()]


def build_graph() -> Dict[str, ta.IndicatorBase]:
    """One price leaf fanning out into several derived nodes."""
    price = ta.Identity("close")
    fast = price.sma(10)
    slow = price.sma(50)
    return {
        "price": price,
        "ratio": fast / slow,
        "spread": price.ema(12) - price.ema(26),
        "channel": price.maximum(20) - price.minimum(20),
        "macd": ta.MovingAverageConvergenceDivergence(12, 26, 9).of(price),
    }


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--sizes",
        type=str,
        default="10000,50000,100000,200000",
        help="comma-separated total row counts",
    )
    ap.add_argument("--tail", type=int, default=1000, help="timed updates per size")
    ap.add_argument("--seed", type=int, default=7)
    args = ap.parse_args()

    sizes = parse_list(args.sizes)
    print(f"[i] sizes: {sizes}")
    print(f"[i] tail: {args.tail}")

    for rows in sizes:
        if rows <= args.tail + 1:
            print(f"[i] skip rows={rows} (need > tail+1)")
            continue

        df = make_ohlcv(rows, args.seed)
        close = df["close"]
        split = rows - args.tail
        graph = build_graph()
        price = graph["price"]
        aroon = ta.AroonOscillator(25, 25)

        # History (not timed)
        for ts, value in close.iloc[:split].items():
            price.update(ts, float(value))
        ta.replay(aroon, df.iloc[:split])

        tail_points = [ta.IndicatorDataPoint(ts, float(v)) for ts, v in close.iloc[split:].items()]
        tail_bars = df.iloc[split:]

        start = perf_counter()
        for point in tail_points:
            price.update(point)
        elapsed_graph = perf_counter() - start

        start = perf_counter()
        ta.replay(aroon, tail_bars)
        elapsed_aroon = perf_counter() - start

        print(
            f"[graph] rows={rows} tail={args.tail} total_s={elapsed_graph:.6f} "
            f"s_per_update={elapsed_graph / max(args.tail, 1):.8f} "
            f"ratio={graph['ratio'].current.value:.6f}"
        )
        print(
            f"[aroon] rows={rows} tail={args.tail} total_s={elapsed_aroon:.6f} "
            f"s_per_update={elapsed_aroon / max(args.tail, 1):.8f}"
        )


if __name__ == "__main__":
    main()
