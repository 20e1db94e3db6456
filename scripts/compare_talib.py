#!/usr/bin/env python3
"""Compare TA-Lib vectorized outputs vs incremental replay outputs.

Rolling formulas (sum, sma, max, min) should match TA-Lib exactly once
ready.  EMA is seeded differently (first value vs SMA seed) so only the
tail is compared, after the seed difference has decayed.
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_incremental as ta


DEFAULT_SPECS = [
    {"kind": "sum", "length": 10},
    {"kind": "sma", "length": 20},
    {"kind": "ema", "length": 10},
    {"kind": "max", "length": 14},
    {"kind": "min", "length": 14},
]

TALIB_FUNCTIONS = {"sum": "SUM", "sma": "SMA", "ema": "EMA", "max": "MAX", "min": "MIN"}


def make_close(rows: int, seed: int) -> pd.Series:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    close = 100 + rng.standard_normal(rows).cumsum()
    return pd.Series(close, index=idx, name="close")


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, eps: float) -> pd.DataFrame:
    diff = (test - ref).abs()
    rel = diff / (ref.abs() + eps)
    return pd.DataFrame(
        {
            "nan_ref": ref.isna().sum(),
            "nan_test": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_rel": rel.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=2000)
    ap.add_argument("--tail", type=int, default=500)
    ap.add_argument("--seed", type=int, default=11)
    ap.add_argument("--eps", type=float, default=1e-12)
    args = ap.parse_args()

    try:
        import talib
    except ImportError:
        raise SystemExit("[X] TA-Lib not available. Install ta-lib to run this script.")

    close = make_close(args.rows, args.seed)

    ref_cols = {}
    test_cols = {}
    for spec in DEFAULT_SPECS:
        kind = spec["kind"]
        col = f"{kind.upper()}_{spec['length']}"
        fn = getattr(talib, TALIB_FUNCTIONS[kind])
        ref_cols[col] = pd.Series(fn(close.values, timeperiod=spec["length"]), index=close.index)
        test_cols[col] = ta.replay(ta.make_indicator(kind, spec), close)

    ref = pd.DataFrame(ref_cols).iloc[-args.tail:]
    test = pd.DataFrame(test_cols).iloc[-args.tail:]
    summary = compare_frames(ref, test, args.eps)

    print("[i] rows:", args.rows)
    print("[i] compare rows:", len(ref))
    print(summary.sort_values("max_abs", ascending=False))


if __name__ == "__main__":
    main()
