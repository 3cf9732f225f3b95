#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
plot_bench.py
-------------
Aggregate a planner_benchmark.csv (see run_benchmark) per planner and save
bar charts next to it.

Usage:
    python -m pathviz.cli.plot_bench results/planner_benchmark.csv
"""

from __future__ import annotations

import os
import sys
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd


def aggregate(df: pd.DataFrame) -> pd.DataFrame:
    return df.groupby("planner").agg(
        success_rate=("success", "mean"),
        mean_explored=("explored", "mean"),
        std_explored=("explored", "std"),
        mean_hops=("path_hops", "mean"),
        std_hops=("path_hops", "std"),
        mean_time_s=("time_s", "mean"),
        std_time_s=("time_s", "std"),
    ).reset_index().fillna(0.0)


def _bar(agg: pd.DataFrame, column: str, err: Optional[str], title: str, ylabel: str, out: str) -> str:
    plt.figure(figsize=(8, 4))
    plt.bar(agg["planner"], agg[column], yerr=agg[err] if err else None)
    plt.title(title)
    plt.xlabel("Planner")
    plt.ylabel(ylabel)
    plt.xticks(rotation=15)
    plt.tight_layout()
    plt.savefig(out, bbox_inches="tight")
    plt.close()
    return out


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Usage: python -m pathviz.cli.plot_bench <path/to/planner_benchmark.csv>")
        return 1
    p = argv[0]
    df = pd.read_csv(p)
    agg = aggregate(df)
    print("Aggregate:\n", agg)

    outdir = os.path.dirname(p) or "."
    # Unsuccessful tours still count their exploration, but not their hops
    hops = aggregate(df[df["success"] == 1]) if (df["success"] == 1).any() else agg
    outs = [
        _bar(agg, "mean_explored", "std_explored", "Average explored cells by planner",
             "Explored cells", os.path.join(outdir, "benchmark_explored_bar.png")),
        _bar(hops, "mean_hops", "std_hops", "Average path length by planner (successful runs)",
             "Path hops", os.path.join(outdir, "benchmark_hops_bar.png")),
        _bar(agg, "mean_time_s", "std_time_s", "Average wall time by planner",
             "Time (s)", os.path.join(outdir, "benchmark_time_bar.png")),
    ]
    for out in outs:
        print("Saved:", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
