#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Compare planners on random grids:
- Generates random grids across (sizes x seeds)
- Runs every selected planner to completion on each grid (all goals)
- Writes one CSV row per (grid, planner) to <outdir>/planner_benchmark.csv

Example:
    python -m pathviz.cli.run_benchmark --sizes 20x40,50x50 --num-grids 100 \
        --planners bfs,a_star,straight_line_a_star --multiple-goals --seed 0

Then: python -m pathviz.cli.plot_bench results/planner_benchmark.csv
"""

from __future__ import annotations

import argparse
import csv
import logging
import os
import sys
import time
from typing import Dict, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from ..grids import generate_grid
from ..planners import PLANNERS, SearchRun, find_path

logger = logging.getLogger(__name__)

FIELDS = [
    "planner", "seed", "H", "W", "density", "goals",
    "success", "legs", "explored", "frontier_cells", "path_hops", "time_s",
]


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = token.split("x")
        sizes.append((int(h), int(w)))
    return sizes


def _parse_planners(s: str) -> List[str]:
    names = [p.strip().lower() for p in s.split(",") if p.strip()]
    unknown = [n for n in names if n not in PLANNERS]
    if unknown:
        raise ValueError(f"Unknown planner(s) {unknown}. Available: {sorted(PLANNERS)}")
    return names


def run_case(planner_name: str, grid: np.ndarray, all_goals: bool = True) -> Dict:
    t0 = time.perf_counter()
    run = SearchRun(find_path(grid, planner_name, all_goals=all_goals)).run()
    t1 = time.perf_counter()
    return {
        "planner": planner_name,
        "success": int(run.found),
        "legs": len(run.paths),
        "explored": run.explored,
        "frontier_cells": run.frontier_cells,
        "path_hops": sum(len(p) - 1 for p in run.paths),
        "time_s": t1 - t0,
    }


def run_benchmark(sizes: List[Tuple[int, int]], planners: List[str], num_grids: int,
                  density: float, multiple_goals: bool, seed: int,
                  progress: bool = True) -> List[Dict]:
    rows: List[Dict] = []
    cases = [(H, W, seed + k) for (H, W) in sizes for k in range(num_grids)]
    for H, W, case_seed in tqdm(cases, desc="grids", disable=not progress):
        rng = np.random.default_rng(case_seed)
        gen = generate_grid(H, W, multiple_goals=multiple_goals, density=density, rng=rng)
        for name in planners:
            row = run_case(name, gen.grid)
            row.update(seed=case_seed, H=H, W=W, density=density, goals=len(gen.goals))
            rows.append(row)
    return rows


def write_csv(rows: List[Dict], path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)
    return path


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark planners on random grids.")
    ap.add_argument("--sizes", type=str, default="20x40",
                    help="Comma-separated grid sizes like 20x40,50x50")
    ap.add_argument("--num-grids", type=int, default=50, help="Grids per size")
    ap.add_argument("--planners", type=str, default=",".join(PLANNERS),
                    help=f"Comma-separated planners: {','.join(PLANNERS)}")
    ap.add_argument("--density", type=float, default=0.2, help="Wall probability")
    ap.add_argument("--multiple-goals", action="store_true", help="Place several goals per grid")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results", help="Output directory for CSV")
    ap.add_argument("--no-progress", action="store_true")
    ap.add_argument("--log-level", type=str, default="WARNING")
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        sizes = _parse_sizes(args.sizes)
        planners = _parse_planners(args.planners)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    rows = run_benchmark(sizes, planners, args.num_grids, args.density,
                         args.multiple_goals, args.seed, progress=not args.no_progress)
    out = write_csv(rows, os.path.join(args.outdir, "planner_benchmark.csv"))
    print(f"Saved: {out}")

    # Pretty print per-planner means
    print(f"{'planner':22} {'succ':>5} {'explored':>9} {'hops':>7} {'time[s]':>8}")
    for name in planners:
        sel = [r for r in rows if r["planner"] == name]
        if not sel:
            continue
        print(f"{name:22} {np.mean([r['success'] for r in sel]):5.2f} "
              f"{np.mean([r['explored'] for r in sel]):9.1f} "
              f"{np.mean([r['path_hops'] for r in sel]):7.1f} "
              f"{np.mean([r['time_s'] for r in sel]):8.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
