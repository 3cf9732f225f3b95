#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Run one algorithm on a grid and play the steps back in the terminal.

Example:
    python -m pathviz.cli.run_search --grid maps/demo.txt --algorithm a_star --all-goals
    python -m pathviz.cli.run_search --random 20x40 --multiple-goals --seed 3 \
        --algorithm straight_line_a_star --frames --delay fast

Exit status: 0 when every leg found a goal, 1 when a goal was unreachable,
2 for an invalid grid.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

import numpy as np

from ..grids import InvalidGridError, generate_grid, load_grid, reset_transient, save_grid
from ..planners import PLANNERS, Outcome, find_path
from .playback import Delay, parse_delay, play, render_text

logger = logging.getLogger(__name__)


def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    if "x" not in token:
        raise argparse.ArgumentTypeError(f"Bad size '{s}', expected like 20x40")
    h, w = token.split("x")
    return int(h), int(w)


def _delay(s: str) -> Delay:
    try:
        return parse_delay(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Visualize a grid search in the terminal.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--grid", type=str, help="Grid file in the text format (see pathviz.grids.io)")
    src.add_argument("--random", type=_parse_size, metavar="HxW", help="Generate a random grid, e.g. 20x40")
    ap.add_argument("--algorithm", type=str, default="a_star",
                    help=f"One of: {','.join(PLANNERS)}")
    ap.add_argument("--all-goals", action="store_true", help="Visit every goal instead of the nearest one")
    ap.add_argument("--multiple-goals", action="store_true", help="Random grids: place more than one goal")
    ap.add_argument("--density", type=float, default=0.2, help="Random grids: wall probability")
    ap.add_argument("--seed", type=int, default=None, help="Random grids: RNG seed")
    ap.add_argument("--delay", type=_delay, default=Delay.INSTANT,
                    help="instant | fast | normal | slow (or 0/15/50/100 ms)")
    ap.add_argument("--frames", action="store_true", help="Print the grid after every step")
    ap.add_argument("--save-grid", type=str, default=None, help="Write the input grid to this file")
    ap.add_argument("--log-level", type=str, default="WARNING")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.grid:
            grid = load_grid(args.grid)
        else:
            H, W = args.random
            rng = np.random.default_rng(args.seed)
            grid = generate_grid(H, W, multiple_goals=args.multiple_goals,
                                 density=args.density, rng=rng).grid
        grid = reset_transient(grid)
        steps = find_path(grid, args.algorithm, all_goals=args.all_goals)
    except InvalidGridError as e:
        print(f"Invalid grid: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.save_grid:
        print("Saved:", save_grid(grid, args.save_grid))

    summary = play(steps, grid, delay=args.delay, show_frames=args.frames)

    print(render_text(summary.grid))
    print()
    print(f"{'algorithm':12} {'result':12} {'legs':>4} {'explored':>8} {'frontier':>8} "
          f"{'length':>6} {'revisits':>8}")
    result = "found" if summary.outcome is Outcome.FOUND else "not found"
    revisits = sum(len(idx) - 1 for idx in summary.visit_order.values())
    print(f"{args.algorithm:12} {result:12} {summary.legs:4d} {summary.explored:8d} "
          f"{summary.frontier_cells:8d} {summary.path_length:6d} {revisits:8d}")
    return 0 if summary.outcome is Outcome.FOUND else 1


if __name__ == "__main__":
    sys.exit(main())
