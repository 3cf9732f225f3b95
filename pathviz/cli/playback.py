#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
playback.py
-----------
Terminal driver for step sequences: pulls steps from a planner or a tour,
overlays them on a copy of the grid and paces them with a delay preset.
It performs no search logic of its own.
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, List, Optional, TextIO

import numpy as np

from ..grids.model import Cell, CellType, Direction, mark_cells
from ..planners.base import SearchRun
from ..planners.reconstruction import concatenate_legs, directions_along_path, visit_order_indexes
from ..planners.steps import Outcome


class Delay(IntEnum):
    """Pause between steps, in milliseconds."""
    INSTANT = 0
    FAST = 15
    NORMAL = 50
    SLOW = 100


GLYPHS = {
    CellType.UNEXPLORED: ".",
    CellType.FRONTIER: "o",
    CellType.EXPLORED: ",",
    CellType.WALL: "#",
    CellType.START: "S",
    CellType.GOAL: "G",
    CellType.PATH: "*",
}


def parse_delay(value: str) -> Delay:
    """'fast' / 'FAST' / '15' -> Delay.FAST"""
    token = str(value).strip()
    if token.isdigit():
        return Delay(int(token))
    try:
        return Delay[token.upper()]
    except KeyError as e:
        raise ValueError(f"Unknown delay '{value}'. Available: {[d.name.lower() for d in Delay]}") from e


def apply_step(grid: np.ndarray, step) -> np.ndarray:
    """Grid after one step is drawn. START/GOAL/WALL cells are never recoloured."""
    if step.kind == "explore":
        return mark_cells(grid, [step.cell], CellType.EXPLORED)
    if step.kind == "frontier":
        return mark_cells(grid, step.cells, CellType.FRONTIER)
    if step.kind == "path":
        return mark_cells(grid, step.path, CellType.PATH)
    if step.kind == "grid":
        return np.array(step.grid, copy=True)
    raise ValueError(f"Unknown step kind '{step.kind}'")


def render_text(grid: np.ndarray) -> str:
    return "\n".join("".join(GLYPHS[CellType(int(v))] for v in row) for row in grid)


@dataclass
class PlaybackSummary:
    outcome: Optional[Outcome]
    steps: int
    explored: int
    frontier_cells: int
    legs: int
    tour: List = field(default_factory=list)
    grid: Optional[np.ndarray] = None

    @property
    def path_length(self) -> int:
        """Edges travelled over the whole tour (0 when nothing was found)."""
        return max(len(self.tour) - 1, 0)

    @property
    def directions(self) -> Dict[Cell, Direction]:
        """Travel direction per cell. Only meaningful for a single leg: a tour
        that revisits a cell keeps the direction of its last visit."""
        return directions_along_path(self.tour)

    @property
    def visit_order(self) -> Dict[Cell, List[int]]:
        """Positions of every cell in the tour; revisited cells have several."""
        return visit_order_indexes(self.tour)


def play(steps: Iterator, grid: np.ndarray, delay: Delay = Delay.INSTANT,
         out: Optional[TextIO] = None, show_frames: bool = False) -> PlaybackSummary:
    """
    Consume `steps` to the end, keeping a drawn copy of `grid` up to date.
    With show_frames, every intermediate grid is written to `out`.
    """
    out = out or sys.stdout
    run = SearchRun(steps)
    current = np.array(grid, copy=True)
    n = 0
    for step in run:
        current = apply_step(current, step)
        n += 1
        if show_frames:
            out.write(render_text(current) + "\n\n")
            out.flush()
        if delay > 0:
            time.sleep(delay / 1000.0)

    return PlaybackSummary(
        outcome=run.outcome,
        steps=n,
        explored=run.explored,
        frontier_cells=run.frontier_cells,
        legs=len(run.paths),
        tour=concatenate_legs(run.paths),
        grid=current,
    )
