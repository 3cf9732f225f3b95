#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Randomized grid generator.

- Each cell is a wall with probability `density` (default 20%).
- START is placed at a random corner, the first GOAL at the diagonally
  opposite corner.
- With `multiple_goals`, a second goal takes one of the two remaining corners;
  the last corner and the centre each receive a goal with probability 0.5.

Reproducibility: pass an explicit np.random.Generator.
Planners perform their own start/goal discovery and do not trust any of the
metadata returned here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .model import Cell, CellType, GRID_DTYPE, create_empty_grid, InvalidGridError

DEFAULT_ROWS = 20
DEFAULT_COLS = 40
DEFAULT_WALL_DENSITY = 0.2


@dataclass
class GeneratedGrid:
    grid: np.ndarray
    start: Cell
    goals: List[Cell]
    settings: Dict = field(default_factory=dict)   # provenance of the draw

    @property
    def shape(self):
        return self.grid.shape


def _corners(rows: int, cols: int) -> List[Cell]:
    return [
        Cell(0, 0),
        Cell(0, cols - 1),
        Cell(rows - 1, 0),
        Cell(rows - 1, cols - 1),
    ]


def generate_grid(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    *,
    multiple_goals: bool = False,
    density: float = DEFAULT_WALL_DENSITY,
    rng: Optional[np.random.Generator] = None,
) -> GeneratedGrid:
    """
    Draw a random grid with walls, one start and one or more goals.

    On 1-wide grids several corners coincide; a later placement simply
    overwrites an earlier one, as long as a START and a GOAL survive.
    """
    if rows < 2 and cols < 2:
        raise InvalidGridError("A random grid needs at least two cells")
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"density must be within [0, 1], got {density}")

    rng = rng or np.random.default_rng()
    settings = dict(
        rows=rows, cols=cols, multiple_goals=multiple_goals, density=density,
        seed=int(rng.integers(0, 2**31 - 1)),
    )

    walls = rng.random((rows, cols)) < density
    grid = create_empty_grid(rows, cols)
    grid[walls] = CellType.WALL

    corners = _corners(rows, cols)
    order = rng.permutation(len(corners))
    corners = [corners[i] for i in order]

    start = corners.pop()
    goal = Cell(rows - 1 - start.row, cols - 1 - start.col)
    goals = [goal]
    if goal in corners:
        corners.remove(goal)

    if multiple_goals:
        goals.append(corners.pop())
        if corners and rng.random() < 0.5:
            goals.append(corners.pop())
        if rng.random() < 0.5:
            goals.append(Cell(rows // 2, cols // 2))

    for g in goals:
        grid[g] = CellType.GOAL
    # START is placed last so a coinciding goal never erases it
    grid[start] = CellType.START
    goals = [g for g in dict.fromkeys(goals) if g != start]

    return GeneratedGrid(grid=grid.astype(GRID_DTYPE), start=start, goals=goals, settings=settings)
