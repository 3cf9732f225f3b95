# -*- coding: utf-8 -*-
"""
Heuristic terms used by the informed planners (4-connected, unit-cost grid).
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from ..grids.model import Cell


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def nearest_goal(cell: Cell, goals: Sequence[Cell]) -> Tuple[Optional[Cell], float]:
    """
    (goal, distance) of the closest goal by Manhattan distance.
    On ties the goal listed first wins. Empty goals -> (None, inf).
    """
    best: Optional[Cell] = None
    best_d = math.inf
    for goal in goals:
        d = manhattan_distance(cell, goal)
        if d < best_d:
            best, best_d = goal, d
    return best, best_d


def straightness_penalty(cell: Cell, goal: Cell) -> float:
    """
    Angular deviation between the cell->goal line and the nearest grid axis,
    in radians (0 .. pi/4). Zero when the two share a row or a column.
    """
    if cell[0] == goal[0] or cell[1] == goal[1]:
        return 0.0
    d_row = abs(goal[0] - cell[0])
    d_col = abs(goal[1] - cell[1])
    return min(math.atan(d_col / d_row), math.atan(d_row / d_col))
