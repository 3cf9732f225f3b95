#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path reconstruction and path-derived views.

- reconstruct_path: back-trace a predecessor map into a start->goal list.
- directions_along_path: per-cell travel direction (single-leg rendering).
- visit_order_indexes: per-cell positions in a path that may revisit cells
  (tours chained across several goals).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Sequence

from ..grids.model import Cell, Direction, direction_of


def reconstruct_path(start: Cell, goal: Cell,
                     came_from: Mapping[Cell, Optional[Cell]]) -> List[Cell]:
    """Walk predecessors from goal back to start; returns start..goal inclusive."""
    path: List[Cell] = []
    current = goal
    while current != start:
        path.append(current)
        previous = came_from.get(current)
        if previous is None:
            raise ValueError(f"{current} has no predecessor on the way back to {start}")
        current = previous
    path.append(start)
    path.reverse()
    return path


def directions_along_path(path: Sequence[Cell]) -> Dict[Cell, Direction]:
    """Map every non-final cell to the direction of its successor."""
    directions: Dict[Cell, Direction] = {}
    for current, nxt in zip(path[:-1], path[1:]):
        directions[Cell(*current)] = direction_of(current, nxt)
    return directions


def visit_order_indexes(path: Sequence[Cell]) -> Dict[Cell, List[int]]:
    order: Dict[Cell, List[int]] = defaultdict(list)
    for i, cell in enumerate(path):
        order[Cell(*cell)].append(i)
    return dict(order)


def follow_directions(start: Cell, directions: Mapping[Cell, Direction]) -> List[Cell]:
    """Walk from start along the direction map until a cell has no entry."""
    walked = [Cell(*start)]
    seen = {walked[0]}
    while walked[-1] in directions:
        nxt = walked[-1].step(directions[walked[-1]])
        if nxt in seen:
            raise ValueError(f"Direction map loops back to {nxt}")
        seen.add(nxt)
        walked.append(nxt)
    return walked


def concatenate_legs(paths: Sequence[Sequence[Cell]]) -> List[Cell]:
    """Join consecutive leg paths, counting each shared endpoint once."""
    tour: List[Cell] = []
    for leg in paths:
        if tour and leg and tour[-1] == leg[0]:
            tour.extend(Cell(*c) for c in leg[1:])
        else:
            tour.extend(Cell(*c) for c in leg)
    return tour
