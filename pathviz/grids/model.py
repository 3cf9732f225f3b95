#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
model.py
--------
Grid model shared by every planner and collaborator.

Grid convention:
    grid is a (H, W) int8 numpy array of CellType codes.
    grid[r, c] == CellType.WALL means blocked; START/GOAL are passable.

FRONTIER / EXPLORED / PATH are transient overlays produced while a search is
being played back. They never replace START or GOAL, and WALL never changes.
All rewrites in this module return a new array; the input is left untouched.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np


# ------------------------------- Exceptions --------------------------------- #

class InvalidGridError(ValueError):
    """Grid cannot be searched (bad shape, unknown codes, missing start/goal)."""


class MissingStartError(InvalidGridError):
    def __init__(self, message: str = "Could not find the starting cell"):
        super().__init__(message)


class MissingGoalError(InvalidGridError):
    def __init__(self, message: str = "Could not find any goals"):
        super().__init__(message)


# ------------------------------- Value types -------------------------------- #

class CellType(IntEnum):
    UNEXPLORED = 0
    FRONTIER = 1
    EXPLORED = 2
    WALL = 3
    START = 4
    GOAL = 5
    PATH = 6


class Direction(IntEnum):
    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3


class Cell(NamedTuple):
    """(row, col) grid coordinate, zero-indexed."""
    row: int
    col: int

    def step(self, direction: Direction) -> "Cell":
        dr, dc = OFFSETS[direction]
        return Cell(self.row + dr, self.col + dc)


# Compass order used for neighbour generation: up, left, down, right
OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
}

TRANSIENT_TYPES = (CellType.FRONTIER, CellType.EXPLORED, CellType.PATH)
PROTECTED_TYPES = (CellType.START, CellType.GOAL, CellType.WALL)

GRID_DTYPE = np.int8


def direction_of(source: Cell, destination: Cell) -> Direction:
    """Compass direction of a single-cell move; ValueError for anything else."""
    offset = (destination[0] - source[0], destination[1] - source[1])
    for direction, delta in OFFSETS.items():
        if delta == offset:
            return direction
    raise ValueError(f"Invalid offset {offset} between {source} and {destination}")


# ------------------------------ Construction -------------------------------- #

def as_grid(cells) -> np.ndarray:
    """
    Coerce nested lists (or an array) of CellType codes into a grid array.

    Raises InvalidGridError for ragged rows, empty or non-2D input, non-integer
    values (floats, booleans) and codes outside CellType. Always returns a
    fresh array.
    """
    try:
        arr = np.asarray(cells)
    except (TypeError, ValueError) as e:
        raise InvalidGridError(f"Grid rows must be of equal length: {e}") from e
    if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
        raise InvalidGridError(f"Grid must be a non-empty 2D matrix, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidGridError(f"Grid must hold integer cell codes, got dtype {arr.dtype}")
    if arr.min() < min(CellType) or arr.max() > max(CellType):
        raise InvalidGridError("Grid contains unknown cell codes")
    return arr.astype(GRID_DTYPE)


def create_empty_grid(rows: int, cols: int) -> np.ndarray:
    if rows < 1 or cols < 1:
        raise InvalidGridError(f"Grid must have at least one row and column, got {rows}x{cols}")
    return np.full((rows, cols), CellType.UNEXPLORED, dtype=GRID_DTYPE)


# --------------------------------- Queries ---------------------------------- #

def in_bounds(cell: Cell, grid: np.ndarray) -> bool:
    H, W = grid.shape
    return (0 <= cell[0] < H) and (0 <= cell[1] < W)


def locate_start_and_goals(grid: np.ndarray) -> Tuple[Cell, List[Cell]]:
    """
    Scan the grid once in row-major order.

    Returns (start, goals). If several START cells exist the last one wins.
    Raises MissingStartError / MissingGoalError.
    """
    start: Optional[Cell] = None
    goals: List[Cell] = []
    H, W = grid.shape
    for r in range(H):
        for c in range(W):
            code = grid[r, c]
            if code == CellType.START:
                start = Cell(r, c)
            elif code == CellType.GOAL:
                goals.append(Cell(r, c))
    if start is None:
        raise MissingStartError()
    if not goals:
        raise MissingGoalError()
    return start, goals


def count_adjacent_walls(cell: Cell, grid: np.ndarray) -> int:
    count = 0
    for dr, dc in OFFSETS.values():
        nb = Cell(cell[0] + dr, cell[1] + dc)
        if in_bounds(nb, grid) and grid[nb] == CellType.WALL:
            count += 1
    return count


def valid_neighbors(cell: Cell, grid: np.ndarray, came_from: Dict[Cell, Optional[Cell]]) -> List[Cell]:
    """In-bounds, non-wall, not-yet-visited neighbours in up/left/down/right order."""
    out: List[Cell] = []
    for dr, dc in OFFSETS.values():
        nb = Cell(cell[0] + dr, cell[1] + dc)
        if not in_bounds(nb, grid):
            continue
        if grid[nb] == CellType.WALL or nb in came_from:
            continue
        out.append(nb)
    return out


# -------------------------------- Rewrites ---------------------------------- #

def reset_transient(grid: np.ndarray) -> np.ndarray:
    """New grid with FRONTIER/EXPLORED/PATH turned back into UNEXPLORED."""
    out = grid.copy()
    out[np.isin(out, TRANSIENT_TYPES)] = CellType.UNEXPLORED
    return out


def promote_goal_to_start(grid: np.ndarray, previous_start: Cell, reached_goal: Cell) -> np.ndarray:
    """
    Rewrite used between the legs of a multi-goal tour: the goal that was just
    reached becomes the new START and the old START is cleared.
    """
    out = grid.copy()
    out[previous_start] = CellType.UNEXPLORED
    out[reached_goal] = CellType.START
    return out


def mark_cells(grid: np.ndarray, cells: Iterable[Cell], cell_type: CellType) -> np.ndarray:
    """Overlay a transient type on cells, leaving START/GOAL/WALL untouched."""
    out = grid.copy()
    for cell in cells:
        if out[cell] not in PROTECTED_TYPES:
            out[cell] = cell_type
    return out
