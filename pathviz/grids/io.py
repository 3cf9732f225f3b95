#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
io.py
-----
Text format for grids:

    [rows,cols]
    (startCol,startRow)
    (goalCol,goalRow) | (goalCol,goalRow) | ...
    (leftCol,topRow,width,height)          <- zero or more wall rectangles

Brackets, parentheses and whitespace inside a token are ignored, so
"[10, 20]", "(10,20)" and "10,20" all read the same. Coordinates in the file
are column-first; in memory cells are (row, col).

Grids larger than MAX_GRID_SIZE in either dimension are rejected here, before
they ever reach a planner.
"""

from __future__ import annotations

import os
import re
from typing import List, Sequence

import numpy as np

from .model import Cell, CellType, InvalidGridError, create_empty_grid

MAX_GRID_SIZE = 50

_STRIP = re.compile(r"[()\[\]\s]")


class GridFormatError(InvalidGridError):
    """The text could not be parsed into a grid."""


class GridTooLargeError(GridFormatError):
    pass


def parse_numbers(token: str, expected: int) -> List[int]:
    cleaned = _STRIP.sub("", token)
    parts = cleaned.split(",")
    if len(parts) != expected:
        raise GridFormatError(f"Expected {expected} comma-separated numbers, got '{token.strip()}'")
    try:
        return [int(p) for p in parts]
    except ValueError as e:
        raise GridFormatError(f"Bad number in '{token.strip()}'") from e


def _check_cell(cell: Cell, rows: int, cols: int, what: str) -> Cell:
    if not (0 <= cell.row < rows and 0 <= cell.col < cols):
        raise GridFormatError(f"{what} {cell.col},{cell.row} lies outside a {rows}x{cols} grid")
    return cell


def parse_grid(text: str, max_size: int = MAX_GRID_SIZE) -> np.ndarray:
    """Parse the text format; raises GridFormatError / GridTooLargeError."""
    lines = [ln for ln in text.strip().splitlines() if ln.strip()]
    if len(lines) < 3:
        raise GridFormatError("Need at least a size line, a start line and a goal line")

    rows, cols = parse_numbers(lines[0], 2)
    if rows < 1 or cols < 1:
        raise GridFormatError(f"Grid size must be positive, got {rows}x{cols}")
    if rows > max_size or cols > max_size:
        raise GridTooLargeError(f"Please input at most a {max_size}x{max_size} grid (got {rows}x{cols})")

    grid = create_empty_grid(rows, cols)

    start_col, start_row = parse_numbers(lines[1], 2)
    start = _check_cell(Cell(start_row, start_col), rows, cols, "Start")
    grid[start] = CellType.START

    for token in lines[2].split("|"):
        goal_col, goal_row = parse_numbers(token, 2)
        goal = _check_cell(Cell(goal_row, goal_col), rows, cols, "Goal")
        grid[goal] = CellType.GOAL

    for line in lines[3:]:
        left, top, width, height = parse_numbers(line, 4)
        if width < 0 or height < 0:
            raise GridFormatError(f"Wall size must be non-negative in '{line.strip()}'")
        if width == 0 or height == 0:
            continue
        _check_cell(Cell(top, left), rows, cols, "Wall corner")
        _check_cell(Cell(top + height - 1, left + width - 1), rows, cols, "Wall corner")
        grid[top:top + height, left:left + width] = CellType.WALL

    return grid


def _wall_runs(grid: np.ndarray) -> List[Sequence[int]]:
    """Horizontal runs of wall cells as (left, top, width, 1) rectangles."""
    runs = []
    H, W = grid.shape
    for r in range(H):
        c = 0
        while c < W:
            if grid[r, c] == CellType.WALL:
                c0 = c
                while c < W and grid[r, c] == CellType.WALL:
                    c += 1
                runs.append((c0, r, c - c0, 1))
            else:
                c += 1
    return runs


def dump_grid(grid: np.ndarray) -> str:
    """
    Serialize a grid to the text format. Transient cells are not exported.
    Requires exactly one START and at least one GOAL.
    """
    starts = np.argwhere(grid == CellType.START)
    goals = np.argwhere(grid == CellType.GOAL)
    if len(starts) != 1:
        raise InvalidGridError(f"Exactly one start cell is required to export, found {len(starts)}")
    if len(goals) == 0:
        raise InvalidGridError("At least one goal cell is required to export")

    H, W = grid.shape
    sr, sc = (int(v) for v in starts[0])
    lines = [
        f"[{H},{W}]",
        f"({sc},{sr})",
        " | ".join(f"({int(c)},{int(r)})" for r, c in goals),
    ]
    lines.extend(f"({l},{t},{w},{h})" for l, t, w, h in _wall_runs(grid))
    return "\n".join(lines) + "\n"


def load_grid(path: str, max_size: int = MAX_GRID_SIZE) -> np.ndarray:
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid(f.read(), max_size=max_size)


def save_grid(grid: np.ndarray, path: str) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_grid(grid))
    return path
