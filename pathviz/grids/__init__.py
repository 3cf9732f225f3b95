# -*- coding: utf-8 -*-
"""
Grid model and grid collaborators.
Exposes:
- Cell, CellType, Direction and the pure grid queries/rewrites (model.py)
- generate_grid(...) random grids (generator.py)
- parse_grid / dump_grid / load_grid / save_grid text format (io.py)
"""

from __future__ import annotations

from .model import (
    Cell,
    CellType,
    Direction,
    OFFSETS,
    InvalidGridError,
    MissingStartError,
    MissingGoalError,
    as_grid,
    create_empty_grid,
    in_bounds,
    locate_start_and_goals,
    count_adjacent_walls,
    valid_neighbors,
    reset_transient,
    promote_goal_to_start,
    mark_cells,
    direction_of,
)
from .generator import GeneratedGrid, generate_grid
from .io import (
    MAX_GRID_SIZE,
    GridFormatError,
    GridTooLargeError,
    parse_grid,
    dump_grid,
    load_grid,
    save_grid,
)

__all__ = [
    "Cell",
    "CellType",
    "Direction",
    "OFFSETS",
    "InvalidGridError",
    "MissingStartError",
    "MissingGoalError",
    "as_grid",
    "create_empty_grid",
    "in_bounds",
    "locate_start_and_goals",
    "count_adjacent_walls",
    "valid_neighbors",
    "reset_transient",
    "promote_goal_to_start",
    "mark_cells",
    "direction_of",
    "GeneratedGrid",
    "generate_grid",
    "MAX_GRID_SIZE",
    "GridFormatError",
    "GridTooLargeError",
    "parse_grid",
    "dump_grid",
    "load_grid",
    "save_grid",
]
