# -*- coding: utf-8 -*-
"""
Search steps emitted by planners and by the multi-goal orchestrator.

Every step is an immutable value with a `kind` tag:
    "explore"   one cell moved from the frontier to the visited set
    "frontier"  cells newly discovered from the last explored cell
    "path"      goal reached; cells ordered start -> goal inclusive
    "grid"      orchestrator only: the rewritten grid for the next leg

Steps hold no reference to planner state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

import numpy as np

from ..grids.model import Cell


class Outcome(Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class ExploreStep:
    cell: Cell
    kind: str = field(default="explore", init=False)


@dataclass(frozen=True)
class FrontierStep:
    cells: Tuple[Cell, ...]
    kind: str = field(default="frontier", init=False)


@dataclass(frozen=True)
class PathStep:
    path: Tuple[Cell, ...]
    kind: str = field(default="path", init=False)

    def __len__(self) -> int:
        return len(self.path)


@dataclass(frozen=True, eq=False)
class GridStep:
    grid: np.ndarray
    kind: str = field(default="grid", init=False)

    def __post_init__(self):
        # private read-only copy; later rewrites by the caller never leak in
        frozen = np.array(self.grid, copy=True)
        frozen.setflags(write=False)
        object.__setattr__(self, "grid", frozen)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridStep):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    __hash__ = None


@dataclass
class TourResult:
    """Return value of a multi-goal tour generator."""
    outcome: Outcome
    legs_completed: int
    paths: List[Tuple[Cell, ...]] = field(default_factory=list)
