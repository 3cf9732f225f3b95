#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
multi_goal.py
-------------
Chains single-goal searches into a tour over every GOAL in the grid.

For leg i (0-based):
  1) clear transient cells;
  2) for i > 0, the goal reached by the previous leg becomes START and the
     previous START is cleared; a GridStep with that grid is emitted;
  3) one planner run is forwarded step by step.

A leg that runs out of frontier ends the tour; steps already emitted stay
valid. With all_goals=False only the first leg runs (single-goal mode).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Generator, List, Optional, Union

import numpy as np

from ..grids.model import (
    Cell,
    as_grid,
    locate_start_and_goals,
    promote_goal_to_start,
    reset_transient,
)
from .base import SearchRun
from .steps import GridStep, Outcome, TourResult

logger = logging.getLogger(__name__)


class MultiGoalSearch:
    def __init__(self, grid, algorithm, all_goals: bool = True):
        from . import resolve_planner  # lazy import

        self.grid: np.ndarray = as_grid(grid)
        # raises MissingStartError / MissingGoalError before any step exists
        self.start, self.goals = locate_start_and_goals(self.grid)
        self.planner = resolve_planner(algorithm)
        self.all_goals = all_goals

    @property
    def num_legs(self) -> int:
        return len(self.goals) if self.all_goals else 1

    def steps(self) -> Generator:
        return self._tour()

    def _tour(self) -> Generator:
        grid = self.grid
        previous_start: Optional[Cell] = None
        previous_goal: Optional[Cell] = None
        paths: List[tuple] = []

        for leg in range(self.num_legs):
            grid = reset_transient(grid)
            if previous_start is not None and previous_goal is not None:
                grid = promote_goal_to_start(grid, previous_start, previous_goal)
                logger.debug("leg %d: start moved %s -> %s", leg, previous_start, previous_goal)
                yield GridStep(grid)

            run = SearchRun(self.planner.steps(grid))
            yield from run
            if run.outcome is not Outcome.FOUND:
                logger.info("%s: leg %d/%d found no reachable goal, tour stops after %d leg(s)",
                            self.planner.name, leg + 1, self.num_legs, leg)
                return TourResult(Outcome.UNREACHABLE, leg, paths)

            path = run.paths[-1]
            paths.append(path)
            previous_start, previous_goal = path[0], path[-1]

        logger.info("%s: tour complete, %d leg(s)", self.planner.name, len(paths))
        return TourResult(Outcome.FOUND, len(paths), paths)


def find_path(grid, algorithm: Union[str, Enum], all_goals: bool = True) -> Generator:
    """
    Step generator for a whole tour. Invalid grids raise here, eagerly.
    The generator's return value is a TourResult.
    """
    return MultiGoalSearch(grid, algorithm, all_goals=all_goals).steps()
