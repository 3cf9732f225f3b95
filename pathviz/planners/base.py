#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared step loop for all frontier-based planners.

Every planner answers two questions through hooks:
  - make_frontier(): which container orders the candidate moves
  - priority(source, destination, ctx): rank of a new move (None = skip it)

The loop itself is identical for every strategy:
  pop a move; skip it if its destination was already visited (a cell may sit
  in the frontier several times); record the predecessor and emit an explore
  step; stop with a path step on a GOAL cell; otherwise emit the newly
  discovered neighbours as a frontier step and push them.

Planners keep no state between runs: everything a run needs lives in its
SearchContext, created fresh by steps().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Generator, List, Optional, Union

import numpy as np

from ..grids.model import (
    Cell,
    CellType,
    as_grid,
    locate_start_and_goals,
    valid_neighbors,
)
from .moves import Move
from .reconstruction import reconstruct_path
from .steps import ExploreStep, FrontierStep, Outcome, PathStep, TourResult

logger = logging.getLogger(__name__)

Step = Union[ExploreStep, FrontierStep, PathStep]
StepGenerator = Generator[Step, None, Outcome]


@dataclass
class SearchContext:
    """Per-run state. The predecessor map doubles as the visited set."""
    grid: np.ndarray
    start: Cell
    goals: List[Cell]
    came_from: Dict[Cell, Optional[Cell]] = field(default_factory=dict)
    step_counts: Dict[Cell, int] = field(default_factory=dict)

    def visited(self, cell: Cell) -> bool:
        return cell in self.came_from


class FrontierPlanner:
    name: str = "frontier"
    label: str = "Frontier search"

    # ---- strategy hooks ---- #

    def make_frontier(self):
        raise NotImplementedError

    def order_neighbors(self, neighbors: List[Cell]) -> List[Cell]:
        return neighbors

    def priority(self, source: Cell, destination: Cell, ctx: SearchContext) -> Optional[float]:
        return 0.0

    # ---- driver ---- #

    def steps(self, grid) -> StepGenerator:
        """
        Lazy step sequence for one search on `grid`.

        Validation happens here, before the generator exists, so a grid
        without START or GOAL raises immediately and no step is produced.
        The generator returns Outcome.FOUND after the path step, or
        Outcome.UNREACHABLE when the frontier runs dry.
        """
        grid = as_grid(grid)
        start, goals = locate_start_and_goals(grid)
        return self._search(SearchContext(grid=grid, start=start, goals=goals))

    def _search(self, ctx: SearchContext) -> StepGenerator:
        grid = ctx.grid
        ctx.step_counts[ctx.start] = 0
        frontier = self.make_frontier()
        frontier.push(Move(source=None, destination=ctx.start))
        index = 0

        while frontier:
            move = frontier.pop()
            current = move.destination
            if ctx.visited(current):
                continue

            ctx.came_from[current] = move.source
            yield ExploreStep(current)

            if grid[current] == CellType.GOAL:
                path = reconstruct_path(ctx.start, current, ctx.came_from)
                logger.debug("%s reached %s after %d explored cells (path %d cells)",
                             self.name, current, len(ctx.came_from), len(path))
                yield PathStep(tuple(path))
                return Outcome.FOUND

            neighbors = self.order_neighbors(valid_neighbors(current, grid, ctx.came_from))
            yield FrontierStep(tuple(neighbors))
            for nb in neighbors:
                prio = self.priority(current, nb, ctx)
                if prio is None:
                    continue
                frontier.push(Move(current, nb, prio, index))
                index += 1

        logger.info("%s: no goal reachable from %s (%d cells explored)",
                    self.name, ctx.start, len(ctx.came_from))
        return Outcome.UNREACHABLE

    def plan(self, grid) -> Dict:
        """
        Run to completion.
        Returns {'success': bool, 'path': list[Cell] or None, 'explored': int}.
        """
        run = SearchRun(self.steps(grid)).run()
        return {
            "success": run.outcome is Outcome.FOUND,
            "path": list(run.paths[-1]) if run.paths else None,
            "explored": run.explored,
        }


class SearchRun:
    """
    Iterable wrapper around a step generator (single planner or a whole tour).

    Iterating yields the steps unchanged; once the generator finishes,
    `outcome`, `result`, `paths`, `explored` and `frontier_cells` describe
    the run. Stopping early leaves `outcome` as None; iterating a finished
    run again yields nothing and keeps its result.
    """

    def __init__(self, steps: Iterator):
        self._steps = steps
        self.result = None
        self.outcome: Optional[Outcome] = None
        self.paths: List[tuple] = []
        self.explored = 0
        self.frontier_cells = 0
        self.grid_rewrites = 0
        self._done = False

    def __iter__(self):
        if self._done:
            return
        while True:
            try:
                step = next(self._steps)
            except StopIteration as stop:
                self._finish(stop.value)
                return
            self._record(step)
            yield step

    def _record(self, step) -> None:
        if step.kind == "explore":
            self.explored += 1
        elif step.kind == "frontier":
            self.frontier_cells += len(step.cells)
        elif step.kind == "path":
            self.paths.append(step.path)
        elif step.kind == "grid":
            self.grid_rewrites += 1

    def _finish(self, value) -> None:
        self._done = True
        self.result = value
        if isinstance(value, TourResult):
            self.outcome = value.outcome
        else:
            self.outcome = value

    def run(self) -> "SearchRun":
        for _ in self:
            pass
        return self

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.FOUND
