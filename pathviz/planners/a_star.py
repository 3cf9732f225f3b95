#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* planner for 4-connected unit-cost grids.
- Priority: steps taken so far + Manhattan distance to the nearest goal.
- Keeps the best known step count per cell. A newly discovered route is only
  pushed when it is strictly shorter than the best known one; older entries
  stay in the heap and are skipped when popped after their cell is visited.

Manhattan distance is admissible and consistent here, so the path is optimal.
"""

from __future__ import annotations
from typing import Optional

from ..grids.model import Cell
from .base import FrontierPlanner, SearchContext
from .heuristics import nearest_goal
from .moves import HeapFrontier


class AStarPlanner(FrontierPlanner):
    name = "a_star"
    label = "A-Star"

    def make_frontier(self):
        return HeapFrontier()

    def heuristic(self, cell: Cell, ctx: SearchContext) -> float:
        return nearest_goal(cell, ctx.goals)[1]

    def priority(self, source: Cell, destination: Cell, ctx: SearchContext) -> Optional[float]:
        steps_to_neighbor = ctx.step_counts[source] + 1
        known = ctx.step_counts.get(destination)
        if known is not None and steps_to_neighbor >= known:
            return None
        ctx.step_counts[destination] = steps_to_neighbor
        return steps_to_neighbor + self.heuristic(destination, ctx)
