#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Straight-Line A* planner.
- A* whose heuristic adds the angle (radians) between the line to the
  nearest goal and the closest grid axis. Cells lined up with a goal are
  preferred, which yields visually straighter paths.
- The extra term can overestimate, so optimality is not guaranteed.
"""

from __future__ import annotations

from ..grids.model import Cell
from .a_star import AStarPlanner
from .base import SearchContext
from .heuristics import nearest_goal, straightness_penalty


class StraightLineAStarPlanner(AStarPlanner):
    name = "straight_line_a_star"
    label = "Straight-Line A-Star"

    def heuristic(self, cell: Cell, ctx: SearchContext) -> float:
        goal, distance = nearest_goal(cell, ctx.goals)
        return distance + straightness_penalty(cell, goal)
