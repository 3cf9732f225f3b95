#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy Best-First planner.
- Always expands the move whose destination is closest (Manhattan) to the
  nearest goal. No path-cost term: fast, but paths are not optimal.
"""

from __future__ import annotations
from typing import Optional

from ..grids.model import Cell
from .base import FrontierPlanner, SearchContext
from .heuristics import nearest_goal
from .moves import HeapFrontier


class GreedyBestFirstPlanner(FrontierPlanner):
    name = "greedy_best_first"
    label = "Greedy Best-First Search"

    def make_frontier(self):
        return HeapFrontier()

    def priority(self, source: Cell, destination: Cell, ctx: SearchContext) -> Optional[float]:
        return nearest_goal(destination, ctx.goals)[1]
