#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Open Search planner.
- Prefers destinations with fewer walls in their 4-neighbourhood, so the
  search drifts through open areas. Goal-agnostic and not optimal.
"""

from __future__ import annotations
from typing import Optional

from ..grids.model import Cell, count_adjacent_walls
from .base import FrontierPlanner, SearchContext
from .moves import HeapFrontier


class OpenSearchPlanner(FrontierPlanner):
    name = "open_search"
    label = "Open Search"

    def make_frontier(self):
        return HeapFrontier()

    def priority(self, source: Cell, destination: Cell, ctx: SearchContext) -> Optional[float]:
        return count_adjacent_walls(destination, ctx.grid)
