#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal; returns the first path it stumbles on).
- 4-connected grid, LIFO frontier.
- Neighbours are generated up, left, down, right and pushed in *reverse*
  (right, down, left, up), so the stack pops them in up, left, down, right
  order. The resulting exploration order is visible in the step sequence.
"""

from __future__ import annotations
from typing import List

from ..grids.model import Cell
from .base import FrontierPlanner
from .moves import StackFrontier


class DFSPlanner(FrontierPlanner):
    name = "dfs"
    label = "Depth-First Search"

    def make_frontier(self):
        return StackFrontier()

    def order_neighbors(self, neighbors: List[Cell]) -> List[Cell]:
        return list(reversed(neighbors))
