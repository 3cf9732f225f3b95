#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- 4-connected grid, FIFO frontier.
- The first GOAL explored is at minimum edge count from the start.
"""

from __future__ import annotations

from .base import FrontierPlanner
from .moves import QueueFrontier


class BFSPlanner(FrontierPlanner):
    name = "bfs"
    label = "Breadth-First Search"

    def make_frontier(self):
        return QueueFrontier()
