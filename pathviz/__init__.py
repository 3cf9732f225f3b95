# -*- coding: utf-8 -*-
"""
Top-level package for incremental grid pathfinding.
Provides convenience factories for planners and multi-goal tours.
"""

from __future__ import annotations
from typing import Any

__all__ = [
    "__version__",
    "get_planner",
    "find_path",
]

__version__ = "0.1.0"


def get_planner(name: str) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'dfs', 'bfs', 'greedy_best_first', 'a_star', 'open_search',
        'straight_line_a_star' (display labels such as 'A-Star' also work)

    Returns
    -------
    planner instance
    """
    from .planners import resolve_planner  # lazy import
    return resolve_planner(name)


def find_path(grid, algorithm, all_goals: bool = True):
    """Step generator over every goal of `grid`; see pathviz.planners.multi_goal."""
    from .planners import find_path as _find_path  # lazy import
    return _find_path(grid, algorithm, all_goals=all_goals)
