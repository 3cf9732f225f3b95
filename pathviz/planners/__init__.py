# -*- coding: utf-8 -*-
"""
Incremental planners on 4-connected occupancy grids with a unified API:
  planner.steps(grid) -> generator of search steps (returns an Outcome)
  planner.plan(grid)  -> {'success': bool, 'path': List[Cell] or None, 'explored': int}
  find_path(grid, algorithm) -> multi-goal tour over every GOAL in the grid
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Type, Union

from .base import FrontierPlanner, SearchContext, SearchRun
from .dfs import DFSPlanner
from .bfs import BFSPlanner
from .greedy_best_first import GreedyBestFirstPlanner
from .a_star import AStarPlanner
from .open_search import OpenSearchPlanner
from .straight_line_a_star import StraightLineAStarPlanner
from .steps import ExploreStep, FrontierStep, PathStep, GridStep, Outcome, TourResult


class Algorithm(Enum):
    DEPTH_FIRST = "dfs"
    BREADTH_FIRST = "bfs"
    GREEDY_BEST_FIRST = "greedy_best_first"
    A_STAR = "a_star"
    OPEN_SEARCH = "open_search"
    STRAIGHT_LINE_A_STAR = "straight_line_a_star"

    @property
    def label(self) -> str:
        return PLANNERS[self.value].label


# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type[FrontierPlanner]] = {
    "dfs": DFSPlanner,
    "bfs": BFSPlanner,
    "greedy_best_first": GreedyBestFirstPlanner,
    "a_star": AStarPlanner,
    "open_search": OpenSearchPlanner,
    "straight_line_a_star": StraightLineAStarPlanner,
}


def resolve_planner(algorithm: Union[Algorithm, str]) -> FrontierPlanner:
    """Instantiate a planner from an Algorithm, its id ('a_star') or its label ('A-Star')."""
    if isinstance(algorithm, Algorithm):
        return PLANNERS[algorithm.value]()
    key = str(algorithm).strip().lower()
    if key in PLANNERS:
        return PLANNERS[key]()
    for cls in PLANNERS.values():
        if cls.label.lower() == key:
            return cls()
    raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {sorted(PLANNERS)}")


from .multi_goal import find_path, MultiGoalSearch  # noqa: E402

__all__ = [
    "Algorithm",
    "FrontierPlanner",
    "SearchContext",
    "SearchRun",
    "DFSPlanner",
    "BFSPlanner",
    "GreedyBestFirstPlanner",
    "AStarPlanner",
    "OpenSearchPlanner",
    "StraightLineAStarPlanner",
    "ExploreStep",
    "FrontierStep",
    "PathStep",
    "GridStep",
    "Outcome",
    "TourResult",
    "PLANNERS",
    "resolve_planner",
    "find_path",
    "MultiGoalSearch",
]
