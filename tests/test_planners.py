#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import itertools

import numpy as np
import pytest

from pathviz import get_planner
from pathviz.grids import Cell, CellType, MissingGoalError, MissingStartError, locate_start_and_goals
from pathviz.planners import (
    PLANNERS, Algorithm, AStarPlanner, BFSPlanner, DFSPlanner, GreedyBestFirstPlanner,
    OpenSearchPlanner, Outcome, SearchRun, StraightLineAStarPlanner, resolve_planner,
)
from pathviz.planners.reconstruction import directions_along_path, follow_directions
from tests.grid_utils import (
    assert_valid_path, explored, grid_from_rows, random_grid, reachable_cells, reference_distance,
)

ALL = sorted(PLANNERS)


def _run(name, grid):
    run = SearchRun(PLANNERS[name]().steps(grid))
    steps = list(run)
    return run, steps


# --- Concrete scenarios ---------------------------------------------------------

def test_bfs_three_by_three_with_center_wall():
    grid = grid_from_rows("S..", ".#.", "..G")
    run, steps = _run("bfs", grid)
    assert run.outcome is Outcome.FOUND
    assert steps[-1].kind == "path"
    path = steps[-1].path
    assert len(path) == 5
    assert path[0] == Cell(0, 0) and path[-1] == Cell(2, 2)
    assert path == (Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(2, 1), Cell(2, 2))
    assert explored(steps) == [
        Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(2, 0),
        Cell(0, 2), Cell(2, 1), Cell(1, 2), Cell(2, 2),
    ]
    # steps alternate explore/frontier until the goal, then path
    kinds = [s.kind for s in steps]
    assert kinds == ["explore", "frontier"] * 7 + ["explore", "path"]
    assert steps[1].cells == (Cell(1, 0), Cell(0, 1))


def test_dfs_explores_up_left_down_right():
    grid = grid_from_rows("...", ".S.", "..G")
    run, steps = _run("dfs", grid)
    assert explored(steps) == [
        Cell(1, 1), Cell(0, 1), Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(2, 1), Cell(2, 2),
    ]
    # the frontier step lists the moves in push order (reversed compass)
    assert steps[1].cells == (Cell(1, 2), Cell(2, 1), Cell(1, 0), Cell(0, 1))
    assert len(steps[-1].path) == 7


def test_greedy_runs_straight_on_open_grid():
    grid = grid_from_rows("S...G", ".....", ".....")
    run, steps = _run("greedy_best_first", grid)
    assert explored(steps) == [Cell(0, c) for c in range(5)]
    assert run.paths[-1] == tuple(Cell(0, c) for c in range(5))


def test_open_search_matches_bfs_without_walls():
    # every priority is 0, so insertion order decides: FIFO like BFS
    grid = grid_from_rows("S....", ".....", "....G")
    _, open_steps = _run("open_search", grid)
    _, bfs_steps = _run("bfs", grid)
    assert open_steps == bfs_steps


def test_open_search_prefers_open_cells():
    grid = grid_from_rows("#.#", ".S.", "#.#", "...", "G..")
    # (1,0) and (1,2) have 2 wall neighbours, (0,1) has 2, (2,1) has 2: ties resolved by index
    run, steps = _run("open_search", grid)
    assert run.outcome is Outcome.FOUND
    assert explored(steps)[:2] == [Cell(1, 1), Cell(0, 1)]


def test_straight_line_a_star_path_is_valid():
    grid = grid_from_rows("S.....", ".##...", "....#.", ".....G")
    run, steps = _run("straight_line_a_star", grid)
    assert run.outcome is Outcome.FOUND
    assert_valid_path(grid, run.paths[-1])


@pytest.mark.parametrize("name", ALL)
def test_enclosed_goal_is_unreachable(name):
    grid = grid_from_rows("S....", "..###", "..#G#")
    run, steps = _run(name, grid)
    assert run.outcome is Outcome.UNREACHABLE
    assert all(s.kind != "path" for s in steps)
    assert set(explored(steps)) == reachable_cells(grid, Cell(0, 0))
    assert len(explored(steps)) == 9


@pytest.mark.parametrize("name", ALL)
def test_start_next_to_goal(name):
    grid = grid_from_rows("SG")
    run, steps = _run(name, grid)
    assert run.paths == [(Cell(0, 0), Cell(0, 1))]


# --- Properties -----------------------------------------------------------------

@pytest.mark.parametrize("name", ALL)
def test_runs_are_deterministic(name):
    grid = random_grid(3, density=0.2)
    assert list(PLANNERS[name]().steps(grid)) == list(PLANNERS[name]().steps(grid))


@pytest.mark.parametrize("name", ALL)
def test_each_cell_explored_once_and_walls_untouched(name):
    for seed in range(5):
        grid = random_grid(seed)
        _, steps = _run(name, grid)
        cells = explored(steps)
        assert len(cells) == len(set(cells))
        touched = set(cells)
        for s in steps:
            if s.kind == "frontier":
                touched.update(s.cells)
            elif s.kind == "path":
                touched.update(s.path)
        assert all(grid[c] != CellType.WALL for c in touched)


@pytest.mark.parametrize("name", ["bfs", "a_star"])
def test_bfs_and_a_star_are_optimal(name):
    checked = 0
    for seed in range(40):
        grid = random_grid(seed, H=12, W=16, density=0.25)
        start, _ = locate_start_and_goals(grid)
        expected = reference_distance(grid, start)
        res = PLANNERS[name]().plan(grid)
        if expected is None:
            assert not res["success"] and res["path"] is None
            continue
        assert res["success"]
        assert len(res["path"]) - 1 == expected
        checked += 1
    assert checked > 5


def test_a_star_optimal_with_several_goals():
    grid = grid_from_rows(
        "G.......",
        ".######.",
        ".#S...#.",
        ".#.##.#.",
        "...#..#G",
    )
    res = AStarPlanner().plan(grid)
    assert len(res["path"]) - 1 == reference_distance(grid, Cell(2, 2))


@pytest.mark.parametrize("name", ALL)
def test_directions_round_trip(name):
    for seed in range(6):
        grid = random_grid(seed, density=0.15)
        res = PLANNERS[name]().plan(grid)
        if not res["success"]:
            continue
        path = res["path"]
        assert_valid_path(grid, path)
        assert follow_directions(path[0], directions_along_path(path)) == path


def test_input_grid_is_not_mutated():
    grid = random_grid(2)
    before = grid.copy()
    for name in ALL:
        list(PLANNERS[name]().steps(grid))
    assert np.array_equal(grid, before)


def test_abandoned_run_leaves_no_state():
    grid = random_grid(4, density=0.1)
    planner = AStarPlanner()
    partial = planner.steps(grid)
    list(itertools.islice(partial, 7))
    assert list(planner.steps(grid)) == list(AStarPlanner().steps(grid))


# --- Validation & factories -----------------------------------------------------

def test_steps_validate_eagerly():
    with pytest.raises(MissingStartError):
        BFSPlanner().steps(grid_from_rows("..G"))
    with pytest.raises(MissingGoalError):
        DFSPlanner().steps(grid_from_rows("S.."))


def test_finished_run_keeps_outcome_when_iterated_again():
    run = SearchRun(BFSPlanner().steps(grid_from_rows("S.G"))).run()
    assert run.found and run.explored == 3
    assert list(run) == []
    assert run.outcome is Outcome.FOUND
    assert run.explored == 3 and len(run.paths) == 1

    run = SearchRun(BFSPlanner().steps(grid_from_rows("S#G"))).run()
    assert list(run) == []
    assert run.outcome is Outcome.UNREACHABLE


def test_plan_dict():
    res = GreedyBestFirstPlanner().plan(grid_from_rows("S.G"))
    assert res == {"success": True, "path": [Cell(0, 0), Cell(0, 1), Cell(0, 2)], "explored": 3}
    res = OpenSearchPlanner().plan(grid_from_rows("S#G"))
    assert res == {"success": False, "path": None, "explored": 1}


def test_resolve_planner_by_id_label_and_enum():
    assert isinstance(resolve_planner("a_star"), AStarPlanner)
    assert isinstance(resolve_planner("Straight-Line A-Star"), StraightLineAStarPlanner)
    assert isinstance(resolve_planner(Algorithm.BREADTH_FIRST), BFSPlanner)
    assert isinstance(get_planner("DFS"), DFSPlanner)
    assert isinstance(get_planner("a_star"), AStarPlanner)
    with pytest.raises(TypeError):
        get_planner("a_star", connectivity=4)
    assert Algorithm.GREEDY_BEST_FIRST.label == "Greedy Best-First Search"
    with pytest.raises(ValueError):
        resolve_planner("dijkstra")
