#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from pathviz.grids import (
    CellType, GridFormatError, GridTooLargeError, InvalidGridError,
    dump_grid, load_grid, parse_grid, save_grid,
)
from tests.grid_utils import grid_from_rows

SAMPLE = """
[5, 11]
(0,1)
(7,0) | (10,3)
(2,0,2,2)
(8,0,1,2)
(10,0,1,1)
(5,2,1,1)
(6,3,4,1)
"""


def test_parse_sample():
    grid = parse_grid(SAMPLE)
    assert grid.shape == (5, 11)
    assert grid[1, 0] == CellType.START
    assert grid[0, 7] == CellType.GOAL and grid[3, 10] == CellType.GOAL
    # (2,0,2,2): columns 2-3, rows 0-1
    assert (grid[0:2, 2:4] == CellType.WALL).all()
    assert (grid[3, 6:10] == CellType.WALL).all()
    assert int((grid == CellType.WALL).sum()) == 4 + 2 + 1 + 1 + 4


def test_parse_rejects_large_grid():
    with pytest.raises(GridTooLargeError):
        parse_grid("[51,10]\n(0,0)\n(1,1)\n")
    assert parse_grid("[50,50]\n(0,0)\n(49,49)\n").shape == (50, 50)


@pytest.mark.parametrize("text", [
    "[5,5]\n(0,0)\n",                       # missing goal line
    "[5,x]\n(0,0)\n(1,1)\n",                # bad number
    "[5,5]\n(0,0,1)\n(1,1)\n",              # wrong arity
    "[5,5]\n(0,9)\n(1,1)\n",                # start outside
    "[5,5]\n(0,0)\n(1,1)\n(4,4,3,1)\n",     # wall overflows
])
def test_parse_malformed(text):
    with pytest.raises(GridFormatError):
        parse_grid(text)


def test_dump_then_parse_keeps_layout():
    grid = grid_from_rows("S.##.", "..#G.", "##..G")
    assert np.array_equal(parse_grid(dump_grid(grid)), grid)


def test_dump_drops_transient_cells():
    grid = grid_from_rows("So,*G")
    assert np.array_equal(parse_grid(dump_grid(grid)), grid_from_rows("S...G"))


def test_dump_requires_single_start():
    with pytest.raises(InvalidGridError):
        dump_grid(grid_from_rows("S.S.G"))


def test_save_and_load(tmp_path):
    grid = grid_from_rows("S..", ".#.", "..G")
    path = save_grid(grid, str(tmp_path / "maps" / "demo.txt"))
    assert np.array_equal(load_grid(path), grid)
