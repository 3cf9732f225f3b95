# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m pathviz.cli.<name>`):

- run_search     : run one algorithm on a grid file or a random grid, play it back
- run_benchmark  : compare planners over many random grids, write a CSV
- plot_bench     : bar charts from a benchmark CSV
- playback       : terminal step driver used by run_search (delay presets, text frames)
"""
__all__ = [
    "run_search",
    "run_benchmark",
    "plot_bench",
    "playback",
]
