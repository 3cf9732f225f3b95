#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Moves and frontier containers.

A Move is a candidate transition source -> destination. Heap-ordered
planners rank moves by (priority, index): lower priority first, and on ties
the move discovered first wins, so identical inputs always expand in the same
order.
"""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..grids.model import Cell


@dataclass(frozen=True)
class Move:
    source: Optional[Cell]        # None for the seed move onto the start cell
    destination: Cell
    priority: float = 0.0
    index: int = 0

    def sort_key(self) -> Tuple[float, int]:
        return (self.priority, self.index)

    def __lt__(self, other: "Move") -> bool:
        return self.sort_key() < other.sort_key()


def compare_moves(a: Move, b: Move) -> int:
    """Negative if a ranks before b, positive if after, 0 if they tie."""
    if a.priority != b.priority:
        return -1 if a.priority < b.priority else 1
    return (a.index > b.index) - (a.index < b.index)


# ------------------------------ Frontiers ----------------------------------- #

class StackFrontier:
    """Last in, first out."""

    def __init__(self):
        self._items: List[Move] = []

    def push(self, move: Move) -> None:
        self._items.append(move)

    def pop(self) -> Move:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class QueueFrontier:
    """First in, first out."""

    def __init__(self):
        self._items = deque()

    def push(self, move: Move) -> None:
        self._items.append(move)

    def pop(self) -> Move:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class HeapFrontier:
    """Min-heap on Move.sort_key()."""

    def __init__(self):
        self._heap: List[Move] = []

    def push(self, move: Move) -> None:
        heapq.heappush(self._heap, move)

    def pop(self) -> Move:
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
