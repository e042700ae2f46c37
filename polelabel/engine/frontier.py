"""Search frontier — max-priority queue of cells keyed on their upper bound."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from polelabel.engine.cell import Cell


class CellFrontier:
    """Cells not yet expanded, popped greatest ``max`` first.

    heapq is a min-heap, so entries are keyed on ``-max``. A running counter
    breaks ties in insertion order, which keeps every run deterministic.
    """

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._heap: list[tuple[float, int, Cell]] = []
        self._counter = 0
        self.pushed = 0
        for cell in cells:
            self.push(cell)

    def push(self, cell: Cell) -> None:
        heapq.heappush(self._heap, (-cell.max, self._counter, cell))
        self._counter += 1
        self.pushed += 1

    def extend(self, cells: Iterable[Cell]) -> None:
        for cell in cells:
            self.push(cell)

    def pop(self) -> Cell:
        _neg_max, _cnt, cell = heapq.heappop(self._heap)
        return cell

    def peek(self) -> Cell:
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
