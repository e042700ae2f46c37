"""Cell — one square candidate region of the search, evaluated once at creation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from polelabel.utils.geometry import Ring, point_to_polygon_distance

SQRT_2 = math.sqrt(2)


@dataclass(frozen=True)
class Cell:
    x: float  # center x
    y: float  # center y
    h: float  # half the side length
    d: float  # signed distance from the center to the polygon outline
    max: float  # upper bound on the distance any point in the cell can reach

    def children(self, polygon: Sequence[Ring]) -> list[Cell]:
        """Split into four quadrant cells of half the size."""
        h = self.h / 2
        return [
            make_cell(self.x - h, self.y - h, h, polygon),
            make_cell(self.x + h, self.y - h, h, polygon),
            make_cell(self.x - h, self.y + h, h, polygon),
            make_cell(self.x + h, self.y + h, h, polygon),
        ]


def make_cell(x: float, y: float, h: float, polygon: Sequence[Ring]) -> Cell:
    d = point_to_polygon_distance((x, y), polygon)
    return Cell(x=x, y=y, h=h, d=d, max=d + h * SQRT_2)
