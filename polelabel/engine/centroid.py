"""Centroid estimator — the first best guess for the search."""

from __future__ import annotations

from collections.abc import Sequence

from polelabel.engine.cell import Cell, make_cell
from polelabel.utils.geometry import Ring


def centroid_cell(polygon: Sequence[Ring]) -> Cell:
    """Zero-size cell at the area-weighted centroid of the outer ring.

    Shoelace accumulation over (vertex, previous vertex) pairs. A ring with
    zero signed area falls back to its first vertex.
    """
    points = polygon[0]
    area = 0.0
    x = 0.0
    y = 0.0

    n = len(points)
    j = n - 1
    for i in range(n):
        ax, ay = float(points[i][0]), float(points[i][1])
        bx, by = float(points[j][0]), float(points[j][1])
        f = ax * by - bx * ay
        x += (ax + bx) * f
        y += (ay + by) * f
        area += f * 3
        j = i

    if area == 0:
        return make_cell(float(points[0][0]), float(points[0][1]), 0, polygon)
    return make_cell(x / area, y / area, 0, polygon)
