"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Ring = NDArray[np.float64]
PolygonLike = Sequence[Sequence[Sequence[float]]]


def as_rings(polygon: PolygonLike | Sequence[Ring]) -> list[Ring]:
    """Convert nested ring sequences into Nx2 float64 arrays.

    Only x and y are kept; extra values per position (e.g. altitude) are
    dropped. Rings are taken as-is: no closure, orientation or
    self-intersection checks.
    """
    return [_ring_xy(ring) for ring in polygon]


def _ring_xy(ring: Sequence[Sequence[float]] | Ring) -> Ring:
    points = np.asarray(ring, dtype=np.float64)
    if points.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if points.ndim != 2 or points.shape[1] < 2:
        raise ValueError(f"ring positions must have at least [x, y], got shape {points.shape}")
    return points[:, :2]


def segment_distance_sq(point: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    """Squared distance from point to the closest point on segment a-b."""
    px, py = float(point[0]), float(point[1])
    x, y = float(a[0]), float(a[1])
    dx = float(b[0]) - x
    dy = float(b[1]) - y

    if dx != 0 or dy != 0:
        t = ((px - x) * dx + (py - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = float(b[0]), float(b[1])
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = px - x
    dy = py - y
    return dx * dx + dy * dy


def _ring_distance_sq(px: float, py: float, a: Ring, b: Ring) -> float:
    """Vectorized segment_distance_sq over every edge a[i]-b[i]; returns the minimum."""
    dx = b[:, 0] - a[:, 0]
    dy = b[:, 1] - a[:, 1]
    length_sq = dx * dx + dy * dy

    # Zero-length edges keep t = 0 so they collapse to the vertex itself
    t = np.zeros_like(length_sq)
    nonzero = length_sq != 0
    t[nonzero] = ((px - a[nonzero, 0]) * dx[nonzero] + (py - a[nonzero, 1]) * dy[nonzero]) / length_sq[nonzero]

    cx = np.where(t > 1, b[:, 0], np.where(t > 0, a[:, 0] + dx * t, a[:, 0]))
    cy = np.where(t > 1, b[:, 1], np.where(t > 0, a[:, 1] + dy * t, a[:, 1]))

    ex = px - cx
    ey = py - cy
    return float(np.min(ex * ex + ey * ey))


def _ring_crossings(px: float, py: float, a: Ring, b: Ring) -> int:
    """Count edges a[i]-b[i] crossed by the horizontal ray from (px, py) toward +x."""
    straddles = (a[:, 1] > py) != (b[:, 1] > py)
    if not straddles.any():
        return 0
    sa = a[straddles]
    sb = b[straddles]
    x_at_y = (sb[:, 0] - sa[:, 0]) * (py - sa[:, 1]) / (sb[:, 1] - sa[:, 1]) + sa[:, 0]
    return int(np.count_nonzero(px < x_at_y))


def point_to_polygon_distance(point: Sequence[float], polygon: Sequence[Ring]) -> float:
    """Signed distance from point to the polygon outline.

    Positive inside, negative outside, exactly 0.0 on any edge. Every ring
    (outer and holes) flips the same parity flag, so holes need no special case.
    """
    px, py = float(point[0]), float(point[1])
    inside = False
    min_dist_sq = math.inf

    for ring in polygon:
        if len(ring) == 0:
            continue
        # Edge i runs from vertex i to vertex i-1, closing the ring implicitly
        a = ring
        b = np.roll(ring, 1, axis=0)
        if _ring_crossings(px, py, a, b) % 2:
            inside = not inside
        min_dist_sq = min(min_dist_sq, _ring_distance_sq(px, py, a, b))

    if min_dist_sq == 0:
        return 0.0
    return (1.0 if inside else -1.0) * math.sqrt(min_dist_sq)


def bounding_box(ring: Ring) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) of a single ring."""
    if len(ring) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(ring[:, 0])),
        float(np.min(ring[:, 1])),
        float(np.max(ring[:, 0])),
        float(np.max(ring[:, 1])),
    )
