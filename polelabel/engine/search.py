"""Best-first search for the pole of inaccessibility.

The bounding box of the outer ring is tiled with square cells. Cells are
popped in order of the best distance they could possibly contain; a cell is
split into quadrants only while it can still beat the best known distance by
more than ``precision``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from polelabel.engine.cell import Cell, make_cell
from polelabel.engine.centroid import centroid_cell
from polelabel.engine.config import DEFAULT_PRECISION, SearchConfig
from polelabel.engine.frontier import CellFrontier
from polelabel.utils.geometry import PolygonLike, Ring, as_rings, bounding_box

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelLocation:
    position: tuple[float, float]
    distance: float
    # Cells evaluated by the frontier (seeds + 4 per split)
    probes: int = 0

    def as_dict(self) -> dict[str, object]:
        return {"position": list(self.position), "distance": self.distance}


@dataclass(frozen=True)
class SearchProgress:
    kind: str  # "best" when the best cell improves, "done" once at the end
    distance: float
    probes: int


ProgressSink = Callable[[SearchProgress], None]


def log_progress(event: SearchProgress) -> None:
    """Default diagnostics sink: write progress through the module logger."""
    if event.kind == "best":
        logger.info("found best %.4f after %d probes", round(1e4 * event.distance) / 1e4, event.probes)
    else:
        logger.info("num probes: %d", event.probes)
        logger.info("best distance: %s", event.distance)


def polylabel(
    polygon: PolygonLike,
    precision: float | None = DEFAULT_PRECISION,
    debug: bool = False,
    *,
    on_progress: ProgressSink | None = None,
    default_precision: float = DEFAULT_PRECISION,
) -> LabelLocation:
    """Find the interior point farthest from the polygon outline.

    Args:
        polygon: rings of [x, y] pairs; ring 0 is the outer boundary, the rest are holes.
        precision: pruning tolerance. Falsy or NaN values fall back to ``default_precision``.
        debug: report progress to ``on_progress`` (or the module logger when no sink is given).
        on_progress: diagnostics sink; never affects the result.

    Returns:
        The best position found and its signed distance to the outline.
    """
    config = SearchConfig(precision=precision, debug=debug, default_precision=default_precision)
    tolerance = config.resolve_precision()
    sink = (on_progress or log_progress) if config.debug else None

    rings = as_rings(polygon)
    min_x, min_y, max_x, max_y = bounding_box(rings[0])
    width = max_x - min_x
    height = max_y - min_y
    cell_size = min(width, height)

    if cell_size == 0:
        logger.debug("Degenerate bounding box (%.6g x %.6g); skipping search", width, height)
        return LabelLocation(position=(min_x, min_y), distance=0.0)

    h = cell_size / 2
    frontier = CellFrontier()

    # cover the bounding box with initial cells
    x = min_x
    while x < max_x:
        y = min_y
        while y < max_y:
            frontier.push(make_cell(x + h, y + h, h, rings))
            y += cell_size
        x += cell_size

    logger.debug("Seeded %d cells of size %.6g", len(frontier), cell_size)

    best = centroid_cell(rings)
    bbox_cell = make_cell(min_x + width / 2, min_y + height / 2, 0, rings)
    if bbox_cell.d > best.d:
        best = bbox_cell

    best = _drain(frontier, best, tolerance, rings, sink)

    if sink is not None:
        sink(SearchProgress(kind="done", distance=best.d, probes=frontier.pushed))

    return LabelLocation(position=(best.x, best.y), distance=best.d, probes=frontier.pushed)


def _drain(
    frontier: CellFrontier,
    best: Cell,
    precision: float,
    rings: Sequence[Ring],
    sink: ProgressSink | None,
) -> Cell:
    """Expand cells until none can improve on ``best`` by more than ``precision``."""
    while frontier:
        cell = frontier.pop()

        if cell.d > best.d:
            best = cell
            if sink is not None:
                sink(SearchProgress(kind="best", distance=cell.d, probes=frontier.pushed))

        # no chance of a better solution inside this cell
        if cell.max - best.d <= precision:
            continue

        frontier.extend(cell.children(rings))

    return best
