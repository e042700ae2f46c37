"""polelabel — pole of inaccessibility for polygons with holes."""

from polelabel.engine import (
    Cell,
    CellFrontier,
    LabelLocation,
    SearchProgress,
    centroid_cell,
    make_cell,
    polylabel,
)
from polelabel.utils.geometry import (
    as_rings,
    bounding_box,
    point_to_polygon_distance,
    segment_distance_sq,
)

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CellFrontier",
    "LabelLocation",
    "SearchProgress",
    "as_rings",
    "bounding_box",
    "centroid_cell",
    "make_cell",
    "point_to_polygon_distance",
    "polylabel",
    "segment_distance_sq",
]
