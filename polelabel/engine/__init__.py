"""Pole of inaccessibility search engine."""

from polelabel.engine.cell import Cell, make_cell
from polelabel.engine.centroid import centroid_cell
from polelabel.engine.config import DEFAULT_PRECISION, SearchConfig
from polelabel.engine.frontier import CellFrontier
from polelabel.engine.search import LabelLocation, SearchProgress, log_progress, polylabel

__all__ = [
    "Cell",
    "make_cell",
    "centroid_cell",
    "DEFAULT_PRECISION",
    "SearchConfig",
    "CellFrontier",
    "LabelLocation",
    "SearchProgress",
    "log_progress",
    "polylabel",
]
