"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# [x, y] or [x, y, z, ...]; only x and y are used
Coordinate = list[float]
RingCoords = list[Coordinate]
PolygonCoords = list[RingCoords]


def _check_polygon(polygon: PolygonCoords) -> PolygonCoords:
    if not polygon:
        raise ValueError("polygon needs at least one ring")
    for k, ring in enumerate(polygon):
        if not ring:
            raise ValueError(f"ring {k} is empty")
        for i, point in enumerate(ring):
            if len(point) < 2:
                raise ValueError(f"ring {k} point {i} must have at least [x, y], got {len(point)} values")
    return [[point[:2] for point in ring] for ring in polygon]


class LabelRequest(BaseModel):
    polygon: PolygonCoords = Field(
        ...,
        description="Rings of [x, y] positions; ring 0 is the outer boundary, the rest are holes",
    )
    precision: float | None = Field(
        default=None,
        description="Pruning tolerance in polygon units; omitted or 0 uses the server default",
    )
    debug: bool = Field(default=False, description="Log search progress on the server")

    @field_validator("polygon")
    @classmethod
    def _polygon_shape(cls, v: PolygonCoords) -> PolygonCoords:
        return _check_polygon(v)


class BatchLabelRequest(BaseModel):
    polygons: list[PolygonCoords] = Field(
        ...,
        description="Independent polygons (e.g. the parts of a multipolygon)",
    )
    precision: float | None = Field(default=None)

    @field_validator("polygons")
    @classmethod
    def _polygons_shape(cls, v: list[PolygonCoords]) -> list[PolygonCoords]:
        return [_check_polygon(polygon) for polygon in v]
