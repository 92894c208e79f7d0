"""Map models derived from employee coordinates."""

from __future__ import annotations

from pydantic import BaseModel


class MapPoint(BaseModel):
    id: str | None = None
    position: tuple[float, float]
    label: str | None = None


class MapBounds(BaseModel):
    south_west: tuple[float, float]
    north_east: tuple[float, float]


class MapMarker(BaseModel):
    id: str | None = None
    position: tuple[float, float]
    title: str = "Employee"
    label: str | None = None


class MapView(BaseModel):
    """Everything a tile-based map widget needs to draw the employee markers."""

    center: tuple[float, float]
    zoom: int
    tile_url: str
    attribution: str
    markers: list[MapMarker]
    bounds: MapBounds | None = None
