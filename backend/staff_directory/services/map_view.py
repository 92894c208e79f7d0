from __future__ import annotations

from collections.abc import Sequence

from staff_directory.core.config import Settings
from staff_directory.models.map import MapBounds, MapMarker, MapPoint, MapView

DEFAULT_MARKER_TITLE = "Employee"


def compute_bounds(points: Sequence[MapPoint]) -> MapBounds | None:
    if not points:
        return None
    lats = [p.position[0] for p in points]
    lons = [p.position[1] for p in points]
    return MapBounds(
        south_west=(min(lats), min(lons)),
        north_east=(max(lats), max(lons)),
    )


def build_map_view(points: Sequence[MapPoint], settings: Settings) -> MapView:
    markers = [
        MapMarker(id=p.id, position=p.position, title=DEFAULT_MARKER_TITLE, label=p.label)
        for p in points
    ]
    return MapView(
        center=(settings.MAP_DEFAULT_LATITUDE, settings.MAP_DEFAULT_LONGITUDE),
        zoom=settings.MAP_DEFAULT_ZOOM,
        tile_url=settings.MAP_TILE_URL,
        attribution=settings.MAP_TILE_ATTRIBUTION,
        markers=markers,
        bounds=compute_bounds(points),
    )
