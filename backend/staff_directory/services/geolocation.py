from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from staff_directory.models.employee import EmployeeRecord
from staff_directory.models.map import MapPoint

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def parse_coordinate(value: Any, bounds: tuple[float, float]) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    low, high = bounds
    if number < low or number > high:
        return None
    return number


def to_map_point(record: EmployeeRecord) -> MapPoint | None:
    lat = parse_coordinate(record.latitude, LATITUDE_RANGE)
    lon = parse_coordinate(record.longitude, LONGITUDE_RANGE)
    if lat is None or lon is None:
        return None
    return MapPoint(id=record.id, position=(lat, lon), label=record.city)


def filter_locations(records: Iterable[EmployeeRecord]) -> list[MapPoint]:
    """Map points for every record with a plottable position, in input order."""
    points: list[MapPoint] = []
    for record in records:
        point = to_map_point(record)
        if point is not None:
            points.append(point)
    return points
