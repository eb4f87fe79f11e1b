"""
AIRMAP Utility Functions
Common helpers for distance calculations, screen geometry and logging setup.
"""

import logging
from math import radians, sin, cos, sqrt, atan2, hypot
from typing import Optional, Tuple

from .config import Constants, Config

Point = Tuple[float, float]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate great circle distance between two points using Haversine formula.

    Args:
        lat1: Latitude of first point in degrees
        lon1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lon2: Longitude of second point in degrees

    Returns:
        Distance in kilometers

    Example:
        >>> haversine_distance(37.619, -122.375, 40.640, -73.779)  # SFO-JFK
        4152.8...
    """
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return Constants.EARTH_RADIUS_KM * c


def pixel_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two screen points."""
    return hypot(a[0] - b[0], a[1] - b[1])


def point_segment_distance(point: Point, start: Point, end: Point) -> float:
    """
    Calculate distance from a screen point to a line segment.

    The point is projected onto the segment and the projection parameter
    is clamped to [0, 1], so points beyond either end measure to the
    nearest endpoint.

    Args:
        point: Screen point (x, y)
        start: Segment start (x, y)
        end: Segment end (x, y)

    Returns:
        Distance in pixels
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy

    # Degenerate segment
    if length_sq < 1e-12:
        return pixel_distance(point, start)

    t = ((point[0] - start[0]) * dx + (point[1] - start[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    return pixel_distance(point, (start[0] + t * dx, start[1] + t * dy))


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Validate latitude and longitude coordinates.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        True if coordinates are valid

    Example:
        >>> validate_coordinates(49.3508, 8.1364)
        True
        >>> validate_coordinates(100, 200)
        False
    """
    return -90 <= lat <= 90 and -180 <= lon <= 180


def format_distance(distance_km: Optional[float]) -> str:
    """
    Format a great circle distance for popups.

    Example:
        >>> format_distance(4152.8)
        '4153 km'
    """
    if distance_km is None:
        return "N/A"
    return f"{distance_km:.0f} km"


def setup_logging(config: Config) -> None:
    """
    Configure root logging from the ``logging`` section of a Config.

    Args:
        config: AIRMAP configuration object
    """
    level = getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(level=level, format=config.log_format)
