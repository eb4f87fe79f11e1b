"""
Viewport
Web Mercator projection between geographic locations and window pixels.
"""

import math
from typing import Tuple

from airmap.config import Constants, Settings
from airmap.data.models import Location


class Viewport:
    """
    Screen box a map is drawn into.

    The map occupies ``width`` x ``height`` pixels with its top-left corner
    at (``x``, ``y``) in window coordinates, centered on
    (``center_lat``, ``center_lon``) at the given zoom level.
    """

    def __init__(
        self,
        x: float = Settings.VIEWPORT_X,
        y: float = Settings.VIEWPORT_Y,
        width: float = Settings.VIEWPORT_WIDTH,
        height: float = Settings.VIEWPORT_HEIGHT,
        zoom: float = Settings.VIEWPORT_ZOOM,
        center_lat: float = Settings.CENTER_LAT,
        center_lon: float = Settings.CENTER_LON,
    ):
        if width <= 0 or height <= 0:
            raise ValueError("Viewport width and height must be positive")

        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.zoom = zoom
        self.center = Location(center_lat, center_lon)

    @property
    def scale(self) -> float:
        """World size in pixels at the current zoom."""
        return Constants.TILE_SIZE_PX * 2 ** self.zoom

    def _world(self, location: Location) -> Tuple[float, float]:
        lat = max(
            -Constants.MAX_MERCATOR_LAT,
            min(Constants.MAX_MERCATOR_LAT, location.latitude),
        )
        phi = math.radians(lat)

        wx = (location.longitude + 180.0) / 360.0 * self.scale
        wy = (1.0 - math.log(math.tan(phi) + 1.0 / math.cos(phi)) / math.pi) / 2.0 * self.scale
        return wx, wy

    def to_screen(self, location: Location) -> Tuple[float, float]:
        """
        Project a location to window pixels.

        Args:
            location: Geographic location

        Returns:
            (x, y) in window coordinates
        """
        wx, wy = self._world(location)
        cx, cy = self._world(self.center)
        return (
            self.x + self.width / 2 + (wx - cx),
            self.y + self.height / 2 + (wy - cy),
        )

    def to_location(self, x: float, y: float) -> Location:
        """
        Inverse of to_screen.

        Args:
            x: Window x coordinate
            y: Window y coordinate

        Returns:
            Location under the pixel
        """
        cx, cy = self._world(self.center)
        wx = x - self.x - self.width / 2 + cx
        wy = y - self.y - self.height / 2 + cy

        lon = wx / self.scale * 360.0 - 180.0
        lat = math.degrees(math.atan(math.sinh(math.pi * (1.0 - 2.0 * wy / self.scale))))
        return Location(lat, lon)

    def contains(self, x: float, y: float) -> bool:
        """Check whether a window pixel lies inside the map box."""
        return (
            self.x <= x <= self.x + self.width
            and self.y <= y <= self.y + self.height
        )

    def __repr__(self) -> str:
        return (
            f"Viewport(x={self.x}, y={self.y}, width={self.width}, "
            f"height={self.height}, zoom={self.zoom}, center={self.center})"
        )
