"""
Map Markers
Hit-testable map entities with independent visibility state.

The interaction controller only depends on the Marker protocol; any object
with a hit test, a visibility switch and a ``selected`` flag can take part.
"""

from typing import Protocol, Tuple

from airmap.config import Settings
from airmap.data.models import Airport, AirportId, Location, Route, RouteId
from airmap.utils import pixel_distance, point_segment_distance
from .viewport import Viewport


class Marker(Protocol):
    """Capability interface shared by airport and route markers."""

    selected: bool

    def hit_test(self, viewport: Viewport, x: float, y: float) -> bool:
        ...

    def set_visible(self, visible: bool) -> None:
        ...

    def is_visible(self) -> bool:
        ...


class AirportMarker:
    """Point marker for one airport."""

    def __init__(self, airport: Airport, radius: float = Settings.AIRPORT_RADIUS_PX):
        """
        Initialize airport marker.

        Args:
            airport: Airport record the marker draws
            radius: Marker radius in pixels, also used for hit tests
        """
        self.airport = airport
        self.airport_id: AirportId = airport.id
        self.location: Location = airport.location
        self.radius = radius
        self.selected = False
        self._visible = True

    @property
    def title(self) -> str:
        """Label shown while the marker is hovered."""
        return self.airport.title

    def hit_test(self, viewport: Viewport, x: float, y: float) -> bool:
        """Check whether a window pixel falls within the marker's radius."""
        return pixel_distance(viewport.to_screen(self.location), (x, y)) <= self.radius

    def set_visible(self, visible: bool) -> None:
        self._visible = visible

    def is_visible(self) -> bool:
        return self._visible

    def __repr__(self) -> str:
        state = "visible" if self._visible else "hidden"
        return f"AirportMarker({self.airport.code}, id={self.airport_id}, {state})"


class RouteMarker:
    """Line marker between two airports. Hidden until its source is focused."""

    def __init__(
        self,
        route: Route,
        start: Location,
        end: Location,
        tolerance: float = Settings.ROUTE_TOLERANCE_PX,
    ):
        """
        Initialize route marker.

        Args:
            route: Route record the marker draws
            start: Source airport location
            end: Destination airport location
            tolerance: Max pixel distance from the line that counts as a hit
        """
        self.route = route
        self.route_id: RouteId = route.id
        self.source_id: AirportId = route.source_id
        self.destination_id: AirportId = route.destination_id
        self.locations: Tuple[Location, Location] = (start, end)
        self.tolerance = tolerance
        self.selected = False
        self._visible = False

    def hit_test(self, viewport: Viewport, x: float, y: float) -> bool:
        """Check whether a window pixel lies within tolerance of the line."""
        start = viewport.to_screen(self.locations[0])
        end = viewport.to_screen(self.locations[1])
        return point_segment_distance((x, y), start, end) <= self.tolerance

    def set_visible(self, visible: bool) -> None:
        self._visible = visible

    def is_visible(self) -> bool:
        return self._visible

    def __repr__(self) -> str:
        state = "visible" if self._visible else "hidden"
        return (
            f"RouteMarker(id={self.route_id}, "
            f"{self.source_id}->{self.destination_id}, {state})"
        )
