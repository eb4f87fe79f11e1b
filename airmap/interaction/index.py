"""
Visibility Index
Maps each airport id to the routes departing it.

Built once after airports and routes are loaded. Focusing an airport then
only needs one dictionary lookup to find which destination airports and
route lines to show.

Construction:
1. Create one AirportMarker per airport, keeping input order
2. For each route, resolve both endpoints by airport id
3. Skip routes with an unknown endpoint (no marker, no edge)
4. Create a hidden RouteMarker and append a RouteEdge under the source id
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

from airmap.config import Settings
from airmap.data.models import Airport, AirportId, Route
from .markers import AirportMarker, RouteMarker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteEdge:
    """Destination airport marker and route marker of one departing route."""

    destination: AirportMarker
    route: RouteMarker


class VisibilityIndex:
    """
    Read-only mapping from source airport id to its departing RouteEdges.

    Edge order is the order routes were first seen during construction.
    """

    def __init__(self, edges: Mapping[AirportId, Sequence[RouteEdge]]):
        self._edges: Dict[AirportId, Tuple[RouteEdge, ...]] = {
            airport_id: tuple(airport_edges) for airport_id, airport_edges in edges.items()
        }

    def edges_from(self, airport_id: AirportId) -> Tuple[RouteEdge, ...]:
        """
        Get the edges departing an airport.

        Args:
            airport_id: Source airport id

        Returns:
            Edges in first-seen order, empty if the airport has no routes
        """
        return self._edges.get(airport_id, ())

    def destinations_of(self, airport_id: AirportId) -> List[AirportId]:
        """Get distinct destination airport ids of an airport, in edge order."""
        seen: Dict[AirportId, None] = {}
        for edge in self.edges_from(airport_id):
            seen.setdefault(edge.destination.airport_id, None)
        return list(seen)

    def __contains__(self, airport_id: object) -> bool:
        return airport_id in self._edges

    def __iter__(self) -> Iterator[AirportId]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        total = sum(len(edges) for edges in self._edges.values())
        return f"VisibilityIndex(sources={len(self._edges)}, edges={total})"


@dataclass
class MapLayers:
    """Marker layers and the index built over them."""

    airports: List[AirportMarker]
    routes: List[RouteMarker]
    index: VisibilityIndex
    skipped_routes: int = 0


def build_map_layers(
    airports: Iterable[Airport],
    routes: Iterable[Route],
    airport_radius: float = Settings.AIRPORT_RADIUS_PX,
    route_tolerance: float = Settings.ROUTE_TOLERANCE_PX,
) -> MapLayers:
    """
    Build airport and route markers and the visibility index.

    Args:
        airports: Loaded airports (already filtered to those with a code)
        routes: Loaded routes
        airport_radius: Airport marker radius in pixels
        route_tolerance: Route hit tolerance in pixels

    Returns:
        MapLayers with markers in input order
    """
    airport_markers: List[AirportMarker] = []
    markers_by_id: Dict[AirportId, AirportMarker] = {}

    for airport in airports:
        marker = AirportMarker(airport, radius=airport_radius)
        airport_markers.append(marker)
        markers_by_id[airport.id] = marker

    route_markers: List[RouteMarker] = []
    edges: Dict[AirportId, List[RouteEdge]] = {}
    skipped = 0

    for route in routes:
        source = markers_by_id.get(route.source_id)
        destination = markers_by_id.get(route.destination_id)
        if source is None or destination is None:
            logger.debug(
                "Skipping route %d: unknown airport (%d -> %d)",
                route.id,
                route.source_id,
                route.destination_id,
            )
            skipped += 1
            continue

        route_marker = RouteMarker(
            route, source.location, destination.location, tolerance=route_tolerance
        )
        route_markers.append(route_marker)

        if route.source_id not in edges:
            edges[route.source_id] = []
        edges[route.source_id].append(RouteEdge(destination, route_marker))

    if skipped:
        logger.info("Skipped %d routes referencing unknown airports", skipped)

    index = VisibilityIndex(edges)
    logger.debug("Built %r", index)

    return MapLayers(
        airports=airport_markers,
        routes=route_markers,
        index=index,
        skipped_routes=skipped,
    )
