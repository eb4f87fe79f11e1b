"""
AIRMAP Interaction Component

Markers, the visibility index and the hover/click controller.

Main Classes:
    - Viewport: Web Mercator projection used for hit tests
    - AirportMarker, RouteMarker: Hit-testable markers with visibility state
    - VisibilityIndex: Source airport id -> departing RouteEdges
    - InteractionController: Pointer-move and click handling
    - SelectionState: Hovered and focused airport ids

Example:
    >>> from airmap.interaction import build_map_layers, InteractionController
    >>> from airmap.interaction import SelectionState, Viewport
    >>> layers = build_map_layers(airports, routes)
    >>> controller = InteractionController(
    ...     layers.airports, layers.routes, layers.index, Viewport()
    ... )
    >>> state = controller.clicked(SelectionState(), 412, 230)
"""

from .viewport import Viewport
from .markers import Marker, AirportMarker, RouteMarker
from .index import RouteEdge, VisibilityIndex, MapLayers, build_map_layers
from .controller import SelectionState, InteractionController

__all__ = [
    "Viewport",
    "Marker",
    "AirportMarker",
    "RouteMarker",
    "RouteEdge",
    "VisibilityIndex",
    "MapLayers",
    "build_map_layers",
    "SelectionState",
    "InteractionController",
]
