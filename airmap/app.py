"""
Airport Map Session
Ties loaded data, markers, the controller and rendering together.

An AirportMap plays the role of the interactive window: the host (a GUI
loop, a script, a test) feeds it pointer events and asks it to render.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .config import Config
from .data.loader import load_dataset
from .data.models import Airport, AirportId, Route
from .exceptions import UnknownAirportError
from .interaction.controller import InteractionController, SelectionState
from .interaction.index import build_map_layers
from .interaction.markers import AirportMarker, RouteMarker
from .interaction.viewport import Viewport
from .visualization.map_generator import MapGenerator

logger = logging.getLogger(__name__)


class AirportMap:
    """
    Interactive airport and route map.

    Example:
        >>> app = AirportMap.from_config(Config('config.yaml'))
        >>> app.click_airport('SFO')
        >>> app.render('sfo.html')
    """

    def __init__(
        self,
        airports: Iterable[Airport],
        routes: Iterable[Route],
        viewport: Optional[Viewport] = None,
        airport_radius: Optional[float] = None,
        route_tolerance: Optional[float] = None,
        style: Optional[str] = None,
    ):
        """
        Build markers and the visibility index.

        Args:
            airports: Airports with codes
            routes: Routes between airport ids
            viewport: Projection for pointer events (default: Viewport())
            airport_radius: Airport marker radius in pixels
            route_tolerance: Route hit tolerance in pixels
            style: Folium tile style used by render()
        """
        self.viewport = viewport or Viewport()
        self.style = style

        options = {}
        if airport_radius is not None:
            options["airport_radius"] = airport_radius
        if route_tolerance is not None:
            options["route_tolerance"] = route_tolerance

        self.layers = build_map_layers(airports, routes, **options)
        self.controller = InteractionController(
            self.layers.airports, self.layers.routes, self.layers.index, self.viewport
        )
        self.state = SelectionState()
        self._by_code: Dict[str, AirportMarker] = {
            m.airport.code.upper(): m for m in self.layers.airports
        }
        self._by_id: Dict[AirportId, AirportMarker] = {
            m.airport_id: m for m in self.layers.airports
        }

        logger.info(
            "Map ready: %d airports, %d routes, %d source airports",
            len(self.layers.airports),
            len(self.layers.routes),
            len(self.layers.index),
        )

    @classmethod
    def from_config(cls, config: Config) -> "AirportMap":
        """
        Load data files and viewport settings from a configuration.

        Args:
            config: AIRMAP configuration object

        Returns:
            New AirportMap
        """
        airports, routes = load_dataset(config.airports_path, config.routes_path)
        return cls(
            airports,
            routes,
            viewport=Viewport(**config.viewport_settings()),
            airport_radius=config.airport_radius,
            route_tolerance=config.route_tolerance,
            style=config.map_style,
        )

    # --- Events ---

    def mouse_moved(self, x: float, y: float) -> SelectionState:
        """Handle a pointer move at window pixel (x, y)."""
        self.state = self.controller.pointer_moved(self.state, x, y)
        return self.state

    def mouse_clicked(self, x: float, y: float) -> SelectionState:
        """Handle a click at window pixel (x, y)."""
        self.state = self.controller.clicked(self.state, x, y)
        return self.state

    def hover_airport(self, code: str) -> SelectionState:
        """
        Hover an airport by IATA code.

        The airport is resolved by id, not by pixel, so a marker drawn on
        top of it cannot take the hover.

        Raises:
            UnknownAirportError: If no loaded airport has the code
        """
        marker = self.airport_by_code(code)
        self.state = self.controller.hover_airport(self.state, marker.airport_id)
        return self.state

    def click_airport(self, code: str) -> SelectionState:
        """
        Click an airport by IATA code, with the same toggle rules as a
        pointer click.

        Raises:
            UnknownAirportError: If no loaded airport has the code
        """
        marker = self.airport_by_code(code)
        self.state = self.controller.select_airport(self.state, marker.airport_id)
        return self.state

    # --- Lookups ---

    def airport_by_code(self, code: str) -> AirportMarker:
        """
        Find an airport marker by IATA code (case-insensitive).

        Raises:
            UnknownAirportError: If no loaded airport has the code
        """
        try:
            return self._by_code[code.upper()]
        except KeyError:
            raise UnknownAirportError(code)

    def screen_position(self, airport_id: AirportId) -> Tuple[float, float]:
        """
        Get the window pixel an airport is drawn at.

        Raises:
            UnknownAirportError: If the id is not loaded
        """
        try:
            marker = self._by_id[airport_id]
        except KeyError:
            raise UnknownAirportError(airport_id)
        return self.viewport.to_screen(marker.location)

    def visible_airports(self) -> List[AirportMarker]:
        return [m for m in self.layers.airports if m.is_visible()]

    def visible_routes(self) -> List[RouteMarker]:
        return [m for m in self.layers.routes if m.is_visible()]

    # --- Rendering ---

    def render(self, output_file: str, zoom: Optional[int] = None) -> MapGenerator:
        """
        Render visible markers to an HTML map.

        The map centers on the focused airport when there is one.

        Args:
            output_file: Output HTML filename
            zoom: Initial zoom level (default: 4 when focused, else 2)

        Returns:
            The MapGenerator used, for inspection
        """
        focus = self.controller.focused_marker(self.state)
        options = {}
        if self.style:
            options["style"] = self.style

        if focus is not None:
            center = focus.location
            options["zoom"] = zoom if zoom is not None else 4
            destinations = set(self.layers.index.destinations_of(focus.airport_id))
        else:
            center = self.viewport.center
            if zoom is not None:
                options["zoom"] = zoom
            destinations = set()

        map_gen = MapGenerator(center.latitude, center.longitude, **options)
        map_gen.add_layers(
            self.layers.airports,
            self.layers.routes,
            focused=focus.airport_id if focus is not None else None,
            destinations=destinations,
        )
        map_gen.save(output_file)
        return map_gen
