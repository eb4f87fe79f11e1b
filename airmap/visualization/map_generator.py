"""
Map Generator
Renders the current marker state as an interactive Folium map.

Only visible markers are drawn, so the output reflects whatever hover and
focus the interaction controller has applied.
"""

from html import escape

import folium
from typing import Collection, Iterable, Optional

from airmap.config import Settings, Colors
from airmap.data.models import AirportId
from airmap.interaction.markers import AirportMarker, RouteMarker
from airmap.utils import haversine_distance, format_distance

MAP_TILE_URLS = {
    "CartoDB.DarkMatter": "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
    "CartoDB.Positron": "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
    "OpenStreetMap": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
}


class MapGenerator:
    """
    Generates interactive airport and route maps using Folium.

    Supports visualization of:
    - Airports (circle markers, tooltip with code and name)
    - Routes (polylines between airports)
    - Hover highlight and focus coloring
    """

    def __init__(
        self,
        center_lat: float,
        center_lon: float,
        zoom: int = Settings.DEFAULT_ZOOM,
        style: str = Settings.DEFAULT_MAP_STYLE,
    ):
        """
        Initialize map generator.

        Args:
            center_lat: Center latitude
            center_lon: Center longitude
            zoom: Initial zoom level (default: 2)
            style: Map style/theme (default: CartoDB.DarkMatter)
        """
        self.center_lat = center_lat
        self.center_lon = center_lon
        self.zoom = zoom
        self.style = style
        self.airport_count = 0
        self.route_count = 0

        # Create base map
        self.map = self._create_base_map()

    def _create_base_map(self) -> folium.Map:
        """Create base Folium map."""

        if self.style in MAP_TILE_URLS:
            tiles = MAP_TILE_URLS[self.style]
        else:
            tiles = self.style

        return folium.Map(
            location=[self.center_lat, self.center_lon],
            zoom_start=self.zoom,
            tiles=tiles,
            attr="AIRMAP Airport Routes",
            world_copy_jump=True,
        )

    def add_airport(self, marker: AirportMarker, color: str = Colors.AIRPORT_COLOR):
        """
        Add an airport marker to the map.

        Hidden markers are skipped. A hovered (selected) marker is drawn in
        the highlight color at double size.

        Args:
            marker: Airport marker
            color: Fill color for the marker
        """
        if not marker.is_visible():
            return

        radius = marker.radius
        if marker.selected:
            color = Colors.HIGHLIGHT_COLOR
            radius *= 2

        folium.CircleMarker(
            location=[marker.location.latitude, marker.location.longitude],
            radius=radius,
            color=color,
            weight=1,
            opacity=Settings.MARKER_OPACITY,
            fill=True,
            fill_color=color,
            fill_opacity=Settings.MARKER_FILL_OPACITY,
            popup=self._create_airport_popup(marker),
            tooltip=escape(marker.title),
        ).add_to(self.map)
        self.airport_count += 1

    def add_route(self, marker: RouteMarker):
        """
        Add a route line to the map. Hidden routes are skipped.

        Args:
            marker: Route marker
        """
        if not marker.is_visible():
            return

        start, end = marker.locations
        route = marker.route
        label = f"{route.source_code or route.source_id} → {route.destination_code or route.destination_id}"

        folium.PolyLine(
            locations=[[start.latitude, start.longitude], [end.latitude, end.longitude]],
            color=Colors.ROUTE_COLOR,
            weight=Settings.ROUTE_WEIGHT,
            opacity=Settings.ROUTE_OPACITY,
            popup=self._create_route_popup(marker),
            tooltip=escape(f"{route.airline} {label}".strip()),
        ).add_to(self.map)
        self.route_count += 1

    def add_layers(
        self,
        airports: Iterable[AirportMarker],
        routes: Iterable[RouteMarker],
        focused: Optional[AirportId] = None,
        destinations: Collection[AirportId] = (),
    ):
        """
        Add all visible routes and airports.

        Routes are drawn first so airport markers stay on top.

        Args:
            airports: Airport markers
            routes: Route markers
            focused: Id of the focused airport, drawn in the focus color
            destinations: Airport ids reachable from the focus
        """
        for route in routes:
            self.add_route(route)

        for airport in airports:
            if airport.airport_id == focused:
                color = Colors.FOCUS_COLOR
            elif airport.airport_id in destinations:
                color = Colors.DESTINATION_COLOR
            else:
                color = Colors.AIRPORT_COLOR
            self.add_airport(airport, color)

    def _create_airport_popup(self, marker: AirportMarker) -> str:
        """
        Create HTML popup for an airport.

        Args:
            marker: Airport marker

        Returns:
            HTML string for popup
        """
        airport = marker.airport
        altitude = f"{airport.altitude_ft:.0f} ft" if airport.altitude_ft is not None else "N/A"

        html = f"""
        <div style='font-family: Arial; min-width: 200px;'>
            <h4 style='margin: 0 0 10px 0; color: #667eea;'>
                ✈️ {escape(airport.code)}
            </h4>
            <table style='width: 100%; border-collapse: collapse;'>
                <tr><td><b>Name:</b></td><td>{escape(airport.name)}</td></tr>
                <tr><td><b>City:</b></td><td>{escape(airport.city)}</td></tr>
                <tr><td><b>Country:</b></td><td>{escape(airport.country)}</td></tr>
                <tr><td><b>ICAO:</b></td><td>{escape(airport.icao or 'N/A')}</td></tr>
                <tr><td><b>Altitude:</b></td><td>{altitude}</td></tr>
            </table>
        </div>
        """
        return html

    def _create_route_popup(self, marker: RouteMarker) -> str:
        """
        Create HTML popup for a route.

        Args:
            marker: Route marker

        Returns:
            HTML string for popup
        """
        route = marker.route
        start, end = marker.locations
        distance = haversine_distance(start.latitude, start.longitude, end.latitude, end.longitude)

        html = f"""
        <div style='font-family: Arial; min-width: 180px;'>
            <table style='width: 100%; border-collapse: collapse;'>
                <tr><td><b>Airline:</b></td><td>{escape(route.airline or 'N/A')}</td></tr>
                <tr><td><b>From:</b></td><td>{escape(route.source_code or str(route.source_id))}</td></tr>
                <tr><td><b>To:</b></td><td>{escape(route.destination_code or str(route.destination_id))}</td></tr>
                <tr><td><b>Distance:</b></td><td>{format_distance(distance)}</td></tr>
                <tr><td><b>Stops:</b></td><td>{route.stops}</td></tr>
                <tr><td><b>Equipment:</b></td><td>{escape(route.equipment or 'N/A')}</td></tr>
            </table>
        </div>
        """
        return html

    def save(self, filename: str):
        """
        Save map to HTML file.

        Args:
            filename: Output filename (should end in .html)
        """
        self.map.save(filename)

        # Modify HTML file to include title
        with open(filename, "r", encoding="utf-8") as f:
            html_content = f.read()
        insert = "<head>\n    <title>AIRMAP Airport Routes</title>"
        html_content = html_content.replace("<head>", insert, 1)
        with open(filename, "w", encoding="utf-8") as f:
            f.write(html_content)

        print(f"✅ Map saved to: {filename}")
