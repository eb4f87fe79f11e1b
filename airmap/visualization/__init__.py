"""
AIRMAP Visualization Component

Interactive Folium maps of airports and routes.

Main Classes:
    - MapGenerator: Renders visible airport and route markers

Example:
    >>> from airmap.visualization import MapGenerator
    >>> gen = MapGenerator(20.0, 0.0)
    >>> gen.add_layers(layers.airports, layers.routes)
    >>> gen.save('airports.html')

Map Styles:
    - CartoDB.DarkMatter (default)
    - CartoDB.Positron
    - OpenStreetMap
"""

from .map_generator import MapGenerator, MAP_TILE_URLS

__all__ = [
    "MapGenerator",
    "MAP_TILE_URLS",
]
