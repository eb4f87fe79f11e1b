"""
AIRMAP - Airport Route Explorer

Shows airports and flight routes on a map. Hovering highlights an airport;
clicking isolates it together with its direct routes and destinations.

Components:
    - data: OpenFlights airport and route loading
    - interaction: Markers, visibility index and hover/click controller
    - visualization: Interactive Folium map rendering

Example:
    >>> from airmap import AirportMap, Config
    >>> app = AirportMap.from_config(Config('config.yaml'))
    >>> app.click_airport('SFO')
    >>> app.render('sfo.html')
"""

# Component imports for easy access
from . import data
from . import interaction
from . import visualization
from . import utils
from . import config
from .config import Config
from .app import AirportMap
from .exceptions import AirmapError, ConfigError, DataLoadError, UnknownAirportError

AIRMAP_VERSION = "v0.1.0"

__version__ = AIRMAP_VERSION
__author__ = "AIRMAP Project"
__license__ = "MIT"

__all__ = [
    "data",
    "interaction",
    "visualization",
    "utils",
    "config",
    "Config",
    "AirportMap",
    "AirmapError",
    "ConfigError",
    "DataLoadError",
    "UnknownAirportError",
]
