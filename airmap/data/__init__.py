"""
AIRMAP Data Component

Airport and route records and the OpenFlights loader.

Main Classes:
    - Airport: Airport record with IATA code and location
    - Route: Direct route between two airport ids
    - Location: Latitude/longitude pair

Example:
    >>> from airmap.data import load_dataset
    >>> airports, routes = load_dataset('data/airports.dat', 'data/routes.dat')
"""

from .models import Airport, AirportId, Location, Route, RouteId
from .loader import parse_airports, parse_routes, load_dataset, download_dataset

# Utilities
from . import constants

__all__ = [
    # Records
    "Airport",
    "AirportId",
    "Location",
    "Route",
    "RouteId",
    # Loading
    "parse_airports",
    "parse_routes",
    "load_dataset",
    "download_dataset",
    # Modules
    "constants",
]
