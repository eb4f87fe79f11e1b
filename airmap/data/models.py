"""
Airport and Route Records
Immutable records produced by the loader and consumed by the map layers.
"""

from dataclasses import dataclass
from typing import Optional

# Airport identifiers are the OpenFlights integer ids
AirportId = int
RouteId = int


@dataclass(frozen=True)
class Location:
    """A geographic position in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Airport:
    """An airport with an IATA code."""

    id: AirportId
    location: Location
    code: str
    name: str = ""
    city: str = ""
    country: str = ""
    icao: Optional[str] = None
    altitude_ft: Optional[float] = None

    @property
    def title(self) -> str:
        """Hover label, e.g. 'SFO: San Francisco International Airport, San Francisco, United States'."""
        place = ", ".join(part for part in (self.name, self.city, self.country) if part)
        return f"{self.code}: {place}" if place else self.code


@dataclass(frozen=True)
class Route:
    """A direct route between two airports, as listed by one airline."""

    id: RouteId
    source_id: AirportId
    destination_id: AirportId
    airline: str = ""
    airline_id: Optional[int] = None
    source_code: str = ""
    destination_code: str = ""
    codeshare: bool = False
    stops: int = 0
    equipment: str = ""
