"""
Custom exceptions for AIRMAP.

Interaction itself never fails: clicks and hovers over empty space are
no-ops. These errors cover configuration, data loading and lookups.
"""

from typing import Union


class AirmapError(Exception):
    """Base exception for all AIRMAP errors."""

    pass


class ConfigError(AirmapError):
    """Raised when configuration values cannot be read or written."""

    pass


class DataLoadError(AirmapError):
    """Raised when an airport or route file is missing, unreachable or malformed."""

    pass


class UnknownAirportError(AirmapError, KeyError):
    """Raised when a lookup names an airport that is not in the loaded set."""

    def __init__(self, airport: Union[str, int]) -> None:
        self.airport = airport
        super().__init__(airport)

    def __str__(self) -> str:
        return f"Unknown airport: {self.airport}"
