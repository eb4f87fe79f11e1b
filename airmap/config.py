"""
AIRMAP Configuration Management

This module provides configuration management for the airport route explorer.
It includes physical constants, marker and map settings, color schemes, and
runtime configuration loaded from YAML files.
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# =============================================================================
# Physical Constants
# =============================================================================


class Constants:
    """Physical and projection constants."""

    EARTH_RADIUS_KM: float = 6371.0  # Earth's radius for distance calculations
    TILE_SIZE_PX: int = 256  # Web Mercator tile edge at zoom 0
    MAX_MERCATOR_LAT: float = 85.05112878  # Web Mercator latitude clamp


# =============================================================================
# Map & Marker Settings
# =============================================================================


class Settings:
    """Configurable settings for markers, viewport and rendering."""

    # --- Viewport (screen box the map is drawn into) ---
    VIEWPORT_X: int = 50  # Left edge of the map in window pixels
    VIEWPORT_Y: int = 50  # Top edge of the map in window pixels
    VIEWPORT_WIDTH: int = 750  # Map width in pixels
    VIEWPORT_HEIGHT: int = 550  # Map height in pixels
    VIEWPORT_ZOOM: float = 1.5  # Fits the whole world into the box
    CENTER_LAT: float = 20.0
    CENTER_LON: float = 0.0

    # --- Markers ---
    AIRPORT_RADIUS_PX: float = 5.0  # Hit radius and drawn radius of airports
    ROUTE_TOLERANCE_PX: float = 3.0  # Max pixel distance for a route hit

    # --- Rendering ---
    DEFAULT_MAP_STYLE: str = "CartoDB.DarkMatter"  # Base map tile style
    DEFAULT_ZOOM: int = 2  # Initial folium zoom level
    ROUTE_WEIGHT: int = 1  # Route line thickness
    ROUTE_OPACITY: float = 0.6  # Route line transparency (0-1)
    MARKER_OPACITY: float = 0.8  # Marker border transparency (0-1)
    MARKER_FILL_OPACITY: float = 0.6  # Marker fill transparency (0-1)


# =============================================================================
# Color Schemes
# =============================================================================


class Colors:
    """Color definitions for visualizations."""

    AIRPORT_COLOR: str = "#00b4ff"  # Default airport marker (blue)
    FOCUS_COLOR: str = "#ff3b3b"  # Clicked airport (red)
    HIGHLIGHT_COLOR: str = "#fff200"  # Hovered airport (yellow)
    DESTINATION_COLOR: str = "#00e5a8"  # Airports reachable from focus (green)
    ROUTE_COLOR: str = "#ff9f1c"  # Route lines (orange)


# =============================================================================
# Runtime Configuration
# =============================================================================


class Config:
    """
    Runtime configuration manager for AIRMAP.

    Loads settings from YAML files or uses sensible defaults.
    Provides property-based access to common settings.

    Example:
        >>> config = Config('config.yaml')
        >>> print(config.airports_path, config.routes_path)
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. If None or missing,
                        uses default configuration.
        """
        self.config_path = config_path
        self._config: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file or return defaults.

        Returns:
            Configuration dictionary
        """
        if self.config_path is None or not os.path.exists(self.config_path):
            return self._get_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                if self._validate_config(config):
                    return self._merge_defaults(config)
                else:
                    logger.warning("Invalid config structure, using defaults")
                    return self._get_default_config()
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not load config file: %s", e)
            return self._get_default_config()

    def _validate_config(self, config: Dict[str, Any]) -> bool:
        """
        Validate configuration structure and required fields.

        Args:
            config: Configuration dictionary to validate

        Returns:
            True if valid, False otherwise
        """
        try:
            # Required: data section
            assert "data" in config
            assert isinstance(config["data"]["airports_path"], str)
            assert isinstance(config["data"]["routes_path"], str)

            # Optional: map section
            view = config.get("map", {})
            for key in ("width", "height"):
                if key in view:
                    assert isinstance(view[key], (int, float))
                    assert view[key] > 0
            if "center_latitude" in view:
                assert -90 <= view["center_latitude"] <= 90
            if "center_longitude" in view:
                assert -180 <= view["center_longitude"] <= 180

            # Optional: markers section
            markers = config.get("markers", {})
            for key in ("airport_radius_px", "route_tolerance_px"):
                if key in markers:
                    assert isinstance(markers[key], (int, float))
                    assert markers[key] >= 0

            return True
        except (AssertionError, KeyError, TypeError, AttributeError):
            return False

    def _merge_defaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Fill sections missing from a user config with default values."""
        merged = self._get_default_config()
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration.

        Returns:
            Default configuration dictionary
        """
        return {
            "data": {
                "airports_path": "data/airports.dat",
                "routes_path": "data/routes.dat",
                "download_timeout_seconds": 30,
            },
            "map": {
                "x": Settings.VIEWPORT_X,
                "y": Settings.VIEWPORT_Y,
                "width": Settings.VIEWPORT_WIDTH,
                "height": Settings.VIEWPORT_HEIGHT,
                "zoom": Settings.VIEWPORT_ZOOM,
                "center_latitude": Settings.CENTER_LAT,
                "center_longitude": Settings.CENTER_LON,
                "style": Settings.DEFAULT_MAP_STYLE,
            },
            "markers": {
                "airport_radius_px": Settings.AIRPORT_RADIUS_PX,
                "route_tolerance_px": Settings.ROUTE_TOLERANCE_PX,
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        }

    def save_config(self) -> None:
        """
        Save current configuration to YAML file.

        Raises:
            ConfigError: If config_path is not set
        """
        if self.config_path is None:
            raise ConfigError("Cannot save config: no config_path specified")

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(self._config, f, default_flow_style=False)

    # --- Property Accessors ---

    @property
    def airports_path(self) -> str:
        """Get path of the OpenFlights airports file."""
        return self._config["data"]["airports_path"]

    @property
    def routes_path(self) -> str:
        """Get path of the OpenFlights routes file."""
        return self._config["data"]["routes_path"]

    @property
    def download_timeout(self) -> int:
        """Get dataset download timeout in seconds."""
        return int(self._config["data"].get("download_timeout_seconds", 30))

    @property
    def map_style(self) -> str:
        """Get base map tile style."""
        return self._config["map"].get("style", Settings.DEFAULT_MAP_STYLE)

    @property
    def airport_radius(self) -> float:
        """Get airport marker radius in pixels."""
        return float(self._config["markers"]["airport_radius_px"])

    @property
    def route_tolerance(self) -> float:
        """Get route hit tolerance in pixels."""
        return float(self._config["markers"]["route_tolerance_px"])

    @property
    def log_level(self) -> str:
        return str(self._config["logging"].get("level", "INFO")).upper()

    @property
    def log_format(self) -> str:
        return self._config["logging"].get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    def viewport_settings(self) -> Dict[str, float]:
        """
        Get keyword arguments for building a Viewport.

        Returns:
            Dictionary with x, y, width, height, zoom, center_lat, center_lon
        """
        view = self._config["map"]
        return {
            "x": float(view["x"]),
            "y": float(view["y"]),
            "width": float(view["width"]),
            "height": float(view["height"]),
            "zoom": float(view["zoom"]),
            "center_lat": float(view["center_latitude"]),
            "center_lon": float(view["center_longitude"]),
        }

    # --- Generic Accessors ---

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'map.zoom')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get('markers.airport_radius_px', 5)
            5.0
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'map.zoom')
            value: Value to set

        Raises:
            ConfigError: If an intermediate key holds a non-section value

        Example:
            >>> config.set('map.zoom', 3)
        """
        keys = key.split(".")
        config = self._config

        # Navigate to parent of target key
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
            if not isinstance(config, dict):
                raise ConfigError(f"Cannot set '{key}': '{k}' is not a section")

        # Set final value
        config[keys[-1]] = value
