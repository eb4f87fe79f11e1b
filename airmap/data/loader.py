"""
OpenFlights Data Loader
Parses airports.dat and routes.dat into Airport and Route records.

Both files are headerless CSV with OpenFlights' ``\\N`` marker for missing
values. Airports without an IATA code are dropped, as are routes whose
source or destination airport id is missing.
"""

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import requests

from ..exceptions import DataLoadError
from ..utils import validate_coordinates
from .constants import (
    AIRPORTS_URL,
    ROUTES_URL,
    DEFAULT_DOWNLOAD_TIMEOUT,
    MISSING_VALUE,
    AIRPORT_ID_COL,
    AIRPORT_NAME_COL,
    AIRPORT_CITY_COL,
    AIRPORT_COUNTRY_COL,
    AIRPORT_IATA_COL,
    AIRPORT_ICAO_COL,
    AIRPORT_LAT_COL,
    AIRPORT_LON_COL,
    AIRPORT_ALTITUDE_COL,
    AIRPORT_MIN_COLUMNS,
    ROUTE_AIRLINE_COL,
    ROUTE_AIRLINE_ID_COL,
    ROUTE_SOURCE_CODE_COL,
    ROUTE_SOURCE_ID_COL,
    ROUTE_DEST_CODE_COL,
    ROUTE_DEST_ID_COL,
    ROUTE_CODESHARE_COL,
    ROUTE_STOPS_COL,
    ROUTE_EQUIPMENT_COL,
    ROUTE_MIN_COLUMNS,
)
from .models import Airport, Location, Route

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _clean(value: str) -> Optional[str]:
    """Strip a field and map OpenFlights' missing marker to None."""
    value = value.strip()
    if not value or value == MISSING_VALUE:
        return None
    return value


def _column(row: List[str], index: int) -> Optional[str]:
    return _clean(row[index]) if index < len(row) else None


def _read_rows(path: PathLike) -> Iterator[Tuple[int, List[str]]]:
    """Yield (line number, columns) for every non-blank row of a CSV file."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if row and any(cell.strip() for cell in row):
                    yield line_no, row
    except FileNotFoundError:
        raise DataLoadError(f"Data file not found: {path}")
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DataLoadError(f"Could not read {path}: {e}")


def parse_airports(path: PathLike) -> List[Airport]:
    """
    Parse an OpenFlights airports file.

    Args:
        path: Path to airports.dat

    Returns:
        Airports with an IATA code, in file order

    Raises:
        DataLoadError: If the file is missing or a row is malformed
    """
    airports = []
    without_code = 0

    for line_no, row in _read_rows(path):
        if len(row) < AIRPORT_MIN_COLUMNS:
            raise DataLoadError(
                f"{path}:{line_no}: expected at least {AIRPORT_MIN_COLUMNS} "
                f"columns, got {len(row)}"
            )

        code = _clean(row[AIRPORT_IATA_COL])
        if code is None:
            without_code += 1
            continue

        try:
            airport_id = int(row[AIRPORT_ID_COL])
            location = Location(
                latitude=float(row[AIRPORT_LAT_COL]),
                longitude=float(row[AIRPORT_LON_COL]),
            )
        except ValueError as e:
            raise DataLoadError(f"{path}:{line_no}: {e}")

        if not validate_coordinates(location.latitude, location.longitude):
            raise DataLoadError(
                f"{path}:{line_no}: coordinates out of range "
                f"({location.latitude}, {location.longitude})"
            )

        altitude = _column(row, AIRPORT_ALTITUDE_COL)
        try:
            altitude_ft = float(altitude) if altitude is not None else None
        except ValueError:
            altitude_ft = None

        airports.append(
            Airport(
                id=airport_id,
                location=location,
                code=code,
                name=_column(row, AIRPORT_NAME_COL) or "",
                city=_column(row, AIRPORT_CITY_COL) or "",
                country=_column(row, AIRPORT_COUNTRY_COL) or "",
                icao=_column(row, AIRPORT_ICAO_COL),
                altitude_ft=altitude_ft,
            )
        )

    logger.info(
        "Loaded %d airports from %s (%d without code skipped)",
        len(airports),
        path,
        without_code,
    )
    return airports


def parse_routes(path: PathLike) -> List[Route]:
    """
    Parse an OpenFlights routes file.

    The route id is the 1-based line number in the file.

    Args:
        path: Path to routes.dat

    Returns:
        Routes with both airport ids present, in file order

    Raises:
        DataLoadError: If the file is missing or a row is malformed
    """
    routes = []
    missing_ids = 0

    for line_no, row in _read_rows(path):
        if len(row) < ROUTE_MIN_COLUMNS:
            raise DataLoadError(
                f"{path}:{line_no}: expected at least {ROUTE_MIN_COLUMNS} "
                f"columns, got {len(row)}"
            )

        source = _clean(row[ROUTE_SOURCE_ID_COL])
        destination = _clean(row[ROUTE_DEST_ID_COL])
        if source is None or destination is None:
            missing_ids += 1
            continue

        try:
            source_id = int(source)
            destination_id = int(destination)
        except ValueError as e:
            raise DataLoadError(f"{path}:{line_no}: {e}")

        stops = _column(row, ROUTE_STOPS_COL)
        airline_id = _column(row, ROUTE_AIRLINE_ID_COL)
        routes.append(
            Route(
                id=line_no,
                source_id=source_id,
                destination_id=destination_id,
                airline=_column(row, ROUTE_AIRLINE_COL) or "",
                airline_id=int(airline_id) if airline_id and airline_id.isdigit() else None,
                source_code=_column(row, ROUTE_SOURCE_CODE_COL) or "",
                destination_code=_column(row, ROUTE_DEST_CODE_COL) or "",
                codeshare=_column(row, ROUTE_CODESHARE_COL) == "Y",
                stops=int(stops) if stops and stops.isdigit() else 0,
                equipment=_column(row, ROUTE_EQUIPMENT_COL) or "",
            )
        )

    logger.info(
        "Loaded %d routes from %s (%d without airport ids skipped)",
        len(routes),
        path,
        missing_ids,
    )
    return routes


def load_dataset(
    airports_path: PathLike, routes_path: PathLike
) -> Tuple[List[Airport], List[Route]]:
    """
    Load airports and routes.

    Args:
        airports_path: Path to airports.dat
        routes_path: Path to routes.dat

    Returns:
        Tuple of (airports, routes)
    """
    return parse_airports(airports_path), parse_routes(routes_path)


def download_dataset(
    target_dir: PathLike, timeout: int = DEFAULT_DOWNLOAD_TIMEOUT
) -> Tuple[Path, Path]:
    """
    Download airports.dat and routes.dat from the OpenFlights repository.

    Args:
        target_dir: Directory to write the files into (created if missing)
        timeout: Request timeout in seconds

    Returns:
        Tuple of (airports path, routes path)

    Raises:
        DataLoadError: If a download fails
    """
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)

    paths = []
    for url in (AIRPORTS_URL, ROUTES_URL):
        destination = target / url.rsplit("/", 1)[-1]
        logger.info("Downloading %s", url)

        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DataLoadError(f"Failed to download {url}: {e}")

        destination.write_bytes(response.content)
        logger.info("Saved %d bytes to %s", len(response.content), destination)
        paths.append(destination)

    return paths[0], paths[1]
