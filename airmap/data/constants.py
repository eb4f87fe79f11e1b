"""
Data Loading Constants
"""

# OpenFlights dataset sources
OPENFLIGHTS_BASE_URL = "https://raw.githubusercontent.com/jpatokal/openflights/master/data"
AIRPORTS_URL = f"{OPENFLIGHTS_BASE_URL}/airports.dat"
ROUTES_URL = f"{OPENFLIGHTS_BASE_URL}/routes.dat"
DEFAULT_DOWNLOAD_TIMEOUT = 30  # seconds

# OpenFlights writes \N for missing values
MISSING_VALUE = "\\N"

# airports.dat column layout
AIRPORT_ID_COL = 0
AIRPORT_NAME_COL = 1
AIRPORT_CITY_COL = 2
AIRPORT_COUNTRY_COL = 3
AIRPORT_IATA_COL = 4
AIRPORT_ICAO_COL = 5
AIRPORT_LAT_COL = 6
AIRPORT_LON_COL = 7
AIRPORT_ALTITUDE_COL = 8
AIRPORT_MIN_COLUMNS = 8

# routes.dat column layout
ROUTE_AIRLINE_COL = 0
ROUTE_AIRLINE_ID_COL = 1
ROUTE_SOURCE_CODE_COL = 2
ROUTE_SOURCE_ID_COL = 3
ROUTE_DEST_CODE_COL = 4
ROUTE_DEST_ID_COL = 5
ROUTE_CODESHARE_COL = 6
ROUTE_STOPS_COL = 7
ROUTE_EQUIPMENT_COL = 8
ROUTE_MIN_COLUMNS = 6
