"""
Shared fixtures for AIRMAP tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from airmap.data.models import Airport, Location, Route
from airmap.interaction.viewport import Viewport


AIRPORTS_DAT = """\
1,"Alpha International","Alphaville","Atlantis","AAA","AAAA",0.0,0.0,100,0,"U","Etc/UTC","airport","OurAirports"
2,"Bravo Field","Bravoton","Borduria","BBB","BBBB",40.0,60.0,2000,4,"E","Asia/Dubai","airport","OurAirports"
3,"Charlie Strip","Charlietown","Carpania",\\N,"CCCC",-30.0,-60.0,50,-3,"S","America/Sao_Paulo","airport","OurAirports"
4,"Delta Regional","Deltaburg","Atlantis","DDD",\\N,50.0,100.0,\\N,8,"N","Asia/Shanghai","airport","OurAirports"
"""

ROUTES_DAT = """\
AA,24,AAA,1,BBB,2,,0,320
AA,24,AAA,1,DDD,4,Y,0,738 320
BA,1355,BBB,2,AAA,1,,0,319
ZZ,99,AAA,1,CCC,3,,0,737
ZZ,99,AAA,1,XXX,\\N,,0,737
"""


@pytest.fixture
def airports_file(tmp_path):
    """Write a small OpenFlights airports file."""
    path = tmp_path / "airports.dat"
    path.write_text(AIRPORTS_DAT, encoding="utf-8")
    return path


@pytest.fixture
def routes_file(tmp_path):
    """Write a small OpenFlights routes file."""
    path = tmp_path / "routes.dat"
    path.write_text(ROUTES_DAT, encoding="utf-8")
    return path


@pytest.fixture
def airports():
    """Three airports spread far enough apart to never overlap on screen."""
    return [
        Airport(1, Location(0.0, 0.0), "AAA", "Alpha International", "Alphaville", "Atlantis"),
        Airport(2, Location(40.0, 60.0), "BBB", "Bravo Field", "Bravoton", "Borduria"),
        Airport(4, Location(50.0, 100.0), "DDD", "Delta Regional", "Deltaburg", "Atlantis"),
    ]


@pytest.fixture
def routes():
    """Routes between the fixture airports, plus one to an unknown airport."""
    return [
        Route(1, 1, 2, airline="AA", source_code="AAA", destination_code="BBB"),
        Route(2, 1, 4, airline="AA", source_code="AAA", destination_code="DDD"),
        Route(3, 2, 1, airline="BA", source_code="BBB", destination_code="AAA"),
        Route(4, 1, 99, airline="ZZ", source_code="AAA", destination_code="ZZZ"),
    ]


@pytest.fixture
def viewport():
    """Default viewport."""
    return Viewport()
