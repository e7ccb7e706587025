import math

import pytest

from gctproj.common import ProjectionError
from gctproj.conic import EquidistantConic

A = 6378206.4
B = 6356583.8


def _two(lat1=math.radians(29.5), lat2=math.radians(45.5),
         center_lat=math.radians(23.0)):
    return EquidistantConic(A, B, lat1, lat2, math.radians(-96.0), center_lat,
                            false_easting=500000.0, false_northing=100000.0,
                            two_parallels=True)


def test_origin_maps_to_false_offsets():
    proj = _two()
    x, y = proj.forward(math.radians(-96.0), math.radians(23.0))
    assert x == pytest.approx(500000.0, abs=1e-6)
    assert y == pytest.approx(100000.0, abs=1e-6)


@pytest.mark.parametrize("lon_deg,lat_deg", [
    (-96.0, 23.0), (-75.0, 35.0), (-120.0, 50.0), (-80.0, 10.0), (-100.0, 60.0),
])
def test_round_trip_two_parallels(lon_deg, lat_deg):
    proj = _two()
    lon, lat = math.radians(lon_deg), math.radians(lat_deg)
    back = proj.inverse(*proj.forward(lon, lat))
    assert back[0] == pytest.approx(lon, abs=1e-9)
    assert back[1] == pytest.approx(lat, abs=1e-9)


@pytest.mark.parametrize("lon_deg,lat_deg", [(10.0, 40.0), (30.0, 55.0), (-5.0, 20.0)])
def test_round_trip_single_parallel(lon_deg, lat_deg):
    proj = EquidistantConic(A, B, math.radians(40.0), 0.0, math.radians(10.0),
                            math.radians(30.0))
    lon, lat = math.radians(lon_deg), math.radians(lat_deg)
    back = proj.inverse(*proj.forward(lon, lat))
    assert back[0] == pytest.approx(lon, abs=1e-9)
    assert back[1] == pytest.approx(lat, abs=1e-9)


def test_round_trip_southern_hemisphere():
    proj = _two(math.radians(-30.0), math.radians(-50.0), math.radians(-40.0))
    lon, lat = math.radians(-90.0), math.radians(-35.0)
    back = proj.inverse(*proj.forward(lon, lat))
    assert back[0] == pytest.approx(lon, abs=1e-9)
    assert back[1] == pytest.approx(lat, abs=1e-9)


def test_opposite_parallels_rejected():
    with pytest.raises(ProjectionError) as excinfo:
        _two(math.radians(30.0), math.radians(-30.0))
    assert excinfo.value.code == 81


def test_single_parallel_ignores_second():
    kwargs = dict(r_major=A, r_minor=B, lat1=math.radians(30.0),
                  center_lon=0.0, center_lat=math.radians(20.0))
    one = EquidistantConic(lat2=math.radians(-30.0), **kwargs)
    other = EquidistantConic(lat2=math.radians(60.0), **kwargs)
    point = (math.radians(12.0), math.radians(35.0))
    assert one.forward(*point) == pytest.approx(other.forward(*point))


def test_equal_parallels_match_single_mode():
    lat1 = math.radians(33.0)
    single = EquidistantConic(A, B, lat1, 0.0, 0.0, math.radians(25.0))
    double = EquidistantConic(A, B, lat1, lat1, 0.0, math.radians(25.0),
                              two_parallels=True)
    point = (math.radians(-7.0), math.radians(41.0))
    assert double.forward(*point) == pytest.approx(single.forward(*point))


def test_longitude_wraps():
    proj = _two()
    lat = math.radians(40.0)
    lon = math.radians(-100.0)
    assert proj.forward(lon + 2 * math.pi, lat) == pytest.approx(proj.forward(lon, lat))


def test_symmetric_about_central_meridian():
    proj = _two()
    lat = math.radians(38.0)
    x1, y1 = proj.forward(math.radians(-96.0 + 8.0), lat)
    x2, y2 = proj.forward(math.radians(-96.0 - 8.0), lat)
    assert x1 - 500000.0 == pytest.approx(500000.0 - x2, abs=1e-6)
    assert y1 == pytest.approx(y2, abs=1e-6)