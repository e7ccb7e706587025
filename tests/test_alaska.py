import math

import pytest

from gctproj.alaska import AlaskaConformal
from gctproj.common import D2R

R_MAJOR = 6378206.4
R_MINOR = 6356583.8


@pytest.fixture
def proj():
    return AlaskaConformal(R_MAJOR, R_MINOR)


def test_origin_maps_to_center(proj):
    lon, lat = proj.inverse(0.0, 0.0)
    assert lon == pytest.approx(-152.0 * D2R)
    assert lat == pytest.approx(64.0 * D2R)


def test_false_offsets_map_to_center():
    proj = AlaskaConformal(R_MAJOR, R_MINOR, 500000.0, 300000.0)
    lon, lat = proj.inverse(500000.0, 300000.0)
    assert lon == pytest.approx(-152.0 * D2R)
    assert lat == pytest.approx(64.0 * D2R)


@pytest.mark.parametrize("x, y", [(100000.0, 50000.0), (-250000.0, 400000.0),
                                  (300000.0, -600000.0)])
def test_false_offsets_shift_input(proj, x, y):
    shifted = AlaskaConformal(R_MAJOR, R_MINOR, 1000.0, -2000.0)
    assert shifted.inverse(x + 1000.0, y - 2000.0) == pytest.approx(
        proj.inverse(x, y))


def test_east_offset_increases_longitude(proj):
    lon, lat = proj.inverse(200000.0, 0.0)
    assert lon > proj.center_lon
    lon_w, _ = proj.inverse(-200000.0, 0.0)
    assert lon_w < proj.center_lon


def test_north_offset_increases_latitude(proj):
    _, lat_n = proj.inverse(0.0, 200000.0)
    _, lat_s = proj.inverse(0.0, -200000.0)
    assert lat_s < proj.center_lat < lat_n


def test_small_offset_stays_near_center(proj):
    lon, lat = proj.inverse(1000.0, 1000.0)
    assert abs(lon - proj.center_lon) < 1e-3
    assert abs(lat - proj.center_lat) < 1e-3


@pytest.mark.parametrize("x, y", [(800000.0, 800000.0), (-1000000.0, -500000.0),
                                  (1500000.0, -1200000.0)])
def test_results_in_valid_range(proj, x, y):
    lon, lat = proj.inverse(x, y)
    assert -math.pi <= lon <= math.pi
    assert -math.pi / 2 <= lat <= math.pi / 2