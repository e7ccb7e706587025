import math

import pytest

from gctproj.common import ProjectionError
from gctproj.cylindrical import Equirectangular

R = 6370997.0


def test_center_maps_to_false_offsets():
    proj = Equirectangular(R, math.radians(15.0), math.radians(30.0), 1000.0, 2000.0)
    x, y = proj.forward(math.radians(15.0), 0.0)
    assert x == pytest.approx(1000.0)
    assert y == pytest.approx(2000.0)


@pytest.mark.parametrize("lon_deg,lat_deg", [
    (0.0, 0.0), (45.0, 30.0), (-170.0, -60.0), (120.0, 89.0), (-30.0, -89.9),
])
def test_round_trip(lon_deg, lat_deg):
    proj = Equirectangular(R, math.radians(10.0), math.radians(20.0), 500.0, -700.0)
    lon, lat = math.radians(lon_deg), math.radians(lat_deg)
    back = proj.inverse(*proj.forward(lon, lat))
    assert back[0] == pytest.approx(lon, abs=1e-9)
    assert back[1] == pytest.approx(lat, abs=1e-9)


def test_northing_is_linear_in_latitude():
    proj = Equirectangular(R, 0.0, 0.0, 0.0, 300.0)
    y1 = proj.forward(0.0, 0.1)[1]
    y2 = proj.forward(0.0, 0.2)[1]
    assert y2 - y1 == pytest.approx(y1 - 300.0)


def test_true_scale_latitude_shrinks_easting():
    plain = Equirectangular(R, 0.0)
    scaled = Equirectangular(R, 0.0, math.radians(60.0))
    x_plain = plain.forward(1.0, 0.3)[0]
    x_scaled = scaled.forward(1.0, 0.3)[0]
    assert x_scaled == pytest.approx(x_plain * 0.5)


def test_longitude_wraps():
    proj = Equirectangular(R, 0.0)
    assert proj.forward(0.5 + 2 * math.pi, 0.2) == pytest.approx(proj.forward(0.5, 0.2))


def test_inverse_beyond_pole_rejected():
    proj = Equirectangular(R, 0.0)
    with pytest.raises(ProjectionError) as excinfo:
        proj.inverse(0.0, R * 2.0)
    assert excinfo.value.code == 174