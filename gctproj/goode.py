"""Goode's Homolosine (interrupted) equal-area projection on a sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .common import (
    EPSLN,
    HALF_PI,
    PI,
    InterruptedAreaError,
    ProjectionError,
    adjust_lon,
    sign2,
)

# Central meridians of the twelve lobes, in radians.
_CENTERS = (
    -1.74532925199,   # -100 degrees
    -1.74532925199,   # -100 degrees
    0.523598775598,   # 30 degrees
    0.523598775598,   # 30 degrees
    -2.79252680319,   # -160 degrees
    -1.0471975512,    # -60 degrees
    -2.79252680319,   # -160 degrees
    -1.0471975512,    # -60 degrees
    0.349065850399,   # 20 degrees
    2.44346095279,    # 140 degrees
    0.349065850399,   # 20 degrees
    2.44346095279,    # 140 degrees
)

# Lobes drawn with the sinusoidal projection; the rest use Mollweide.
_SINUSOIDAL = frozenset({1, 3, 4, 5, 8, 9})

# Latitude (40 44' 11.8") where the sinusoidal and Mollweide parts meet.
_LAT_SPLIT = 0.710987989993

_W40 = -0.698131700798     # -40 degrees
_W100 = -1.74532925199     # -100 degrees
_W20 = -0.349065850399     # -20 degrees
_E80 = 1.3962634016        # 80 degrees

_MOLL_X = 0.900316316158
_MOLL_Y = 1.4142135623731
_MOLL_SHIFT = 0.0528035274542

_MAX_ITERATIONS = 50

# Allowed longitude range for each lobe; outside it the point is in a break.
_LOBE_BOUNDS = (
    (-(PI + EPSLN), _W40),
    (-(PI + EPSLN), _W40),
    (_W40, PI + EPSLN),
    (_W40, PI + EPSLN),
    (-(PI + EPSLN), _W100),
    (_W100, _W20),
    (-(PI + EPSLN), _W100),
    (_W100, _W20),
    (_W20, _E80),
    (_E80, PI + EPSLN),
    (_W20, _E80),
    (_E80, PI + EPSLN),
)


def _southern_lobe(value: float, scale: float, base: int) -> int:
    """Pick one of the four southern lobes from a longitude-like value."""
    if value <= scale * _W100:
        return base
    if value <= scale * _W20:
        return base + 1
    if value <= scale * _E80:
        return base + 4
    return base + 5


def _lobe(horizontal: float, vertical: float, scale: float) -> int:
    """Lobe index for a point; ``scale`` is 1 for angles, R for meters."""
    if vertical >= scale * _LAT_SPLIT:
        return 0 if horizontal <= scale * _W40 else 2
    if vertical >= 0.0:
        return 1 if horizontal <= scale * _W40 else 3
    if vertical >= scale * -_LAT_SPLIT:
        return _southern_lobe(horizontal, scale, 4)
    return _southern_lobe(horizontal, scale, 6)


@dataclass(frozen=True)
class GoodeHomolosine:
    """Goode's Homolosine projection; angles in radians, lengths in meters."""

    radius: float
    _false_eastings: tuple[float, ...] = field(init=False, repr=False,
                                               compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_false_eastings",
                           tuple(self.radius * c for c in _CENTERS))

    def forward(self, lon: float, lat: float) -> tuple[float, float]:
        """Project longitude and latitude to easting and northing."""
        region = _lobe(lon, lat, 1.0)
        delta_lon = adjust_lon(lon - _CENTERS[region])
        feast = self._false_eastings[region]

        if region in _SINUSOIDAL:
            return (feast + self.radius * delta_lon * math.cos(lat),
                    self.radius * lat)

        theta = lat
        constant = PI * math.sin(lat)
        iteration = 0
        while True:
            try:
                delta_theta = (-(theta + math.sin(theta) - constant)
                               / (1.0 + math.cos(theta)))
            except ZeroDivisionError:
                raise ProjectionError("Iteration failed to converge", 251,
                                      "goode-forward") from None
            theta += delta_theta
            if abs(delta_theta) < EPSLN:
                break
            if iteration >= _MAX_ITERATIONS:
                raise ProjectionError("Iteration failed to converge", 251,
                                      "goode-forward")
            iteration += 1
        theta /= 2.0

        # At the poles cos(theta) is imprecise; pin x to the lobe's meridian.
        if PI / 2 - abs(lat) < EPSLN:
            delta_lon = 0.0
        x = feast + _MOLL_X * self.radius * delta_lon * math.cos(theta)
        y = self.radius * (_MOLL_Y * math.sin(theta) - _MOLL_SHIFT * sign2(lat))
        return x, y

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing back to longitude and latitude.

        Raises InterruptedAreaError for points in the gaps between lobes.
        """
        r = self.radius
        region = _lobe(x, y, r)
        x -= self._false_eastings[region]
        center = _CENTERS[region]

        if region in _SINUSOIDAL:
            lat = y / r
            if abs(lat) > HALF_PI:
                raise ProjectionError("Input data error", 252, "goode-inverse")
            if abs(abs(lat) - HALF_PI) > EPSLN:
                lon = adjust_lon(center + x / (r * math.cos(lat)))
            else:
                lon = center
        else:
            arg = (y + _MOLL_SHIFT * r * sign2(y)) / (_MOLL_Y * r)
            if abs(arg) > 1.0:
                raise InterruptedAreaError(where="goode-inverse")
            theta = math.asin(arg)
            lon = center + x / (_MOLL_X * r * math.cos(theta))
            if lon < -(PI + EPSLN):
                raise InterruptedAreaError(where="goode-inverse")
            arg = (2.0 * theta + math.sin(2.0 * theta)) / PI
            if abs(arg) > 1.0:
                raise InterruptedAreaError(where="goode-inverse")
            lat = math.asin(arg)

        # Longitudes of +180 and -180 degrees may be swapped by roundoff.
        if (x < 0 and PI - lon < EPSLN) or (x > 0 and PI + lon < EPSLN):
            lon = -lon

        low, high = _LOBE_BOUNDS[region]
        if lon < low or lon > high:
            raise InterruptedAreaError(where="goode-inverse")
        return lon, lat