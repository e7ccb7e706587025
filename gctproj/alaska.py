"""Alaska Conformal projection (inverse equations)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .common import D2R, EPSLN, HALF_PI, ProjectionError, adjust_lon, asinz

# Series coefficients, indexed 1..6; index 0 is unused.
_ACOEF = (0.0, 0.9945303, 0.0052083, 0.0072721, -0.0151089, 0.0642675,
          0.3582802)
_BCOEF = (0.0, 0.0, -0.0027404, 0.0048181, -0.1932526, -0.1381226,
          -0.2884586)
_ORDER = 6

# Eccentricity squared fixed by the projection's definition.
_ES = 0.006768657997291094

_MAX_ITERATIONS = 20


@dataclass(frozen=True)
class AlaskaConformal:
    """Alaska Conformal (modified stereographic) projection.

    Lengths are in meters, returned angles in radians.  The projection
    centre is fixed at 152 degrees west, 64 degrees north.
    """

    r_major: float
    r_minor: float
    false_easting: float = 0.0
    false_northing: float = 0.0
    center_lon: float = field(init=False, default=-152.0 * D2R)
    center_lat: float = field(init=False, default=64.0 * D2R)
    _e: float = field(init=False, repr=False, compare=False)
    _sin_p26: float = field(init=False, repr=False, compare=False)
    _cos_p26: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        e = math.sqrt(_ES)
        esphi = e * math.sin(self.center_lat)
        chi = 2.0 * math.atan(
            math.tan((HALF_PI + self.center_lat) / 2.0)
            * ((1.0 - esphi) / (1.0 + esphi)) ** (e / 2.0)) - HALF_PI
        object.__setattr__(self, "_e", e)
        object.__setattr__(self, "_sin_p26", math.sin(chi))
        object.__setattr__(self, "_cos_p26", math.cos(chi))

    def _to_oblique_stereographic(self, x: float, y: float) -> tuple[float, float]:
        """Solve the complex series for oblique stereographic coordinates."""
        n = _ORDER
        xp, yp = x, y
        iterations = 0
        while True:
            r = xp + xp
            s = xp * xp + yp * yp
            ar, ai = _ACOEF[n], _BCOEF[n]
            br, bi = _ACOEF[n - 1], _BCOEF[n - 1]
            cr, ci = n * ar, n * ai
            dr, di = (n - 1) * br, (n - 1) * bi
            arn = ain = 0.0
            for j in range(2, n + 1):
                arn = br + r * ar
                ain = bi + r * ai
                if j < n:
                    br = _ACOEF[n - j] - s * ar
                    bi = _BCOEF[n - j] - s * ai
                    ar, ai = arn, ain
                    crn = dr + r * cr
                    cin = di + r * ci
                    dr = (n - j) * _ACOEF[n - j] - s * cr
                    di = (n - j) * _BCOEF[n - j] - s * ci
                    cr, ci = crn, cin
            br = -s * ar
            bi = -s * ai
            ar, ai = arn, ain
            fxyr = xp * ar - yp * ai + br - x
            fxyi = yp * ar + xp * ai + bi - y
            fpxyr = xp * cr - yp * ci + dr
            fpxyi = yp * cr + xp * ci + ci
            den = fpxyr * fpxyr + fpxyi * fpxyi
            if den == 0.0:
                raise ProjectionError("Too many iterations in inverse", 235,
                                      "alcon-inv")
            dxp = -(fxyr * fpxyr + fxyi * fpxyi) / den
            dyp = -(fxyi * fpxyr - fxyr * fpxyi) / den
            xp += dxp
            yp += dyp
            ds = abs(dxp) + abs(dyp)
            iterations += 1
            if iterations > _MAX_ITERATIONS:
                raise ProjectionError("Too many iterations in inverse", 235,
                                      "alcon-inv")
            if not ds > EPSLN:
                return xp, yp

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing back to longitude and latitude."""
        x = (x - self.false_easting) / self.r_major
        y = (y - self.false_northing) / self.r_major
        xp, yp = self._to_oblique_stereographic(x, y)

        rh = math.hypot(xp, yp)
        z = 2.0 * math.atan(rh / 2.0)
        sinz = math.sin(z)
        cosz = math.cos(z)
        if abs(rh) <= EPSLN:
            return self.center_lon, self.center_lat

        chi = asinz(cosz * self._sin_p26 + (yp * sinz * self._cos_p26) / rh)
        e = self._e
        phi = chi
        iterations = 0
        while True:
            esphi = e * math.sin(phi)
            dphi = (2.0 * math.atan(
                math.tan((HALF_PI + chi) / 2.0)
                * ((1.0 + esphi) / (1.0 - esphi)) ** (e / 2.0))
                - HALF_PI - phi)
            phi += dphi
            iterations += 1
            if iterations > _MAX_ITERATIONS:
                raise ProjectionError("Too many iterations in inverse", 236,
                                      "alcon-inv")
            if not abs(dphi) > EPSLN:
                break

        lon = adjust_lon(self.center_lon + math.atan2(
            xp * sinz,
            rh * self._cos_p26 * cosz - yp * self._sin_p26 * sinz))
        return lon, phi