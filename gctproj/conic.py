"""Equidistant Conic projection on an ellipsoid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .common import (
    EPSLN,
    ProjectionError,
    adjust_lon,
    e0fn,
    e1fn,
    e2fn,
    e3fn,
    mlfn,
    msfnz,
    phi3z,
)


@dataclass(frozen=True)
class EquidistantConic:
    """Equidistant Conic projection; angles in radians, lengths in meters.

    With ``two_parallels`` false only ``lat1`` is used as the standard
    parallel; otherwise both ``lat1`` and ``lat2`` are.
    """

    r_major: float
    r_minor: float
    lat1: float
    lat2: float
    center_lon: float
    center_lat: float
    false_easting: float = 0.0
    false_northing: float = 0.0
    two_parallels: bool = False
    _e0: float = field(init=False, repr=False, compare=False)
    _e1: float = field(init=False, repr=False, compare=False)
    _e2: float = field(init=False, repr=False, compare=False)
    _e3: float = field(init=False, repr=False, compare=False)
    _ns: float = field(init=False, repr=False, compare=False)
    _g: float = field(init=False, repr=False, compare=False)
    _rh: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ratio = self.r_minor / self.r_major
        es = 1.0 - ratio * ratio
        e = math.sqrt(es)
        e0, e1, e2, e3 = e0fn(es), e1fn(es), e2fn(es), e3fn(es)

        sinphi = math.sin(self.lat1)
        ms1 = msfnz(e, sinphi, math.cos(self.lat1))
        ml1 = mlfn(e0, e1, e2, e3, self.lat1)

        if self.two_parallels:
            if abs(self.lat1 + self.lat2) < EPSLN:
                raise ProjectionError(
                    "Standard Parallels on opposite sides of equator",
                    81, "eqcon-for")
            sinphi = math.sin(self.lat2)
            ms2 = msfnz(e, sinphi, math.cos(self.lat2))
            ml2 = mlfn(e0, e1, e2, e3, self.lat2)
            if abs(self.lat1 - self.lat2) >= EPSLN:
                ns = (ms1 - ms2) / (ml2 - ml1)
            else:
                ns = sinphi
        else:
            ns = sinphi

        g = ml1 + ms1 / ns
        ml0 = mlfn(e0, e1, e2, e3, self.center_lat)
        rh = self.r_major * (g - ml0)

        for name, value in (("_e0", e0), ("_e1", e1), ("_e2", e2),
                            ("_e3", e3), ("_ns", ns), ("_g", g), ("_rh", rh)):
            object.__setattr__(self, name, value)

    def forward(self, lon: float, lat: float) -> tuple[float, float]:
        """Project longitude and latitude to easting and northing."""
        ml = mlfn(self._e0, self._e1, self._e2, self._e3, lat)
        rh1 = self.r_major * (self._g - ml)
        theta = self._ns * adjust_lon(lon - self.center_lon)
        x = self.false_easting + rh1 * math.sin(theta)
        y = self.false_northing + self._rh - rh1 * math.cos(theta)
        return x, y

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing back to longitude and latitude."""
        x -= self.false_easting
        y = self._rh - y + self.false_northing
        if self._ns >= 0:
            rh1 = math.hypot(x, y)
            con = 1.0
        else:
            rh1 = -math.hypot(x, y)
            con = -1.0
        theta = math.atan2(con * x, con * y) if rh1 != 0.0 else 0.0
        ml = self._g - rh1 / self.r_major
        lat = phi3z(ml, self._e0, self._e1, self._e2, self._e3)
        lon = adjust_lon(self.center_lon + theta / self._ns)
        return lon, lat