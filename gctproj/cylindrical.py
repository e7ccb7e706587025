"""Equirectangular projection on a sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .common import HALF_PI, ProjectionError, adjust_lon


@dataclass(frozen=True)
class Equirectangular:
    """Equirectangular projection; angles in radians, lengths in meters.

    ``lat_ts`` is the latitude of true scale.
    """

    radius: float
    center_lon: float
    lat_ts: float = 0.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def forward(self, lon: float, lat: float) -> tuple[float, float]:
        """Project longitude and latitude to easting and northing."""
        dlon = adjust_lon(lon - self.center_lon)
        x = self.false_easting + self.radius * dlon * math.cos(self.lat_ts)
        y = self.false_northing + self.radius * lat
        return x, y

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing back to longitude and latitude."""
        x -= self.false_easting
        y -= self.false_northing
        lat = y / self.radius
        if abs(lat) > HALF_PI:
            raise ProjectionError("Input data error", 174, "equi-inv")
        lon = adjust_lon(self.center_lon
                         + x / (self.radius * math.cos(self.lat_ts)))
        return lon, lat