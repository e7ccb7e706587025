"""Shared constants, errors and numerical helpers for the projections."""

from __future__ import annotations

import math
from enum import IntEnum

PI = 3.141592653589793238
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
EPSLN = 1.0e-10
R2D = 57.2957795131
D2R = 1.745329251994328e-2
S2R = 4.848136811095359e-6

OK = 0
ERROR = -1
IN_BREAK = -2

COEFCT = 15
PROJCT = 31
DATMCT = 20
MAXPROJ = 30
MAXUNIT = 5

_MAX_VAL = 4
_MAXLONG = 2147483647.0
_DBLLONG = 4.61168601e18


class ProjectionError(Exception):
    """A projection computation failed; ``code`` holds the numeric status."""

    def __init__(self, message: str, code: int = ERROR, where: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.where = where

    def __str__(self) -> str:
        text = super().__str__()
        return f"[{self.where}] {text}" if self.where else text


class InterruptedAreaError(ProjectionError):
    """The point lies in an interrupted (unmapped) area of the projection."""

    def __init__(self, message: str = "Point lies in an interrupted area",
                 where: str = "") -> None:
        super().__init__(message, IN_BREAK, where)


class ProjectionCode(IntEnum):
    """Numeric codes identifying the supported projection systems."""

    GEO = 0
    UTM = 1
    SPCS = 2
    ALBERS = 3
    LAMCC = 4
    MERCAT = 5
    PS = 6
    POLYC = 7
    EQUIDC = 8
    TM = 9
    STEREO = 10
    LAMAZ = 11
    AZMEQD = 12
    GNOMON = 13
    ORTHO = 14
    GVNSP = 15
    SNSOID = 16
    EQRECT = 17
    MILLER = 18
    VGRINT = 19
    HOM = 20
    ROBIN = 21
    SOM = 22
    ALASKA = 23
    GOOD = 24
    MOLL = 25
    IMOLL = 26
    HAMMER = 27
    WAGIV = 28
    WAGVII = 29
    OBEQA = 30
    USDEF = 99


_ARITH_ERRORS = (ValueError, ZeroDivisionError, OverflowError)


def _pow(base: float, exponent: float) -> float:
    """Real power that yields NaN instead of raising on domain errors."""
    try:
        return math.pow(base, exponent)
    except _ARITH_ERRORS:
        return math.nan


def asinz(con: float) -> float:
    """Arcsine with the argument clamped to [-1, 1] to absorb roundoff."""
    if abs(con) > 1.0:
        con = 1.0 if con > 1.0 else -1.0
    return math.asin(con)


def msfnz(eccent: float, sinphi: float, cosphi: float) -> float:
    """Radius of a parallel divided by the semimajor axis (small m)."""
    con = eccent * sinphi
    return cosphi / math.sqrt(1.0 - con * con)


def qsfnz(eccent: float, sinphi: float, cosphi: float) -> float:
    """The authalic quantity small q for a latitude."""
    if eccent > 1.0e-7:
        con = eccent * sinphi
        return (1.0 - eccent * eccent) * (
            sinphi / (1.0 - con * con)
            - (0.5 / eccent) * math.log((1.0 - con) / (1.0 + con))
        )
    return 2.0 * sinphi


def phi1z(eccent: float, qs: float) -> float:
    """Latitude from q, as used by the inverse Albers equal-area projection."""
    phi = asinz(0.5 * qs)
    if eccent < EPSLN:
        return phi
    eccnts = eccent * eccent
    try:
        for _ in range(25):
            sinpi = math.sin(phi)
            cospi = math.cos(phi)
            con = eccent * sinpi
            com = 1.0 - con * con
            dphi = 0.5 * com * com / cospi * (
                qs / (1.0 - eccnts)
                - sinpi / com
                + 0.5 / eccent * math.log((1.0 - con) / (1.0 + con))
            )
            phi += dphi
            if abs(dphi) <= 1e-7:
                return phi
    except _ARITH_ERRORS:
        pass
    raise ProjectionError("Convergence error", 1, "phi1z-conv")


def phi2z(eccent: float, ts: float) -> float:
    """Latitude from t, for conformal conic and polar stereographic inverses."""
    eccnth = 0.5 * eccent
    phi = HALF_PI - 2 * math.atan(ts)
    try:
        for _ in range(16):
            con = eccent * math.sin(phi)
            dphi = (HALF_PI
                    - 2 * math.atan(ts * _pow((1.0 - con) / (1.0 + con), eccnth))
                    - phi)
            phi += dphi
            if abs(dphi) <= 1e-10:
                return phi
    except _ARITH_ERRORS:
        pass
    raise ProjectionError("Convergence error", 2, "phi2z-conv")


def phi3z(ml: float, e0: float, e1: float, e2: float, e3: float) -> float:
    """Latitude from meridian distance, for the equidistant conic inverse."""
    phi = ml
    try:
        for _ in range(15):
            dphi = (ml + e1 * math.sin(2.0 * phi) - e2 * math.sin(4.0 * phi)
                    + e3 * math.sin(6.0 * phi)) / e0 - phi
            phi += dphi
            if abs(dphi) <= 1e-10:
                return phi
    except _ARITH_ERRORS:
        pass
    raise ProjectionError("Latitude failed to converge after 15 iterations",
                          3, "PHI3Z-CONV")


def phi4z(eccent: float, e0: float, e1: float, e2: float, e3: float,
          a: float, b: float) -> tuple[float, float]:
    """Latitude for the polyconic inverse.

    ``eccent`` is the eccentricity squared.  Returns ``(phi, c)``.
    """
    phi = a
    c = 0.0
    try:
        for _ in range(15):
            sinphi = math.sin(phi)
            tanphi = math.tan(phi)
            c = tanphi * math.sqrt(1.0 - eccent * sinphi * sinphi)
            sin2ph = math.sin(2.0 * phi)
            ml = (e0 * phi - e1 * sin2ph + e2 * math.sin(4.0 * phi)
                  - e3 * math.sin(6.0 * phi))
            mlp = (e0 - 2.0 * e1 * math.cos(2.0 * phi)
                   + 4.0 * e2 * math.cos(4.0 * phi)
                   - 6.0 * e3 * math.cos(6.0 * phi))
            con1 = 2.0 * ml + c * (ml * ml + b) - 2.0 * a * (c * ml + 1.0)
            con2 = eccent * sin2ph * (ml * ml + b - 2.0 * a * ml) / (2.0 * c)
            con3 = 2.0 * (a - ml) * (c * mlp - 2.0 / sin2ph) - 2.0 * mlp
            dphi = con1 / (con2 + con3)
            phi += dphi
            if abs(dphi) <= 1e-10:
                return phi, c
    except _ARITH_ERRORS:
        pass
    raise ProjectionError("Lattitude failed to converge", 4, "phi4z-conv")


def pakcz(pak: float) -> float:
    """Convert packed DDDMMSS.SSS to packed DDDMMMSSS.SSS."""
    negative = pak < 0.0
    con = abs(pak)
    degs = int(con / 10000.0 + 0.001)
    con -= degs * 10000
    mins = int(con / 100.0 + 0.001)
    secs = con - mins * 100
    con = degs * 1000000.0 + mins * 1000.0 + secs
    return -con if negative else con


def pakr2dm(pak: float) -> float:
    """Convert radians to packed DDDMMMSSS.SSS."""
    pak *= R2D
    negative = pak < 0.0
    con = abs(pak)
    degs = int(con)
    con = (con - degs) * 60
    mins = int(con)
    secs = (con - mins) * 60
    con = degs * 1000000.0 + mins * 1000.0 + secs
    return -con if negative else con


def tsfnz(eccent: float, phi: float, sinphi: float) -> float:
    """Small t for conformal conic and polar stereographic forward equations."""
    con = eccent * sinphi
    com = 0.5 * eccent
    con = _pow((1.0 - con) / (1.0 + con), com)
    return math.tan(0.5 * (HALF_PI - phi)) / con


def sign2(x: float) -> float:
    """Return -1 for negative arguments and 1 otherwise."""
    return -1.0 if x < 0.0 else 1.0


def adjust_lon(x: float) -> float:
    """Bring a longitude in radians into the range -PI..PI."""
    if not math.isfinite(x):
        return x
    count = 0
    while abs(x) > PI:
        if int(abs(x / PI)) < 2:
            x -= sign2(x) * TWO_PI
        elif int(abs(x / TWO_PI)) < _MAXLONG:
            x -= int(x / TWO_PI) * TWO_PI
        elif int(abs(x / (_MAXLONG * TWO_PI))) < _MAXLONG:
            x -= int(x / (_MAXLONG * TWO_PI)) * (TWO_PI * _MAXLONG)
        elif int(abs(x / (_DBLLONG * TWO_PI))) < _MAXLONG:
            x -= int(x / (_DBLLONG * TWO_PI)) * (TWO_PI * _DBLLONG)
        else:
            x -= sign2(x) * TWO_PI
        count += 1
        if count > _MAX_VAL:
            break
    return x


def e0fn(x: float) -> float:
    """Meridian-distance constant e0 from eccentricity squared."""
    return 1.0 - 0.25 * x * (1.0 + x / 16.0 * (3.0 + 1.25 * x))


def e1fn(x: float) -> float:
    """Meridian-distance constant e1 from eccentricity squared."""
    return 0.375 * x * (1.0 + 0.25 * x * (1.0 + 0.46875 * x))


def e2fn(x: float) -> float:
    """Meridian-distance constant e2 from eccentricity squared."""
    return 0.05859375 * x * x * (1.0 + 0.75 * x)


def e3fn(x: float) -> float:
    """Meridian-distance constant e3 from eccentricity squared."""
    return x * x * x * (35.0 / 3072.0)


def e4fn(x: float) -> float:
    """Polar stereographic constant e4 from the eccentricity."""
    con = 1.0 + x
    com = 1.0 - x
    return math.sqrt(_pow(con, con) * _pow(com, com))


def mlfn(e0: float, e1: float, e2: float, e3: float, phi: float) -> float:
    """Distance along a meridian from the equator to latitude ``phi``."""
    return (e0 * phi - e1 * math.sin(2.0 * phi) + e2 * math.sin(4.0 * phi)
            - e3 * math.sin(6.0 * phi))


def calc_utm_zone(lon: float) -> int:
    """UTM zone number for a longitude given in degrees."""
    return int((lon + 180.0) / 6.0 + 1.0)