# gctproj

Forward and inverse map projection equations for a small set of classic
cartographic projections. Longitudes and latitudes are in radians;
eastings, northings and radii are in meters.

## Projections

| Module                | Class              | Forward | Inverse |
|-----------------------|--------------------|---------|---------|
| `gctproj.conic`       | `EquidistantConic` | yes     | yes     |
| `gctproj.cylindrical` | `Equirectangular`  | yes     | yes     |
| `gctproj.goode`       | `GoodeHomolosine`  | yes     | yes     |
| `gctproj.alaska`      | `AlaskaConformal`  | no      | yes     |

Each projection is a frozen dataclass built once from its parameters.
`forward(lon, lat)` returns an `(x, y)` tuple and `inverse(x, y)` returns a
`(lon, lat)` tuple.

- `EquidistantConic(r_major, r_minor, lat1, lat2, center_lon, center_lat,
  false_easting=0.0, false_northing=0.0, two_parallels=False)` works on an
  ellipsoid. With `two_parallels` false only `lat1` is the standard
  parallel; with it true both `lat1` and `lat2` are, and parallels
  symmetric about the equator are rejected.
- `Equirectangular(radius, center_lon, lat_ts=0.0, false_easting=0.0,
  false_northing=0.0)` works on a sphere; `lat_ts` is the latitude of true
  scale.
- `GoodeHomolosine(radius)` is the interrupted homolosine projection on a
  sphere, with twelve lobes (sinusoidal near the equator, Mollweide
  towards the poles).
- `AlaskaConformal(r_major, r_minor, false_easting=0.0, false_northing=0.0)`
  provides the inverse equations only. Its centre is fixed at 152 degrees
  west, 64 degrees north (`center_lon`, `center_lat`).

## Errors

A point or a set of parameters that cannot be handled raises
`gctproj.common.ProjectionError`. Its `code` attribute holds a numeric
status and `where` names the routine that failed, for example:

- 81: equidistant conic standard parallels on opposite sides of the equator
- 3: equidistant conic inverse latitude failed to converge
- 174: equirectangular inverse latitude beyond a pole
- 251 / 252: Goode forward iteration failure / inverse input error
- 235 / 236: Alaska Conformal inverse iterations did not converge

For `GoodeHomolosine.inverse`, a point in a gap between lobes raises
`gctproj.common.InterruptedAreaError`, a subclass of `ProjectionError`
whose code is -2.

## Helpers

`gctproj.common` holds the shared constants and routines:

- `adjust_lon` wraps a longitude into the range -pi to pi.
- `asinz` is an arcsine with its argument clamped to [-1, 1]; `sign2`
  returns -1 or 1.
- `e0fn`, `e1fn`, `e2fn`, `e3fn` and `mlfn` give the distance along a
  meridian; `e4fn`, `msfnz`, `qsfnz` and `tsfnz` are further ellipsoid
  quantities.
- `phi1z`, `phi2z`, `phi3z` and `phi4z` solve iteratively for latitude and
  raise `ProjectionError` when they do not converge; `phi4z` returns a
  `(phi, c)` tuple.
- `pakr2dm` converts radians to packed DDDMMMSSS.SSS; `pakcz` converts
  packed DDDMMSS.SSS to packed DDDMMMSSS.SSS.
- `calc_utm_zone` finds a UTM zone number from a longitude in degrees.
- `ProjectionCode` enumerates the projection system numbers.

## Example

```python
import math
from gctproj.cylindrical import Equirectangular

proj = Equirectangular(6370997.0, 0.0)
x, y = proj.forward(math.radians(10.0), math.radians(50.0))
lon, lat = proj.inverse(x, y)
```

## What this package does not do

It offers the projection classes above and nothing to drive them as a
coordinate system: there is no conversion between units, no lookup of
spheroids or datums, no parsing of packed parameter arrays, and no way to
choose a projection by its `ProjectionCode` number. Most of the numbers in
`ProjectionCode` have no class here. There is no command-line program.

## Tests

```
pip install -e .[test]
pytest
```