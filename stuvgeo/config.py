"""Constants for the geodesy core.

The library has no runtime configuration: everything a caller can tune is a
call argument or lives in a ``GeodesyContext``. This module centralises the
numbers every component agrees on.

Ellipsoid (WGS-84):
    WGS84_A: Semi-major axis in metres.
    WGS84_B: Semi-minor axis in metres.
    WGS84_F: Flattening.

Sphere:
    EARTH_RADIUS: Radius used by the spherical distance and by the
                  bounds-of-distance box (the WGS-84 equatorial radius).

Vincenty solver:
    VINCENTY_MAX_ITERATIONS: Hard cap on the lambda iteration.
    VINCENTY_TOLERANCE: Convergence threshold on successive lambda values.

Coordinate ranges:
    MIN_LAT, MAX_LAT, MIN_LON, MAX_LON in decimal degrees.

Example:
    >>> from stuvgeo.config import WGS84_A, WGS84_B
    >>> round((WGS84_A - WGS84_B) / WGS84_A, 9)
    0.003352811
"""

WGS84_A = 6378137.0
WGS84_B = 6356752.314245
WGS84_F = 1 / 298.257223563

EARTH_RADIUS = 6378137.0

VINCENTY_MAX_ITERATIONS = 100
VINCENTY_TOLERANCE = 1e-12

# Raw Vincenty output is rounded to 1 mm before any accuracy bucketing.
DISTANCE_PRECISION = 3

MIN_LAT = -90.0
MAX_LAT = 90.0
MIN_LON = -180.0
MAX_LON = 180.0

DEFAULT_DECIMALS = 4
