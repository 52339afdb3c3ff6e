"""Bearings between points and 16-point compass directions.

All bearings are degrees clockwise from true north in [0, 360).
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, log, pi, sin, tan

from ..context import GeodesyContext
from ..unit import Degree, Radian
from ..utils import round_half_up, wrap_to_360, wrap_to_pi
from .geo_point import coords

# (exact, rough) per 22.5° sector, clockwise from north.
COMPASS_POINTS = (
    ("N", "N"),
    ("NNE", "N"),
    ("NE", "N"),
    ("ENE", "E"),
    ("E", "E"),
    ("ESE", "E"),
    ("SE", "E"),
    ("SSE", "S"),
    ("S", "S"),
    ("SSW", "S"),
    ("SW", "S"),
    ("WSW", "W"),
    ("W", "W"),
    ("WNW", "W"),
    ("NW", "W"),
    ("NNW", "N"),
)

BEARING_MODES = ("rhumbline", "circle")


@dataclass(frozen=True)
class CompassDirection:
    """Direction from one point to another.

    Attributes:
        exact (str): One of the 16 compass points, e.g. "NNE".
        rough (str): One of N, E, S, W.
        bearing (float): The bearing it was derived from, in degrees.
    """

    exact: str
    rough: str
    bearing: float


def bearing_rhumb(origin, dest, context: GeodesyContext | None = None) -> float:
    """Constant-heading (loxodrome) bearing from ``origin`` to ``dest``.

    Computed on the Mercator projection; the longitude difference takes the
    short way round across the antimeridian.
    """
    o = coords(origin, context=context)
    d = coords(dest, context=context)

    diff_lng = wrap_to_pi(d.lng_rad - o.lng_rad)
    diff_phi = log(tan(d.lat_rad / 2 + pi / 4) / tan(o.lat_rad / 2 + pi / 4))
    return wrap_to_360(Radian(atan2(diff_lng, diff_phi)).to(Degree))


def bearing_great_circle(origin, dest, context: GeodesyContext | None = None) -> float:
    """Initial great-circle bearing from ``origin`` to ``dest``."""
    o = coords(origin, context=context)
    d = coords(dest, context=context)

    diff_lng = d.lng_rad - o.lng_rad
    y = sin(diff_lng) * cos(d.lat_rad)
    x = cos(o.lat_rad) * sin(d.lat_rad) - sin(o.lat_rad) * cos(d.lat_rad) * cos(diff_lng)
    return wrap_to_360(Radian(atan2(y, x)).to(Degree))


def compass_direction(origin, dest, mode: str = "rhumbline", context: GeodesyContext | None = None) -> CompassDirection:
    """Compass direction from ``origin`` to ``dest``.

    Args:
        mode: "rhumbline" (default) or "circle" for the great-circle bearing.

    Raises:
        ValueError: For any other mode.
    """
    if mode == "circle":
        bearing = bearing_great_circle(origin, dest, context)
    elif mode == "rhumbline":
        bearing = bearing_rhumb(origin, dest, context)
    else:
        raise ValueError(f"mode must be one of {BEARING_MODES}, got {mode!r}")

    exact, rough = COMPASS_POINTS[int(round_half_up(bearing / 22.5)) % 16]
    return CompassDirection(exact, rough, bearing)
