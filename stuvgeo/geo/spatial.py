"""Queries over collections of points.

Collections are either sequences (keys are positions) or mappings (keys are
the mapping keys, e.g. station ids). Points inside them may take any shape
``coords`` understands.

Typical use from the schedule screens:

    nearest = find_nearest(device_position, [s["location"] for s in stations])
    station = stations[nearest.key]
    km = convert_unit("km", nearest.distance)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from math import acos, asin, cos, pi, sin

import numpy as np

from ..config import EARTH_RADIUS, MAX_LAT, MAX_LON, MIN_LAT, MIN_LON
from ..context import GeodesyContext
from ..errors import InvalidFormat
from ..unit import Degree, Hour, Kilometer, Meter, Millisecond, Second, distance_unit
from ..utils import clamp, round_half_up
from .distance import vincenty_inverse
from .geo_point import GeoPoint, coords

logger = logging.getLogger(__name__)

SPEED_UNIT_ALIASES = {"mph": "mi", "kmh": "km"}


@dataclass(frozen=True)
class Bounds:
    """Bounding box of a point collection, in decimal degrees (and metres)."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float
    min_elevation: float | None = None
    max_elevation: float | None = None


@dataclass(frozen=True)
class Center:
    """Middle of a bounding box and the length of its diagonal."""

    latitude: float
    longitude: float
    diagonal_distance_km: float


@dataclass(frozen=True)
class OrderedPoint:
    """A collection member with its key and its distance to a reference."""

    key: Hashable
    point: GeoPoint
    distance: float

    @property
    def latitude(self) -> float:
        return self.point.latitude

    @property
    def longitude(self) -> float:
        return self.point.longitude

    @property
    def elevation(self) -> float | None:
        return self.point.elevation


def _items(points) -> Iterator[tuple[Hashable, object]]:
    if isinstance(points, Mapping):
        return iter(points.items())
    return enumerate(points)


def _resolve_all(points, context: GeodesyContext | None) -> tuple[list[Hashable], list[GeoPoint]]:
    keys, resolved = [], []
    for key, point in _items(points):
        keys.append(key)
        resolved.append(coords(point, context=context))
    return keys, resolved


def bounds(points, context: GeodesyContext | None = None) -> Bounds | None:
    """Min/max latitude and longitude of ``points``; None when empty.

    Elevation bounds are filled in when the first point has an elevation,
    and cover every point that has one.
    """
    _, resolved = _resolve_all(points, context)
    if not resolved:
        return None

    lats = np.array([p.latitude for p in resolved])
    lngs = np.array([p.longitude for p in resolved])
    box = Bounds(float(lats.min()), float(lats.max()), float(lngs.min()), float(lngs.max()))

    if resolved[0].elevation is None:
        return box

    elevations = np.array([p.elevation for p in resolved if p.elevation is not None])
    return Bounds(
        box.min_lat,
        box.max_lat,
        box.min_lng,
        box.max_lng,
        float(elevations.min()),
        float(elevations.max()),
    )


def center(points, context: GeodesyContext | None = None) -> Center | None:
    """Middle of the bounding box of ``points`` (not their centroid).

    Returns:
        Center with 6-decimal coordinates and the Vincenty length of the
        south-west/north-east diagonal in kilometres; None when empty.

    Raises:
        NonConvergentError: If the diagonal cannot be measured.
    """
    box = bounds(points, context)
    if box is None:
        return None

    latitude = box.min_lat + (box.max_lat - box.min_lat) / 2
    longitude = box.min_lng + (box.max_lng - box.min_lng) / 2
    diagonal = vincenty_inverse(
        GeoPoint(box.min_lat, box.min_lng),
        GeoPoint(box.max_lat, box.max_lng),
        context=context,
    ).unwrap()

    return Center(
        round_half_up(latitude, 6),
        round_half_up(longitude, 6),
        Meter(diagonal).to(Kilometer),
    )


def bounds_of_distance(point, distance: float, context: GeodesyContext | None = None) -> tuple[GeoPoint, GeoPoint]:
    """Box that contains every point within ``distance`` metres of ``point``.

    Works on a sphere of radius ``EARTH_RADIUS``. When the circle reaches a
    pole, latitude is clamped and the box spans all longitudes. When it
    crosses the antimeridian, the south-west longitude ends up greater than
    the north-east one.

    Returns:
        (south_west, north_east) corners.
    """
    p = coords(point, context=context)
    rad_lat, rad_lng = p.lat_rad, p.lng_rad
    rad_dist = distance / EARTH_RADIUS

    min_lat_rad, max_lat_rad = float(Degree(MIN_LAT)), float(Degree(MAX_LAT))
    min_lng_rad, max_lng_rad = float(Degree(MIN_LON)), float(Degree(MAX_LON))

    min_lat = rad_lat - rad_dist
    max_lat = rad_lat + rad_dist

    if min_lat > min_lat_rad and max_lat < max_lat_rad:
        delta_lng = asin(clamp(sin(rad_dist) / cos(rad_lat), -1.0, 1.0))
        min_lng = rad_lng - delta_lng
        if min_lng < min_lng_rad:
            min_lng += 2 * pi
        max_lng = rad_lng + delta_lng
        if max_lng > max_lng_rad:
            max_lng -= 2 * pi
    else:
        min_lat = max(min_lat, min_lat_rad)
        max_lat = min(max_lat, max_lat_rad)
        min_lng = min_lng_rad
        max_lng = max_lng_rad

    return GeoPoint.from_rad(min_lat, min_lng), GeoPoint.from_rad(max_lat, max_lng)


def point_in_polygon(point, polygon, context: GeodesyContext | None = None) -> bool:
    """Even-odd ray casting with longitude as the scan axis.

    Vertices are joined in the order given (last back to first) and are not
    reordered, so a bow-tie ordering of a square describes a different shape
    than its perimeter ordering.
    """
    p = coords(point, context=context)
    _, vertices = _resolve_all(polygon, context)

    inside = False
    j = len(vertices) - 1
    for i, vi in enumerate(vertices):
        vj = vertices[j]
        spans = (vi.longitude <= p.longitude < vj.longitude) or (vj.longitude <= p.longitude < vi.longitude)
        if spans and p.latitude < (
            (vj.latitude - vi.latitude) * (p.longitude - vi.longitude) / (vj.longitude - vi.longitude)
            + vi.latitude
        ):
            inside = not inside
        j = i
    return inside


def point_in_circle(point, center, radius: float, context: GeodesyContext | None = None) -> bool:
    """True if ``point`` is strictly closer than ``radius`` metres to ``center``.

    A pair Vincenty cannot measure is reported as outside.
    """
    result = vincenty_inverse(point, center, context=context)
    return result.or_nan() < radius


def order_by_distance(reference, points, context: GeodesyContext | None = None) -> list[OrderedPoint]:
    """Members of ``points`` sorted by Vincenty distance to ``reference``.

    The sort is stable: equally distant members keep their collection order.
    Members Vincenty cannot measure get a NaN distance and come last.
    """
    ref = coords(reference, context=context)
    keys, resolved = _resolve_all(points, context)

    distances = [vincenty_inverse(ref, p, context=context).or_nan() for p in resolved]
    order = np.argsort(np.asarray(distances, dtype=float), kind="stable")
    logger.debug("ordered %d points by distance", len(order))

    return [OrderedPoint(keys[i], resolved[i], distances[i]) for i in order]


def find_nearest(
    reference,
    points,
    offset: int = 0,
    limit: int = 1,
    context: GeodesyContext | None = None,
) -> OrderedPoint | list[OrderedPoint] | None:
    """Nearest member(s) of ``points`` to ``reference``.

    With ``limit == 1`` the ``offset``-th nearest member is returned on its
    own (None if there is none); otherwise the slice
    ``[offset, offset + limit)`` of the ordering.
    """
    offset = offset or 0
    limit = limit or 1
    ordered = order_by_distance(reference, points, context)

    if limit == 1:
        return ordered[offset] if 0 <= offset < len(ordered) else None
    return ordered[offset:offset + limit]


def path_length(points, context: GeodesyContext | None = None) -> float:
    """Sum of Vincenty distances between consecutive points, in given order.

    Raises:
        NonConvergentError: If any leg cannot be measured.
    """
    _, resolved = _resolve_all(points, context)
    total = Meter(0)
    for previous, current in zip(resolved, resolved[1:]):
        total += Meter(vincenty_inverse(previous, current, context=context).unwrap())
    return float(total)


def _timestamp(point) -> Second:
    try:
        value = point["time"]
    except (KeyError, TypeError, IndexError):
        raise InvalidFormat(f"point has no 'time': {point!r}") from None

    if isinstance(value, datetime):
        return Second(value.timestamp())
    return Millisecond(float(value)).as_unit(Second)


def speed(start, end, unit: str = "km", context: GeodesyContext | None = None) -> float:
    """Average speed between two timed points, per hour, in ``unit``.

    Each point carries a ``time`` key: a millisecond timestamp or a datetime.
    ``"kmh"`` and ``"mph"`` are accepted for ``"km"`` and ``"mi"``.

    Raises:
        UnknownUnit: For an unknown unit.
        ValueError: If both points carry the same time.
        NonConvergentError: If the distance cannot be measured.
    """
    unit_type = distance_unit(SPEED_UNIT_ALIASES.get(unit, unit))

    elapsed = float(_timestamp(end)) - float(_timestamp(start))
    if elapsed == 0:
        raise ValueError("start and end were recorded at the same time")

    distance = vincenty_inverse(start, end, context=context).unwrap()
    meters_per_hour = distance / elapsed * Hour.SCALE_TO_SI
    return round_half_up(Meter(meters_per_hour).to(unit_type), 4)


def distance_from_line(point, start, end, context: GeodesyContext | None = None) -> float:
    """Shortest distance in metres from ``point`` to the segment ``start``-``end``.

    Solved as a plane triangle on millimetre Vincenty distances: when the
    foot of the perpendicular falls outside the segment, the distance to the
    nearer endpoint is returned.

    Raises:
        NonConvergentError: If any of the three sides cannot be measured.
    """
    d1 = vincenty_inverse(start, point, precision=3, context=context).unwrap()
    d2 = vincenty_inverse(point, end, precision=3, context=context).unwrap()
    d3 = vincenty_inverse(start, end, precision=3, context=context).unwrap()

    if d1 == 0 or d2 == 0:
        return 0.0
    if d3 == 0:
        return d1

    alpha = acos(clamp((d1 * d1 + d3 * d3 - d2 * d2) / (2 * d1 * d3), -1.0, 1.0))
    beta = acos(clamp((d2 * d2 + d3 * d3 - d1 * d1) / (2 * d2 * d3), -1.0, 1.0))
    if alpha > pi / 2:
        return d1
    if beta > pi / 2:
        return d2
    return sin(alpha) * d1


def is_point_in_line(point, start, end, tolerance: float = 0.002, context: GeodesyContext | None = None) -> bool:
    """True if ``point`` lies on the geodesic segment ``start``-``end``.

    The detour through ``point`` may exceed the direct length by at most
    ``tolerance`` metres, which absorbs the millimetre rounding of each leg.
    """
    d1 = vincenty_inverse(start, point, precision=3, context=context).unwrap()
    d2 = vincenty_inverse(point, end, precision=3, context=context).unwrap()
    d3 = vincenty_inverse(start, end, precision=3, context=context).unwrap()
    return abs(d1 + d2 - d3) <= tolerance


def is_point_near_line(point, start, end, distance: float, context: GeodesyContext | None = None) -> bool:
    """True if ``point`` is strictly closer than ``distance`` metres to the segment."""
    return distance_from_line(point, start, end, context) < distance
