"""Geographic points and the coordinate view over heterogeneous inputs.

Points reach the library in whatever shape the caller has at hand:

    - a mapping with aliased keys: ``{"lat": .., "lng": ..}``,
      ``{"latitude": .., "lon": ..}``, ``{"lat": .., "longitude": .., "alt": ..}``
    - a GeoJSON-ordered sequence: ``[lng, lat]`` or ``[lng, lat, elevation]``
    - a ``GeoPoint`` (passed through untouched)

Coordinate values themselves may be numbers, decimal strings or sexagesimal
strings. ``coords`` resolves the keys, converts the values to decimal degrees,
checks the ranges and returns a ``GeoPoint``.

Example:
    >>> coords({"latitude": 40.681565, "longitude": -7.927381})
    GeoPoint(latitude=40.681565, longitude=-7.927381, elevation=None)
    >>> coords([-7.927381, "40° 40' 53.63\\" N"])
    GeoPoint(latitude=40.68156389, longitude=-7.927381, elevation=None)
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import NamedTuple, Union

import numpy as np

from ..config import MAX_LAT, MAX_LON, MIN_LAT, MIN_LON
from ..context import GeodesyContext
from ..errors import InvalidFormat, UnknownFormat
from ..unit import Degree, Radian
from .sexagesimal import to_decimal

LATITUDE_KEYS = ("lat", "latitude")
LONGITUDE_KEYS = ("lng", "lon", "longitude")
ELEVATION_KEYS = ("alt", "altitude", "elevation", "elev")


@dataclass(frozen=True)
class GeoPoint:
    """A point on the WGS-84 ellipsoid in decimal degrees.

    Attributes:
        latitude (float): -90 (south pole) to +90 (north pole).
        longitude (float): -180 to +180, negative west of Greenwich.
        elevation (float | None): Metres, when known.
    """

    latitude: float
    longitude: float
    elevation: float | None = None

    @classmethod
    def from_rad(cls, lat: float, lon: float, elevation: float | None = None) -> GeoPoint:
        """Create a GeoPoint from radian coordinates."""
        return cls(Radian(lat).to(Degree), Radian(lon).to(Degree), elevation)

    @property
    def lat_rad(self) -> float:
        return float(Degree(self.latitude))

    @property
    def lng_rad(self) -> float:
        return float(Degree(self.longitude))

    def to_geojson(self) -> list[float]:
        """``[lng, lat]`` or ``[lng, lat, elevation]``."""
        position = [self.longitude, self.latitude]
        if self.elevation is not None:
            position.append(self.elevation)
        return position


PointLike = Union[GeoPoint, Mapping, Sequence, np.ndarray]


class PointKeys(NamedTuple):
    """Where each axis lives inside a point: mapping keys or sequence indices."""

    latitude: Hashable | None
    longitude: Hashable | None
    elevation: Hashable | None


def _is_position(point) -> bool:
    if isinstance(point, np.ndarray):
        return point.ndim == 1
    return isinstance(point, Sequence) and not isinstance(point, str | bytes)


def _first_key(point: Mapping, aliases: tuple[str, ...]) -> str | None:
    for alias in aliases:
        if alias in point:
            return alias
    return None


def detect_keys(point) -> PointKeys | None:
    """Find the latitude/longitude/elevation keys of ``point``.

    Mappings are probed against the alias lists in priority order. Sequences
    of two or three items follow GeoJSON: ``[lng, lat, elevation?]``.

    Returns:
        PointKeys, or None when no axis at all can be identified.
    """
    if isinstance(point, GeoPoint):
        return PointKeys("latitude", "longitude", "elevation" if point.elevation is not None else None)

    if _is_position(point):
        if len(point) not in (2, 3):
            return None
        return PointKeys(1, 0, 2 if len(point) == 3 else None)

    if not isinstance(point, Mapping):
        return None

    keys = PointKeys(
        _first_key(point, LATITUDE_KEYS),
        _first_key(point, LONGITUDE_KEYS),
        _first_key(point, ELEVATION_KEYS),
    )
    if keys == (None, None, None):
        return None
    return keys


def _in_range(latitude: float, longitude: float) -> bool:
    return MIN_LAT <= latitude <= MAX_LAT and MIN_LON <= longitude <= MAX_LON


def _elevation_value(point, keys: PointKeys | None) -> float | None:
    if keys is None or keys.elevation is None:
        return None
    value = point[keys.elevation]
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidFormat(f"elevation {value!r} is not a number") from None


def _decimal_axes(point, keys: PointKeys, context: GeodesyContext | None) -> tuple[float, float]:
    try:
        latitude = to_decimal(point[keys.latitude], context)
        longitude = to_decimal(point[keys.longitude], context)
    except UnknownFormat as exc:
        raise InvalidFormat(f"cannot read coordinates of {point!r}: {exc}") from exc

    if not _in_range(latitude, longitude):
        raise InvalidFormat(f"coordinates out of range: ({latitude}, {longitude})")
    return latitude, longitude


def coords(point, raw: bool = False, context: GeodesyContext | None = None) -> GeoPoint:
    """Resolve ``point`` into a ``GeoPoint``.

    Args:
        point: Any supported point shape.
        raw: Skip decimal conversion and range checks; the resulting GeoPoint
            carries the values exactly as found.
        context: Optional memo for sexagesimal conversions.

    Raises:
        InvalidFormat: No latitude/longitude keys, unreadable values, or values
            outside [-90, 90] / [-180, 180].
    """
    if isinstance(point, GeoPoint):
        return point

    keys = detect_keys(point)
    if keys is None or keys.latitude is None or keys.longitude is None:
        raise InvalidFormat(f"no latitude/longitude found in {point!r}")

    if raw:
        elevation = point[keys.elevation] if keys.elevation is not None else None
        return GeoPoint(point[keys.latitude], point[keys.longitude], elevation)

    latitude, longitude = _decimal_axes(point, keys, context)
    return GeoPoint(latitude, longitude, _elevation_value(point, keys))


def validate(point, context: GeodesyContext | None = None) -> bool:
    """True if ``point`` has a readable, in-range latitude and longitude."""
    if isinstance(point, GeoPoint):
        return _in_range(point.latitude, point.longitude)

    keys = detect_keys(point)
    if keys is None or keys.latitude is None or keys.longitude is None:
        return False
    try:
        _decimal_axes(point, keys, context)
    except InvalidFormat:
        return False
    return True


def latitude(point, context: GeodesyContext | None = None) -> float:
    return coords(point, context=context).latitude


def longitude(point, context: GeodesyContext | None = None) -> float:
    return coords(point, context=context).longitude


def elevation(point) -> float | None:
    """Elevation of ``point`` in metres, or None if it carries none."""
    if isinstance(point, GeoPoint):
        return point.elevation
    return _elevation_value(point, detect_keys(point))
