"""Distances between points: spherical, Vincenty and pyproj geodesics.

``distance_vincenty`` is the distance the station screens show. It solves the
Vincenty inverse problem on WGS-84, iterating on the longitude difference
on the auxiliary sphere until two successive values agree to 1e-12 rad, for
at most 100 rounds.

Results are buckets of ``accuracy`` metres: the raw ellipsoidal length is
rounded to the millimetre, combined with the elevation difference when both
points carry one, then snapped to the nearest ``accuracy`` multiple.

Two edge cases are values, not exceptions:

    - coincident points give 0;
    - a nearly antipodal pair may not converge. ``vincenty_inverse`` then
      returns ``NonConvergent``; ``distance_vincenty`` turns that into NaN.
      ``distance_geodesic`` (Karney's algorithm through pyproj) always
      converges and is the fallback for such pairs.

Example:
    >>> distance_vincenty({"lat": 0, "lng": 0}, {"lat": 0, "lng": 1})
    111319.0
    >>> convert_unit("km", 111319)
    111.319
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import acos, atan, atan2, cos, floor, isnan, nan, sin, sqrt, tan

from pyproj import Geod

from ..config import (
    DEFAULT_DECIMALS,
    DISTANCE_PRECISION,
    EARTH_RADIUS,
    VINCENTY_MAX_ITERATIONS,
    VINCENTY_TOLERANCE,
    WGS84_A,
    WGS84_B,
    WGS84_F,
)
from ..context import GeodesyContext
from ..errors import NonConvergentError
from ..unit import Meter, distance_unit
from ..utils import clamp, round_half_up
from .geo_point import GeoPoint, coords

logger = logging.getLogger(__name__)

_WGS84 = Geod(ellps="WGS84")


@dataclass(frozen=True)
class Converged:
    """Vincenty result: the distance in metres."""

    meters: float

    def unwrap(self) -> float:
        return self.meters

    def or_nan(self) -> float:
        return self.meters


@dataclass(frozen=True)
class NonConvergent:
    """Vincenty result: the iteration gave up after ``iterations`` rounds."""

    iterations: int

    def unwrap(self) -> float:
        raise NonConvergentError(f"Vincenty formula failed to converge after {self.iterations} iterations")

    def or_nan(self) -> float:
        return nan


GeodesicResult = Converged | NonConvergent


def _accuracy(accuracy) -> int:
    # Sub-metre or missing accuracy means whole metres.
    return max(floor(accuracy or 1), 1)


def _bucket(distance: float, accuracy: int, precision: int) -> float:
    if precision == 0:
        return floor(round_half_up(distance / accuracy) * accuracy)
    scale = 10 ** precision
    return round_half_up(distance * scale / accuracy) * accuracy / scale


def _ellipsoidal_arc(start: GeoPoint, end: GeoPoint) -> float | None:
    """Raw Vincenty inverse length in metres, or None if it does not converge."""
    a, b, f = WGS84_A, WGS84_B, WGS84_F

    L = end.lng_rad - start.lng_rad
    U1 = atan((1 - f) * tan(start.lat_rad))
    U2 = atan((1 - f) * tan(end.lat_rad))
    sinU1, cosU1 = sin(U1), cos(U1)
    sinU2, cosU2 = sin(U2), cos(U2)

    lam = L
    for _ in range(VINCENTY_MAX_ITERATIONS):
        sin_lam, cos_lam = sin(lam), cos(lam)
        sin_sigma = sqrt(
            (cosU2 * sin_lam) ** 2
            + (cosU1 * sinU2 - sinU1 * cosU2 * cos_lam) ** 2
        )
        if sin_sigma == 0:
            return 0.0  # coincident points

        cos_sigma = sinU1 * sinU2 + cosU1 * cosU2 * cos_lam
        sigma = atan2(sin_sigma, cos_sigma)
        sin_alpha = cosU1 * cosU2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha * sin_alpha
        if cos_sq_alpha != 0:
            cos_2sigma_m = cos_sigma - 2 * sinU1 * sinU2 / cos_sq_alpha
        else:
            cos_2sigma_m = 0.0  # equatorial line
        C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))

        lam_prev = lam
        lam = L + (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
        )
        if abs(lam - lam_prev) <= VINCENTY_TOLERANCE:
            break
    else:
        return None

    u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m
        + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            - B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )
    return b * A * (sigma - delta_sigma)


def _with_climb(distance: float, start: GeoPoint, end: GeoPoint) -> float:
    # Elevation is a third orthogonal axis, not a correction to the path.
    if start.elevation is None or end.elevation is None:
        return distance
    climb = abs(start.elevation - end.elevation)
    return sqrt(distance * distance + climb * climb)


def vincenty_inverse(
    start,
    end,
    accuracy: float = 1,
    precision: int = 0,
    context: GeodesyContext | None = None,
) -> GeodesicResult:
    """Solve the Vincenty inverse problem between two points.

    Args:
        start, end: Any supported point shape.
        accuracy: Bucket size in whole metres (values below 1 mean 1).
        precision: Decimal places kept after bucketing. With the default 0
            the result is floored to whole metres; the line helpers use 3.
        context: Records the distance as ``last_distance`` on success.

    Returns:
        ``Converged(meters)`` or ``NonConvergent(iterations)``.

    Raises:
        InvalidFormat: If either point cannot be resolved.
    """
    s = coords(start, context=context)
    e = coords(end, context=context)

    arc = _ellipsoidal_arc(s, e)
    if arc is None:
        logger.warning("Vincenty did not converge between %s and %s", s, e)
        return NonConvergent(VINCENTY_MAX_ITERATIONS)

    if arc == 0:
        distance = 0.0
    else:
        distance = _with_climb(round_half_up(arc, DISTANCE_PRECISION), s, e)
        distance = float(_bucket(distance, _accuracy(accuracy), precision))

    if context is not None:
        context.last_distance = distance
    return Converged(distance)


def distance_vincenty(
    start,
    end,
    accuracy: float = 1,
    precision: int = 0,
    context: GeodesyContext | None = None,
) -> float:
    """Vincenty distance in metres; NaN if the iteration did not converge.

    Prefer ``vincenty_inverse`` when a NaN could end up summed or averaged.
    """
    return vincenty_inverse(start, end, accuracy, precision, context).or_nan()


def distance_haversine_like(start, end, accuracy: float = 1, context: GeodesyContext | None = None) -> float:
    """Spherical distance in metres by the spherical law of cosines.

    Cheaper than Vincenty and good to a few tenths of a percent. The sphere
    radius is the WGS-84 equatorial radius.
    """
    s = coords(start, context=context)
    e = coords(end, context=context)

    cos_angle = (
        sin(e.lat_rad) * sin(s.lat_rad)
        + cos(e.lat_rad) * cos(s.lat_rad) * cos(s.lng_rad - e.lng_rad)
    )
    distance = round_half_up(acos(clamp(cos_angle, -1.0, 1.0)) * EARTH_RADIUS)
    accuracy = _accuracy(accuracy)
    return floor(round_half_up(distance / accuracy) * accuracy)


def distance_geodesic(start, end, context: GeodesyContext | None = None) -> float:
    """Ellipsoidal distance in metres by Karney's method (pyproj).

    Unlike Vincenty this converges for every pair, antipodes included.
    Elevation is combined the same way as in ``vincenty_inverse``.
    """
    s = coords(start, context=context)
    e = coords(end, context=context)
    _, _, arc = _WGS84.inv(s.longitude, s.latitude, e.longitude, e.latitude)
    return round_half_up(_with_climb(round_half_up(arc, DISTANCE_PRECISION), s, e), DISTANCE_PRECISION)


def compute_destination_point(start, distance: float, bearing: float, context: GeodesyContext | None = None) -> GeoPoint:
    """Point reached from ``start`` after ``distance`` metres on ``bearing`` degrees.

    Solved on the WGS-84 ellipsoid; the start elevation is carried over.

    Example:
        >>> compute_destination_point({"lat": 0, "lng": 0}, 111319.49, 90)
        GeoPoint(latitude=0.0, longitude=1.0000000..., elevation=None)
    """
    s = coords(start, context=context)
    lon, lat, _ = _WGS84.fwd(s.longitude, s.latitude, bearing, float(distance))
    return GeoPoint(lat, lon, s.elevation)


def convert_unit(
    unit: str,
    distance: float | None = None,
    decimals: int | None = DEFAULT_DECIMALS,
    context: GeodesyContext | None = None,
) -> float:
    """Convert a distance in metres into ``unit``.

    Args:
        unit: One of ``m, km, cm, mm, mi, sm, ft, in, yd``.
        distance: Metres. When omitted, the context's last computed distance
            is used (0 if nothing was computed yet).
        decimals: Decimal places of the result; None means the default 4.
        context: Source of the last computed distance.

    Raises:
        UnknownUnit: If ``unit`` is not a known distance unit.
        ValueError: If ``distance`` is omitted and no context is given.
    """
    unit_type = distance_unit(unit)

    if distance is None:
        if context is None:
            raise ValueError("convert_unit needs a distance or a GeodesyContext")
        distance = context.last_distance or 0

    if isnan(distance):
        return nan
    return round_half_up(
        Meter(distance).to(unit_type),
        DEFAULT_DECIMALS if decimals is None else decimals,
    )
