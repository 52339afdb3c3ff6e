"""stuvgeo - coordinate and distance engine behind the STUV bus app.

The schedule screens hand this package a device position and a list of
stations; it answers with distances, bearings, nearest stops and the like.
Everything is a pure function of its arguments. Optional memoisation and the
"last computed distance" convenience live in a caller-owned
``GeodesyContext``.

Packages:
    stuvgeo.geo: points, coordinate formats, distances, bearings, queries
    stuvgeo.unit: SI-backed distance, angle and time units

Example:
    >>> import stuvgeo
    >>> ctx = stuvgeo.GeodesyContext()
    >>> stuvgeo.distance_vincenty({"lat": 0, "lng": 0}, {"lat": 0, "lng": 1}, context=ctx)
    111319.0
    >>> stuvgeo.convert_unit("mi", context=ctx)
    69.1704
"""

from .context import GeodesyContext
from .errors import (
    GeodesyError,
    InvalidFormat,
    NonConvergentError,
    UnknownFormat,
    UnknownUnit,
)
from .geo import (
    Bounds,
    Center,
    CompassDirection,
    Converged,
    GeoPoint,
    NonConvergent,
    OrderedPoint,
    bearing_great_circle,
    bearing_rhumb,
    bounds,
    bounds_of_distance,
    center,
    compass_direction,
    compute_destination_point,
    convert_unit,
    coords,
    detect_keys,
    distance_from_line,
    distance_geodesic,
    distance_haversine_like,
    distance_vincenty,
    find_nearest,
    is_decimal,
    is_point_in_line,
    is_point_near_line,
    is_sexagesimal,
    order_by_distance,
    path_length,
    point_in_circle,
    point_in_polygon,
    speed,
    to_decimal,
    to_sexagesimal,
    use_decimal,
    validate,
    vincenty_inverse,
)

__version__ = "0.1.0"

__all__ = [
    "GeodesyContext",
    # Errors
    "GeodesyError",
    "InvalidFormat",
    "UnknownFormat",
    "UnknownUnit",
    "NonConvergentError",
    # Types
    "GeoPoint",
    "Bounds",
    "Center",
    "OrderedPoint",
    "CompassDirection",
    "Converged",
    "NonConvergent",
    # Coordinates
    "coords",
    "detect_keys",
    "validate",
    "is_decimal",
    "is_sexagesimal",
    "to_decimal",
    "to_sexagesimal",
    "use_decimal",
    # Distances and bearings
    "vincenty_inverse",
    "distance_vincenty",
    "distance_haversine_like",
    "distance_geodesic",
    "compute_destination_point",
    "convert_unit",
    "bearing_rhumb",
    "bearing_great_circle",
    "compass_direction",
    # Queries
    "bounds",
    "center",
    "bounds_of_distance",
    "point_in_polygon",
    "point_in_circle",
    "order_by_distance",
    "find_nearest",
    "path_length",
    "speed",
    "distance_from_line",
    "is_point_in_line",
    "is_point_near_line",
]
