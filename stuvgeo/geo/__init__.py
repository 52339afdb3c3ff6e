"""Geodesy for the STUV bus network screens.

Components (leaves first):
    geo_point: GeoPoint and the coordinate view over mappings/sequences
    sexagesimal: decimal <-> degree/minute/second conversion
    distance: spherical, Vincenty and pyproj distances, unit conversion
    bearing: rhumb-line and great-circle bearings, compass directions
    spatial: bounds, centre, polygon/circle tests, nearest stations,
        path length, speed, segment proximity

Typical Usage:
    >>> from stuvgeo.geo import find_nearest, distance_vincenty
    >>> stops = [{"latitude": 40.676032, "longitude": -7.923519},
    ...          {"latitude": 40.681565, "longitude": -7.927381}]
    >>> find_nearest({"lat": 40.68, "lng": -7.926}, stops).key
    1
"""

from .bearing import (
    CompassDirection,
    bearing_great_circle,
    bearing_rhumb,
    compass_direction,
)
from .distance import (
    Converged,
    GeodesicResult,
    NonConvergent,
    compute_destination_point,
    convert_unit,
    distance_geodesic,
    distance_haversine_like,
    distance_vincenty,
    vincenty_inverse,
)
from .geo_point import (
    GeoPoint,
    PointKeys,
    PointLike,
    coords,
    detect_keys,
    elevation,
    latitude,
    longitude,
    validate,
)
from .sexagesimal import (
    is_decimal,
    is_sexagesimal,
    to_decimal,
    to_sexagesimal,
    use_decimal,
)
from .spatial import (
    Bounds,
    Center,
    OrderedPoint,
    bounds,
    bounds_of_distance,
    center,
    distance_from_line,
    find_nearest,
    is_point_in_line,
    is_point_near_line,
    order_by_distance,
    path_length,
    point_in_circle,
    point_in_polygon,
    speed,
)

__all__ = [
    # geo_point
    "GeoPoint",
    "PointKeys",
    "PointLike",
    "coords",
    "detect_keys",
    "validate",
    "latitude",
    "longitude",
    "elevation",
    # sexagesimal
    "is_decimal",
    "is_sexagesimal",
    "to_decimal",
    "to_sexagesimal",
    "use_decimal",
    # distance
    "Converged",
    "NonConvergent",
    "GeodesicResult",
    "vincenty_inverse",
    "distance_vincenty",
    "distance_haversine_like",
    "distance_geodesic",
    "compute_destination_point",
    "convert_unit",
    # bearing
    "CompassDirection",
    "bearing_rhumb",
    "bearing_great_circle",
    "compass_direction",
    # spatial
    "Bounds",
    "Center",
    "OrderedPoint",
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
