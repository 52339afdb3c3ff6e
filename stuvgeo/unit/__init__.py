"""Measurement units for distances, angles and elapsed time.

Units are SI-backed floats grouped in families; conversion is only possible
inside a family:

    - Length family: Meter (root), Kilometer, Centimeter, Millimeter, Mile,
      NauticalMile, Foot, Inch, Yard
    - Angle family: Radian (root), Degree
    - Time family: Second (root), Millisecond, Minute, Hour

Example:
    >>> from stuvgeo.unit import Meter, Kilometer, distance_unit
    >>> Meter(2500).to(Kilometer)
    2.5
    >>> Meter(2500).to(distance_unit("yd"))
    2734.033245844269
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import (
    DISTANCE_UNITS,
    Centimeter,
    Foot,
    Inch,
    Kilometer,
    Length,
    Meter,
    Mile,
    Millimeter,
    NauticalMile,
    Yard,
    distance_unit,
)
from .unit_float import UnitFloat
from .unit_time import Hour, Millisecond, Minute, Second, Time

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Centimeter",
    "Millimeter",
    "Mile",
    "NauticalMile",
    "Foot",
    "Inch",
    "Yard",
    "Length",
    "DISTANCE_UNITS",
    "distance_unit",
    # Time units
    "Second",
    "Millisecond",
    "Minute",
    "Hour",
    "Time",
]
