"""Angular units.

Angles are stored in radians. ``float(Degree(x))`` is therefore the quickest
way to get radians out of a decimal-degree coordinate, which is how the
geodesy modules feed their trigonometry.

Example:
    >>> float(Degree(180)) == pi
    True
    >>> Radian(pi / 2).to(Degree)
    90.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian, root of the angle family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree (pi/180 rad)."""

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
