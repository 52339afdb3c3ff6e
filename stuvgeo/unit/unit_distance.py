"""Distance units and the symbol table used by unit conversion.

All distances are stored in metres. The symbol of every class doubles as its
key in ``DISTANCE_UNITS``, the table ``convert_unit`` and ``speed`` look up.

The nautical mile factor (1852.216 m) is the value the station screens have
always displayed with, not the international 1852 m.

Example:
    >>> Meter(1500).to(Kilometer)
    1.5
    >>> distance_unit("ft") is Foot
    True
"""

from __future__ import annotations

from ..errors import UnknownUnit
from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: metre, root of the length family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Centimeter(Meter):
    SCALE_TO_SI = 0.01
    SYMBOL = "cm"


class Millimeter(Meter):
    SCALE_TO_SI = 0.001
    SYMBOL = "mm"


class Mile(Meter):
    """Statute mile."""

    SCALE_TO_SI = 1609.344
    SYMBOL = "mi"


class NauticalMile(Meter):
    """Nautical ("sea") mile."""

    SCALE_TO_SI = 1852.216
    SYMBOL = "sm"


class Foot(Meter):
    SCALE_TO_SI = 0.3048
    SYMBOL = "ft"


class Inch(Meter):
    SCALE_TO_SI = 0.0254
    SYMBOL = "in"


class Yard(Meter):
    SCALE_TO_SI = 0.9144
    SYMBOL = "yd"


Length = Meter | Kilometer | Centimeter | Millimeter | Mile | NauticalMile | Foot | Inch | Yard

DISTANCE_UNITS: dict[str, type[Meter]] = {
    unit.SYMBOL: unit
    for unit in (Meter, Kilometer, Centimeter, Millimeter, Mile, NauticalMile, Foot, Inch, Yard)
}


def distance_unit(symbol: str) -> type[Meter]:
    """Look up a distance unit class by its symbol.

    Raises:
        UnknownUnit: If ``symbol`` is not one of ``DISTANCE_UNITS``.
    """
    try:
        return DISTANCE_UNITS[symbol]
    except (KeyError, TypeError):
        raise UnknownUnit(symbol) from None
