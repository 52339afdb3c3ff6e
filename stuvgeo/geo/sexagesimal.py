"""Decimal <-> sexagesimal coordinate conversion.

Station data mixes plain decimal degrees with hand-typed strings such as
``40° 40' 33.72" N``. This module recognises both notations and turns either
into decimal degrees.

Hemisphere letters: ``S`` and ``W`` negate the value. ``N``, ``E`` and ``O``
(the French "ouest" the early data files used) do not.

Conversions are memoised only when a ``GeodesyContext`` is passed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from math import floor, isfinite

import numpy as np

from ..context import GeodesyContext
from ..errors import UnknownFormat

logger = logging.getLogger(__name__)

SEXAGESIMAL_PATTERN = re.compile(
    r"(?P<degrees>\d{1,3})°\s*"
    r"(?P<minutes>\d{1,3}(?:\.\d{1,2})?)'\s*"
    r"(?:(?P<seconds>\d{1,3}(?:\.\d{1,2})?)\"\s*)?"
    r"(?P<hemisphere>[NEOSW]?)"
)

_NEGATIVE_HEMISPHERES = ("S", "W")
_HEMISPHERES = {"lat": ("N", "S"), "lng": ("E", "W")}


def is_decimal(value) -> bool:
    """True if ``value`` reads completely as a finite floating-point number."""
    if value is None or isinstance(value, bool):
        return False
    text = str(value).strip()
    if "_" in text:
        return False
    try:
        number = float(text)
    except ValueError:
        return False
    return isfinite(number)


def is_sexagesimal(value) -> bool:
    """True if ``value`` is a string like ``51° 28' 37.20" N``."""
    if not isinstance(value, str):
        return False
    return SEXAGESIMAL_PATTERN.fullmatch(value) is not None


def to_decimal(value, context: GeodesyContext | None = None) -> float:
    """Convert a decimal or sexagesimal coordinate to decimal degrees.

    Sexagesimal values are summed as ``deg + min/60 + sec/3600`` and rounded
    to 8 decimals.

    Raises:
        UnknownFormat: If ``value`` is in neither notation.
    """
    if is_decimal(value):
        return float(str(value).strip())

    if not is_sexagesimal(value):
        raise UnknownFormat(value)

    if context is not None and value in context.decimal_cache:
        logger.debug("decimal cache hit for %r", value)
        return context.decimal_cache[value]

    match = SEXAGESIMAL_PATTERN.fullmatch(value)
    degrees = float(match["degrees"])
    minutes = float(match["minutes"]) / 60
    seconds = float(match["seconds"]) / 3600 if match["seconds"] else 0.0

    decimal = round(degrees + minutes + seconds, 8)
    if match["hemisphere"] in _NEGATIVE_HEMISPHERES:
        decimal = -decimal

    if context is not None:
        context.decimal_cache[value] = decimal
    return decimal


def _fraction(number: float) -> float:
    # Read the fractional digits from the shortest repr, not by subtraction,
    # so 40.3 gives 0.3 rather than 0.29999999999999716.
    digits = np.format_float_positional(number, trim="-").partition(".")[2]
    return float(f"0.{digits or 0}")


def to_sexagesimal(
    value: float,
    axis: str | None = None,
    context: GeodesyContext | None = None,
) -> str:
    """Format decimal degrees as ``D° M' S.SS"``.

    Without ``axis`` the sign is dropped, so a negative coordinate cannot be
    parsed back. Pass ``axis="lat"`` or ``axis="lng"`` to append the
    hemisphere letter (``N``/``S`` or ``E``/``W``) instead.

    Example:
        >>> to_sexagesimal(51.477)
        '51° 28\\' 37.20"'
        >>> to_sexagesimal(-7.92, axis="lng")
        '7° 55\\' 12.00" W'
    """
    if axis is not None and axis not in _HEMISPHERES:
        raise ValueError(f"axis must be 'lat' or 'lng', got {axis!r}")

    value = float(value)
    key = (value, axis)
    if context is not None and key in context.sexagesimal_cache:
        logger.debug("sexagesimal cache hit for %r", value)
        return context.sexagesimal_cache[key]

    magnitude = abs(value)
    degrees = int(magnitude)
    minutes = _fraction(magnitude) * 60
    seconds = _fraction(minutes) * 60
    minutes = floor(minutes)

    # Carry a rounded 60.00" into the minutes, and 60' into the degrees.
    if round(seconds, 2) >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    text = f"{degrees}° {minutes}' {seconds:.2f}\""
    if axis is not None:
        positive, negative = _HEMISPHERES[axis]
        text = f"{text} {negative if value < 0 else positive}"

    if context is not None:
        context.sexagesimal_cache[key] = text
    return text


def _is_nested(value) -> bool:
    return isinstance(value, Sequence | np.ndarray) and not isinstance(value, str | bytes)


def use_decimal(value, context: GeodesyContext | None = None):
    """Normalise coordinates to decimal degrees, whatever their container.

    - scalars go through ``to_decimal``;
    - mappings that form a valid point become a ``GeoPoint``, other mappings
      are normalised value by value;
    - sequences are normalised item by item. A nested ``[lng, lat]`` or
      ``[lng, lat, elevation]`` position becomes a ``GeoPoint``, other nested
      sequences are normalised in turn, and items that are neither
      coordinates nor points are kept as they are.

    Raises:
        UnknownFormat: For a scalar (or a mapping value) in neither notation.
    """
    from .geo_point import GeoPoint, coords, validate

    if isinstance(value, GeoPoint):
        return value

    if isinstance(value, Mapping):
        if validate(value):
            return coords(value, context=context)
        return {key: use_decimal(item, context) for key, item in value.items()}

    if _is_nested(value):
        normalised = []
        for item in value:
            if is_decimal(item) or is_sexagesimal(item) or isinstance(item, Mapping):
                normalised.append(use_decimal(item, context))
            elif _is_nested(item):
                # A nested [lng, lat(, elevation)] position becomes a point.
                if validate(item, context):
                    normalised.append(coords(item, context=context))
                else:
                    normalised.append(use_decimal(item, context))
            else:
                normalised.append(item)
        return normalised

    return to_decimal(value, context)
