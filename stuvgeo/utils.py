"""Small numeric helpers shared by the geodesy modules."""

from math import floor, isfinite, pi


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves towards +inf, the way the station UI has always rounded.

    Python's ``round`` rounds halves to even, which would move bucketed
    distances by one unit on exact ties.
    """
    if not isfinite(value):
        return value
    scale = 10 ** ndigits
    return floor(value * scale + 0.5) / scale


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def wrap_to_pi(rad: float) -> float:
    """Transform an angle in radians to the range (-pi, pi]."""
    if abs(rad) > pi:
        if rad > 0:
            rad = (2 * pi - rad) * -1
        else:
            rad = 2 * pi + rad
    return rad


def wrap_to_360(deg: float) -> float:
    """Transform an angle in degrees to the range [0, 360)."""
    return (deg + 360) % 360
