"""Time units used to turn point timestamps into elapsed time.

Device positions arrive with JavaScript-style millisecond timestamps, so
``Millisecond`` is the usual entry point and ``Hour`` the usual exit.

Example:
    >>> Millisecond(90_000).to(Minute)
    1.5
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: second, root of the time family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Millisecond(Second):
    SCALE_TO_SI = 0.001
    SYMBOL = "ms"


class Minute(Second):
    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    SCALE_TO_SI = 3600.0
    SYMBOL = "h"


Time = Second | Millisecond | Minute | Hour
