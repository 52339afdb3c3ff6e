"""Caller-owned memoisation and "last distance" state.

Nothing in stuvgeo keeps global state. Callers that want the sexagesimal
conversions memoised, or want ``convert_unit`` to fall back on the most
recently computed distance, create a ``GeodesyContext`` and pass it along::

    >>> ctx = GeodesyContext()
    >>> distance_vincenty(stop_a, stop_b, context=ctx)
    1284.0
    >>> convert_unit("km", context=ctx)
    1.284

A context is a plain mutable object; share one across threads only behind
your own lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GeodesyContext:
    """Memo caches and the last computed distance.

    Attributes:
        decimal_cache: Sexagesimal string -> decimal degrees.
        sexagesimal_cache: Decimal degrees -> formatted sexagesimal string.
        last_distance: Last distance (metres) computed with this context,
            or ``None`` before the first one.
    """

    decimal_cache: dict[str, float] = field(default_factory=dict)
    sexagesimal_cache: dict[tuple[float, str | None], str] = field(default_factory=dict)
    last_distance: float | None = None

    def clear(self) -> None:
        """Drop both caches and forget the last distance."""
        self.decimal_cache.clear()
        self.sexagesimal_cache.clear()
        self.last_distance = None
