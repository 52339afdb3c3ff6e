"""Exceptions raised by the geodesy core.

Format and unit problems point at bad data upstream and are raised straight
to the caller. Vincenty non-convergence is not an exception: it comes back
as a ``NonConvergent`` value and only turns into ``NonConvergentError`` when
a caller explicitly unwraps it.
"""


class GeodesyError(Exception):
    """Base class for all errors raised by stuvgeo."""


class InvalidFormat(GeodesyError, ValueError):
    """A point cannot be resolved to a latitude and a longitude."""


class UnknownFormat(GeodesyError, ValueError):
    """A scalar coordinate is neither decimal nor sexagesimal."""

    def __init__(self, value):
        super().__init__(f"Unknown format: {value!r}")
        self.value = value


class UnknownUnit(GeodesyError, ValueError):
    """A unit string is not in the distance unit table."""

    def __init__(self, unit):
        super().__init__(f"Unknown unit: {unit!r}")
        self.unit = unit


class NonConvergentError(GeodesyError, ArithmeticError):
    """The Vincenty iteration did not converge and the caller required a value."""
