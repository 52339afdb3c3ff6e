"""Float-backed units stored in SI.

A ``UnitFloat`` is a ``float`` whose value is always the SI amount (metres,
radians, seconds). The class only remembers how to scale that amount back
into its own native scale.

Example:
    >>> distance = Kilometer(1.5)
    >>> float(distance)
    1500.0
    >>> round(distance.to(Mile), 4)
    0.9321
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for SI-backed float units.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Size of one native unit in SI.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Wrap a value that is already expressed in SI."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the amount expressed in ``unit_type``'s native scale.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Same amount, retyped as ``unit_type``."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other) -> UnitFloat:
        # sum() starts from the int 0
        if other == 0 and not isinstance(other, UnitFloat):
            return self
        return self.__add__(other)

    def __str__(self) -> str:
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
