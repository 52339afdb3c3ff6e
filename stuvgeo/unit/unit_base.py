"""Unit family foundation for the measurement classes.

Every measurement class belongs to exactly one family (length, angle, time).
The first ancestor flagged with ``IS_FAMILY_ROOT`` becomes the family ROOT,
and conversions are only allowed between classes sharing the same ROOT.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Fathom(Length):
    ...     pass
    >>> Fathom.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Short symbol, also the lookup key in unit tables.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class that starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Refuse conversions across families (e.g. metres to degrees).

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        if cls.ROOT is not unit_type.ROOT:
            msg = f"cannot convert {cls.__name__} to {unit_type.__name__}"
            raise TypeError(msg)
