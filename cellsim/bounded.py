"""
Bounded float values used for cell state and lineage constants.

NonNegative(x) and ZeroToOne(x) are checked: an out-of-range or non-finite
value raises ValueError. The clipped() constructors saturate to the nearest
bound instead (NonNegative tops out at the largest finite float) and are what
the arithmetic below returns, so a value produced during a step never leaves
its domain. Config goes through the checked constructors.
"""

from __future__ import annotations
import math
import sys

from .utils import clamp

MAX_FLOAT = sys.float_info.max


def _as_float(value) -> float:
    value = float(value)
    if math.isnan(value):
        raise ValueError("value is NaN")
    return value


def _finite(cls, value) -> float:
    value = _as_float(value)
    if math.isinf(value):
        raise ValueError(f"{cls.__name__} must be finite, got {value}")
    return value


class NonNegative(float):
    """A finite float >= 0."""

    def __new__(cls, value: float = 0.0):
        value = _finite(cls, value)
        if value < 0.0:
            raise ValueError(f"{cls.__name__} must be >= 0, got {value}")
        return super().__new__(cls, value)

    @classmethod
    def clipped(cls, value: float) -> "NonNegative":
        return cls(clamp(_as_float(value), 0.0, MAX_FLOAT))

    def __add__(self, other):
        return NonNegative.clipped(float(self) + float(other))

    __radd__ = __add__

    def __sub__(self, other):
        return NonNegative.clipped(float(self) - float(other))

    def __rsub__(self, other):
        return NonNegative.clipped(float(other) - float(self))

    def __mul__(self, other):
        if isinstance(other, Rate):
            return ZeroToOne.clipped(float(self) * float(other))
        return NonNegative.clipped(float(self) * float(other))

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Rate(NonNegative):
    """Fraction of [0, 1] produced per unit of a NonNegative quantity."""

    def __mul__(self, other):
        return ZeroToOne.clipped(float(self) * float(other))

    __rmul__ = __mul__


class ZeroToOne(float):
    """A float in [0, 1]."""

    def __new__(cls, value: float = 0.0):
        value = _as_float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{cls.__name__} must be in [0, 1], got {value}")
        return super().__new__(cls, value)

    @classmethod
    def clipped(cls, value: float) -> "ZeroToOne":
        return cls(clamp(_as_float(value), 0.0, 1.0))

    def __add__(self, other):
        return ZeroToOne.clipped(float(self) + float(other))

    __radd__ = __add__

    def __sub__(self, other):
        return ZeroToOne.clipped(float(self) - float(other))

    def __rsub__(self, other):
        return ZeroToOne.clipped(float(other) - float(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"
