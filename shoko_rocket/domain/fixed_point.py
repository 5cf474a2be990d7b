"""Deterministic fixed-point type for sub-cell walker positions.

A value is a signed byte integer part plus a fractional part counted in
360ths of a unit. 360 divides evenly by every walker speed, so a walker
always lands exactly on a cell boundary and crossing into a new cell can be
detected by comparing integer parts, without division.

Examples (``FixedPoint(1, 180)`` is 1.5, ``FixedPoint(1, -180)`` is 0.5, and
so is ``FixedPoint(0, 180)``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from shoko_rocket.config.constants import FRACTIONAL_SCALE

INT_PART_MIN = -128
INT_PART_MAX = 127
FRACTIONAL_LIMIT = FRACTIONAL_SCALE - 1


def _check_int_part(value: int) -> int:
    if not INT_PART_MIN <= value <= INT_PART_MAX:
        raise OverflowError(f"integer part {value} does not fit in a signed byte")
    return value


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, as 32-bit integer hardware does."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _normalize(value: int, fractional: int) -> FixedPoint:
    if fractional >= FRACTIONAL_SCALE:
        value += 1
        fractional -= FRACTIONAL_SCALE
    elif fractional <= -FRACTIONAL_SCALE:
        value -= 1
        fractional += FRACTIONAL_SCALE
    return FixedPoint(_check_int_part(value), fractional)


@dataclass(frozen=True)
class FixedPoint:
    """Signed byte integer part plus a fractional part in [-359, 359]."""

    value: int
    fractional: int = 0

    def __post_init__(self) -> None:
        _check_int_part(self.value)
        if not -FRACTIONAL_LIMIT <= self.fractional <= FRACTIONAL_LIMIT:
            raise ValueError(f"fractional must be in [-{FRACTIONAL_LIMIT}, {FRACTIONAL_LIMIT}]")

    @classmethod
    def from_float(cls, number: float) -> FixedPoint:
        """Convert a float, truncating the fraction to whole 360ths."""
        integral = math.trunc(number)
        remainder = number - integral
        return cls(_check_int_part(integral), 0) + cls(0, math.trunc(remainder * FRACTIONAL_SCALE))

    def __add__(self, other: FixedPoint) -> FixedPoint:
        return _normalize(self.value + other.value, self.fractional + other.fractional)

    def __sub__(self, other: FixedPoint) -> FixedPoint:
        return _normalize(self.value - other.value, self.fractional - other.fractional)

    def did_overflow(self, previous: FixedPoint) -> bool:
        """Return True if the integer part differs from ``previous``."""
        return self.value != previous.value

    def integer_part(self) -> int:
        """Integer part, truncated toward zero (1.5 -> 1, -1.5 -> -1)."""
        return self.value

    def scaled(self) -> int:
        """The value expressed as a whole number of 360ths."""
        return self.value * FRACTIONAL_SCALE + self.fractional

    def map_to_linear_range(
        self,
        from_min: FixedPoint,
        from_max: FixedPoint,
        to_min: int,
        to_max: int,
    ) -> int:
        """Linearly map this value from ``[from_min, from_max]`` onto ``[to_min, to_max]``.

        Inputs outside the source interval extrapolate past the target
        bounds; callers that need clamping must clamp themselves.
        """
        from_min_scaled = from_min.scaled()
        from_delta = from_max.scaled() - from_min_scaled
        if from_delta == 0:
            raise ValueError("from_min and from_max must differ")
        offset = (self.scaled() - from_min_scaled) * (to_max - to_min)
        return to_min + _trunc_div(offset, from_delta)
