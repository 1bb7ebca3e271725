"""
unitpipe.core.quantity
======================

Defines the `Quantity` class: a numeric value paired with a `Unit`.

Quantities support:
- Conversion between units of the same dimension (``q.to(CENTIMETRE)``).
- Addition and subtraction across compatible units; the result keeps the
  unit of the left-hand operand.
- Multiplication and division, which compose units freely (two lengths
  multiply into an area).
- Equality that converts between units before comparing values.

Any operation that mixes dimensions raises `IncompatibleUnitsError`.
"""

from __future__ import annotations

import math
from typing import Optional

from unitpipe.core.dimensions import DIMENSIONLESS
from unitpipe.core.errors import IncompatibleUnitsError
from unitpipe.core.unit import Unit
from unitpipe.core.utils import Number, format_number


def _check_compatible(a: Unit, b: Unit) -> None:
    if not a.dimension.equals(b.dimension):
        raise IncompatibleUnitsError(f"{a} is not compatible with {b}", left=str(a), right=str(b))


def _truncate(value: Number, precision: Optional[int]) -> Number:
    if precision is None:
        return value
    places = 10 ** precision
    return math.floor(value * places) / places


class Quantity:
    """
    A physical quantity: a magnitude expressed in some unit.

    Attributes
    ----------
    value : int | float
        The magnitude, in terms of ``unit``.
    unit : Unit
        The unit the magnitude is expressed in.
    """

    __slots__ = ("_value", "_unit")

    def __init__(self, value: Number, unit: Unit) -> None:
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")
        self._value = value
        self._unit = unit

    @property
    def value(self) -> Number:
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dimension(self):
        return self._unit.dimension

    def get_value(self, precision: Optional[int] = None) -> Number:
        """Return the value, truncated (not rounded) to ``precision`` decimal places if given."""
        return _truncate(self._value, precision)

    # --- Conversion ---
    def to(self, target: "Unit | str") -> "Quantity":
        """
        Express this quantity in ``target``.

        ``target`` may be a `Unit` or a unit expression such as ``"km/hr"``,
        which is resolved against the default registry.
        """
        if isinstance(target, str):
            from unitpipe.units.parser import parse_unit

            target = parse_unit(target)

        _check_compatible(self._unit, target)
        if self._unit.equals(target):
            return self

        base = self._unit.transformation.apply(self._value)
        return Quantity(target.transformation.unapply(base), target)

    as_ = to

    def to_base(self) -> float:
        """The canonical base value: this quantity's magnitude in its dimension's base unit."""
        return self._unit.transformation.apply(self._value)

    # --- Arithmetic ---
    def add(self, other: "Quantity") -> "Quantity":
        return Quantity(self._value + self._converted_value(other), self._unit)

    def subtract(self, other: "Quantity") -> "Quantity":
        return Quantity(self._value - self._converted_value(other), self._unit)

    def times(self, other: "Quantity | Number") -> "Quantity":
        if isinstance(other, Quantity):
            return Quantity(self._value * other._value, self._unit.times(other._unit))
        return Quantity(self._value * other, self._unit)

    def divide(self, other: "Quantity | Number") -> "Quantity":
        if isinstance(other, Quantity):
            return Quantity(self._value / other._value, self._unit.divide(other._unit))
        return Quantity(self._value / other, self._unit)

    def _converted_value(self, other: "Quantity") -> Number:
        _check_compatible(self._unit, other._unit)
        return other.to(self._unit)._value

    # --- Equality ---
    def equals(self, other: "Quantity", precision: Optional[int] = None) -> bool:
        """
        Compare two quantities of the same dimension.

        Values in different units are converted into this quantity's unit
        first. Floating point noise from the conversion can be ignored by
        passing ``precision``, the number of decimal places to compare.
        """
        if not self._unit.dimension.equals(other._unit.dimension):
            raise IncompatibleUnitsError(
                "Cannot equate quantities of units in incompatible dimensions "
                f"({self._unit.dimension}, {other._unit.dimension})",
                left=str(self._unit),
                right=str(other._unit),
            )
        if self._unit.equals(other._unit):
            return self.get_value(precision) == other.get_value(precision)
        return self.equals(other.to(self._unit), precision)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Hashable key for dictionaries and sets.

        ``__hash__`` is disabled because equality converts between units; the
        key rounds the canonical base value to ``precision`` places instead.
        """
        rounded = round(self.to_base(), precision)
        if rounded == 0.0:
            rounded = 0.0  # fold -0.0
        return (str(self._unit.dimension), rounded)

    # --- Operator overloads ---
    def __add__(self, other: object) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Quantity":
        if not isinstance(other, (Quantity, int, float)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: object) -> "Quantity":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Quantity(other * self._value, self._unit)

    def __truediv__(self, other: object) -> "Quantity":
        if not isinstance(other, (Quantity, int, float)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "Quantity":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Quantity(other / self._value, Unit(DIMENSIONLESS, "").divide(self._unit))

    def __neg__(self) -> "Quantity":
        return Quantity(-self._value, self._unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._unit.dimension.equals(other._unit.dimension):
            # unequal, not an error; equals() is the strict check
            return False
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value < self._converted_value(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value <= self._converted_value(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value > self._converted_value(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value >= self._converted_value(other)

    def __str__(self) -> str:
        symbol = str(self._unit)
        value = format_number(self._value)
        return f"{value} {symbol}" if symbol else value

    def __repr__(self) -> str:
        return f"Quantity({self._value!r}, {str(self._unit)!r})"


__all__ = ["Quantity"]
