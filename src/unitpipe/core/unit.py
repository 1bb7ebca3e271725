from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from unitpipe.core.dimensions import DIMENSIONLESS, Dimension
from unitpipe.core.errors import InvalidArgumentError
from unitpipe.core.pipeline import IDENTITY, ConversionPipeline, ElementaryOperation, PipelineBuilder
from unitpipe.core.rational import SymbolicRational
from unitpipe.core.utils import Number, normalize_number

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitpipe.core.quantity import Quantity

Operand = Union["Unit", int, float]


def _check_scalar(operand: object) -> None:
    if isinstance(operand, bool) or not isinstance(operand, (int, float)):
        raise TypeError(f"operand must be a Unit or a number, got {type(operand).__name__}")


@dataclass(frozen=True, slots=True, eq=False)
class Unit:
    """
    A physical unit.

    A unit is either a *base* unit, which anchors the scale of its dimension
    and converts with the identity pipeline, or a *derived* unit built from
    other units and scalars with :meth:`times`, :meth:`divide`, :meth:`add`
    and :meth:`pow`.

    Attributes
    ----------
    dimension : Dimension
        What the unit measures (e.g. ``L/T`` for a speed).
    representation : SymbolicRational
        Display symbol, e.g. ``m/s``. Also decides equality: two units that
        print the same are the same unit.
    transformation : ConversionPipeline
        Maps a magnitude in this unit to the magnitude in the base unit of
        ``dimension``; ``transformation.unapply`` maps back.
    is_base : bool
        True only for units created directly through the constructor.
    """

    dimension: Dimension
    representation: SymbolicRational
    transformation: ConversionPipeline = IDENTITY
    is_base: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.representation, SymbolicRational):
            object.__setattr__(self, "representation", SymbolicRational(self.representation))

    @classmethod
    def _derived(
        cls,
        dimension: Dimension,
        representation: SymbolicRational,
        builder: PipelineBuilder,
    ) -> "Unit":
        return cls(dimension, representation, builder.build(), False)

    @property
    def symbol(self) -> str:
        return str(self.representation)

    # --- Combinators ---
    def times(self, operand: Operand, symbol: str | None = None) -> "Unit":
        """Multiply by another unit or scale by a constant factor."""
        builder = PipelineBuilder().concat(self.transformation)
        if isinstance(operand, Unit):
            dimension = self.dimension.times(operand.dimension)
            default_rep = self.representation.times(operand.representation)
            builder.concat(operand.transformation)
        else:
            _check_scalar(operand)
            k = normalize_number(operand)
            dimension = self.dimension
            default_rep = self.representation.times(k)
            builder.push(ElementaryOperation.multiply(k))
        representation = default_rep if symbol is None else SymbolicRational(symbol)
        return Unit._derived(dimension, representation, builder)

    def divide(self, operand: Operand, symbol: str | None = None) -> "Unit":
        """Divide by another unit or by a constant factor."""
        builder = PipelineBuilder().concat(self.transformation)
        if isinstance(operand, Unit):
            dimension = self.dimension.divide(operand.dimension)
            default_rep = self.representation.divide(operand.representation)
            builder.concat(operand.transformation.inverse)
        else:
            _check_scalar(operand)
            k = normalize_number(operand)
            dimension = self.dimension
            default_rep = self.representation.divide(k)
            builder.push(ElementaryOperation.divide(k))
        representation = default_rep if symbol is None else SymbolicRational(symbol)
        return Unit._derived(dimension, representation, builder)

    def add(self, amount: Number, symbol: str) -> "Unit":
        """
        Offset the unit by a constant, e.g. ``KELVIN.add(273.15, "°C")``.

        An offset never changes the dimension. There is no ``subtract``:
        add a negative amount instead.
        """
        _check_scalar(amount)
        builder = PipelineBuilder().push(ElementaryOperation.add(amount)).concat(self.transformation)
        return Unit._derived(self.dimension, SymbolicRational(symbol), builder)

    def pow(self, n: int) -> "Unit":
        """Raise to a positive integral power; ``METRE.pow(2)`` measures area."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidArgumentError(f"Power must be an integer >= 1, got {n!r}")
        result = self
        for _ in range(n - 1):
            result = self.times(result)
        return result

    def equals(self, other: "Unit") -> bool:
        return self.representation.equals(other.representation)

    # --- Conversions ---
    def to_base(self, x: float) -> float:
        return self.transformation.apply(x)

    def from_base(self, x: float) -> float:
        return self.transformation.unapply(x)

    # --- Operator overloads ---
    def __mul__(self, other: object) -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, value: object) -> "Quantity":
        from unitpipe.core.quantity import Quantity

        if not isinstance(value, (int, float)):
            return NotImplemented
        return Quantity(value, self)

    def __truediv__(self, other: object) -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, n: object) -> "Unit":
        if n != 1:
            raise TypeError(
                f"Invalid operation: cannot divide {n} by a Unit ({self}). "
                "Only 1/unit (reciprocal) is supported."
            )
        return Unit(DIMENSIONLESS, "").divide(self)

    def __pow__(self, n: int) -> "Unit":
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.representation)

    def __str__(self) -> str:
        return str(self.representation)

    def __repr__(self) -> str:
        kind = "base" if self.is_base else "derived"
        return f"Unit({str(self)!r}, dimension={str(self.dimension) or '1'!r}, {kind})"


__all__ = ["Unit"]
