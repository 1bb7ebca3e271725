# unitpipe.core.dimensions

from __future__ import annotations

from typing import Any, Union

from unitpipe.core.rational import SymbolicRational

DimLike = Union["Dimension", SymbolicRational, str, int]

# --- Core object -------------------------------------------------------------

class Dimension:
    """
    A kind of measurement within which conversions are meaningful.

    Centimetres convert to metres because both measure length; they never
    convert to seconds. A dimension is a symbolic rational over the seven SI
    base-dimension symbols (L, M, T, I, θ, N, J), with ``1`` meaning
    dimensionless, e.g. ``L/T^2`` for acceleration.
    """

    __slots__ = ("representation",)

    representation: SymbolicRational

    def __init__(self, symbol_or_rational: DimLike = 1) -> None:
        if isinstance(symbol_or_rational, Dimension):
            rep = symbol_or_rational.representation
        elif isinstance(symbol_or_rational, SymbolicRational):
            rep = symbol_or_rational
        else:
            rep = SymbolicRational(symbol_or_rational)
        object.__setattr__(self, "representation", rep)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Dimension is immutable")

    # --- Algebra ---
    def times(self, other: "Dimension") -> "Dimension":
        return Dimension(self.representation.times(other.representation))

    def divide(self, other: "Dimension") -> "Dimension":
        return Dimension(self.representation.divide(other.representation))

    def pow(self, n: int) -> "Dimension":
        return Dimension(self.representation.pow(n))

    def equals(self, other: "Dimension") -> bool:
        return self.representation.equals(other.representation)

    # --- Operator overloads ---
    def __mul__(self, other: object) -> "Dimension":
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.times(other)

    def __truediv__(self, other: object) -> "Dimension":
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimension":
        # three-argument pow(x, n, mod) is meaningless here
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        if not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.representation)

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return self.representation.is_one

    def __str__(self) -> str:
        return str(self.representation)

    def __repr__(self) -> str:
        return f"Dimension({str(self.representation) or '1'})"


# --- Public constants ----------------------------------------------------------

DIMENSIONLESS      = Dimension(1)      # no symbolic representation
LENGTH             = Dimension("L")
MASS               = Dimension("M")
TIME               = Dimension("T")
ELECTRIC_CURRENT   = Dimension("I")
TEMPERATURE        = Dimension("θ")
AMOUNT_OF_SUBSTANCE = Dimension("N")
LUMINOUS_INTENSITY = Dimension("J")

# Short alias kept for readability in catalogue code
NONE = DIMENSIONLESS

__all__ = [
    "Dimension",
    "DIMENSIONLESS",
    "NONE",
    "LENGTH",
    "MASS",
    "TIME",
    "ELECTRIC_CURRENT",
    "TEMPERATURE",
    "AMOUNT_OF_SUBSTANCE",
    "LUMINOUS_INTENSITY",
]
