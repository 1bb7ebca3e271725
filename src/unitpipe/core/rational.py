"""
unitpipe.core.rational
======================

Symbolic rationals: ratios of two multisets of terms, where a term is
either a number or an opaque symbolic name.

They are the representation behind both dimensions (``L/T^2``) and unit
symbols (``kg*m/s^2``). Every instance is kept in a fully cancelled,
canonical form so that two rationals are equal exactly when their string
renderings are equal:

>>> str(SymbolicRational([2, "x", "x", "y"], ["y", 4, "z"]))
'1/2 x^2/z'
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union

from unitpipe.core.utils import (
    Number,
    Term,
    cancel,
    format_number,
    net_counts,
    normalize_number,
    prime_factors,
    product,
)

TermsLike = Union[Term, Iterable[Term]]


def _as_terms(value: TermsLike) -> Tuple[Term, ...]:
    if isinstance(value, (str, int, float)):
        return (value,)
    return tuple(value)


def _literal_factors(terms: Iterable[Term]) -> Iterator[Number]:
    for term in terms:
        if isinstance(term, str):
            continue
        for factor in prime_factors(term):
            if factor != 1:
                yield factor


def _symbols(terms: Iterable[Term]) -> Iterator[str]:
    # the empty symbol stands for "no symbol" (e.g. Unit(NONE, ""))
    return (t for t in terms if isinstance(t, str) and t)


def _literal_str(numer: Tuple[Number, ...], denom: Tuple[Number, ...]) -> str:
    n = product(numer)
    d = product(denom)
    if n / d == 1:
        return ""
    if d == 1:
        return format_number(n)
    return f"{format_number(n)}/{format_number(d)}"


def _symbol_list_str(symbols: Tuple[str, ...]) -> str:
    counts = net_counts(symbols, ())
    rendered = [name if count == 1 else f"{name}^{count}" for name, count in counts.items()]
    return "*".join(sorted(rendered))


def _symbolic_str(numer: Tuple[str, ...], denom: Tuple[str, ...]) -> str:
    numer_s = _symbol_list_str(numer)
    denom_s = _symbol_list_str(denom)
    if not numer_s and denom_s:
        numer_s = "1"
    return f"{numer_s}/{denom_s}" if denom_s else numer_s


class SymbolicRational:
    """
    Immutable, canonical ratio of literal and symbolic terms.

    Parameters
    ----------
    numer, denom :
        A single term or a sequence of terms. Integers are prime-factored,
        strings are kept as opaque symbols.
    """

    __slots__ = ("_lit_numer", "_lit_denom", "_sym_numer", "_sym_denom", "_str")

    def __init__(self, numer: TermsLike = 1, denom: TermsLike = 1) -> None:
        n_terms = _as_terms(numer)
        d_terms = _as_terms(denom)
        self._set_parts(
            tuple(_literal_factors(n_terms)),
            tuple(_literal_factors(d_terms)),
            tuple(_symbols(n_terms)),
            tuple(_symbols(d_terms)),
        )

    def _set_parts(
        self,
        lit_numer: Tuple[Number, ...],
        lit_denom: Tuple[Number, ...],
        sym_numer: Tuple[str, ...],
        sym_denom: Tuple[str, ...],
    ) -> None:
        lit_numer, lit_denom = cancel(lit_numer, lit_denom)
        sym_numer, sym_denom = cancel(sym_numer, sym_denom)
        object.__setattr__(self, "_lit_numer", lit_numer)
        object.__setattr__(self, "_lit_denom", lit_denom)
        object.__setattr__(self, "_sym_numer", sym_numer)
        object.__setattr__(self, "_sym_denom", sym_denom)
        parts = (_literal_str(lit_numer, lit_denom), _symbolic_str(sym_numer, sym_denom))
        object.__setattr__(self, "_str", " ".join(p for p in parts if p))

    @classmethod
    def _from_parts(
        cls,
        lit_numer: Tuple[Number, ...],
        lit_denom: Tuple[Number, ...],
        sym_numer: Tuple[str, ...],
        sym_denom: Tuple[str, ...],
    ) -> "SymbolicRational":
        # factors are already prime here, so skip re-factoring
        obj = cls.__new__(cls)
        obj._set_parts(lit_numer, lit_denom, sym_numer, sym_denom)
        return obj

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Accessors ---
    @property
    def literal(self) -> Tuple[Tuple[Number, ...], Tuple[Number, ...]]:
        return self._lit_numer, self._lit_denom

    @property
    def symbolic(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return self._sym_numer, self._sym_denom

    @property
    def numerator(self) -> Tuple[Term, ...]:
        return self._lit_numer + self._sym_numer

    @property
    def denominator(self) -> Tuple[Term, ...]:
        return self._lit_denom + self._sym_denom

    @property
    def is_one(self) -> bool:
        return self._str == ""

    # --- Algebra ---
    def times(self, other: "SymbolicRational | Number | str") -> "SymbolicRational":
        o = _coerce(other)
        return SymbolicRational._from_parts(
            self._lit_numer + o._lit_numer,
            self._lit_denom + o._lit_denom,
            self._sym_numer + o._sym_numer,
            self._sym_denom + o._sym_denom,
        )

    def divide(self, other: "SymbolicRational | Number | str") -> "SymbolicRational":
        o = _coerce(other)
        return SymbolicRational._from_parts(
            self._lit_numer + o._lit_denom,
            self._lit_denom + o._lit_numer,
            self._sym_numer + o._sym_denom,
            self._sym_denom + o._sym_numer,
        )

    def pow(self, n: int) -> "SymbolicRational":
        """Raise to an integer power; negative powers invert, ``pow(0)`` is the unit value."""
        if n < 0:
            return ONE.divide(self.pow(-n))
        if n == 0:
            return ONE
        if n == 1:
            return self
        result = self
        for _ in range(n - 1):
            result = result.times(self)
        return result

    def equals(self, other: "SymbolicRational") -> bool:
        # Both sides are canonical by construction, so comparing renderings suffices.
        return self._str == other._str

    # --- Operator overloads ---
    def __mul__(self, other: object) -> "SymbolicRational":
        if not isinstance(other, (SymbolicRational, int, float, str)):
            return NotImplemented
        return self.times(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "SymbolicRational":
        if not isinstance(other, (SymbolicRational, int, float, str)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "SymbolicRational":
        if not isinstance(other, (int, float, str)):
            return NotImplemented
        return SymbolicRational(other).divide(self)

    def __pow__(self, n: int) -> "SymbolicRational":
        if not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolicRational):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._str)

    def __str__(self) -> str:
        return self._str

    def __repr__(self) -> str:
        return f"SymbolicRational({self._str!r})"


def _coerce(value: "SymbolicRational | Number | str") -> SymbolicRational:
    if isinstance(value, SymbolicRational):
        return value
    return SymbolicRational(normalize_number(value) if not isinstance(value, str) else value)


ONE = SymbolicRational()

__all__ = ["SymbolicRational", "ONE"]
