"""Display formatting for quantities and raw values.

A `Converter` is an ordered chain of transforms. Each transform takes an
`Intermediate` (the current numeric value plus, optionally, the text it
should print as) and returns a new one, so numeric steps (``divide_by``) and
textual steps (``group_digits_by``, ``suffix_with``) can be mixed freely
without converting back and forth between strings and numbers::

    >>> fmt = Converter().then(round_to(2)).then(group_digits_by(3)).then(suffix_with(" m"))
    >>> fmt.apply(1234567.891)
    '1,234,567.89 m'
"""

from __future__ import annotations

import math
import re
from typing import Callable, Dict, Iterable, NamedTuple, Optional, Tuple, Union

from unitpipe.core.errors import UnitConflictError
from unitpipe.core.quantity import Quantity
from unitpipe.core.utils import Number, format_number


class Intermediate(NamedTuple):
    """A value travelling through a converter: the number and its rendering, if any."""

    value: Number
    text: Optional[str] = None

    def __str__(self) -> str:
        return self.text if self.text is not None else format_number(self.value)


Transform = Callable[[Intermediate], Intermediate]
TransformFactory = Callable[..., Transform]


# --- Built-in transforms -----------------------------------------------------

def divide_by(x: Number) -> Transform:
    return lambda val: Intermediate(val.value / x)


def multiply_by(x: Number) -> Transform:
    return lambda val: Intermediate(val.value * x)


_TRAILING_ZEROS = re.compile(r"\.0+$")


def round_to(places: int, keep_trailing_zeros: bool = False) -> Transform:
    """Round half up to ``places`` decimals; an all-zero fraction (``12.00``) is dropped unless kept."""
    scale = 10 ** places

    def xf(val: Intermediate) -> Intermediate:
        rounded = math.floor(val.value * scale + 0.5) / scale
        text = f"{rounded:.{places}f}"
        if not keep_trailing_zeros:
            text = _TRAILING_ZEROS.sub("", text)
        return Intermediate(float(text), text)

    return xf


def prefix_with(s: str) -> Transform:
    return lambda val: Intermediate(val.value, f"{s}{val}")


def suffix_with(s: str) -> Transform:
    return lambda val: Intermediate(val.value, f"{val}{s}")


def group_digits_by(group_size: int, separator: str = ",") -> Transform:
    """Insert ``separator`` every ``group_size`` digits of the integer part."""
    pattern = re.compile(r"(\d+)(\d{%d})" % group_size)

    def xf(val: Intermediate) -> Intermediate:
        whole, dot, frac = str(val).partition(".")
        while pattern.search(whole):
            whole = pattern.sub(lambda m: m.group(1) + separator + m.group(2), whole, count=1)
        return Intermediate(val.value, whole + dot + frac)

    return xf


TRANSFORMATIONS: Dict[str, TransformFactory] = {
    "divide_by": divide_by,
    "multiply_by": multiply_by,
    "round_to": round_to,
    "prefix_with": prefix_with,
    "suffix_with": suffix_with,
    "group_digits_by": group_digits_by,
}


def register_transformation(name: str, factory: TransformFactory) -> None:
    """Make a custom transform factory available as ``TRANSFORMATIONS[name]``."""
    if name in TRANSFORMATIONS:
        raise UnitConflictError(f'Transformation "{name}" already registered')
    TRANSFORMATIONS[name] = factory


# --- Converter ---------------------------------------------------------------

class Converter:
    """An immutable chain of display transforms."""

    __slots__ = ("_transformations",)

    def __init__(self, transformations: Iterable[Transform] = ()) -> None:
        self._transformations: Tuple[Transform, ...] = tuple(transformations)

    @property
    def transformations(self) -> Tuple[Transform, ...]:
        return self._transformations

    def apply(self, value: Union[Quantity, Number]) -> str:
        """Run ``value`` (a quantity contributes its value) through every transform."""
        initial = value.get_value() if isinstance(value, Quantity) else value
        acc = Intermediate(initial)
        for xf in self._transformations:
            acc = xf(acc)
        return str(acc)

    __call__ = apply

    def then(self, transformation: Transform) -> "Converter":
        return Converter(self._transformations + (transformation,))

    def concat(self, other: "Converter") -> "Converter":
        return Converter(self._transformations + other._transformations)


__all__ = [
    "Intermediate",
    "Converter",
    "TRANSFORMATIONS",
    "register_transformation",
    "divide_by",
    "multiply_by",
    "round_to",
    "prefix_with",
    "suffix_with",
    "group_digits_by",
]
