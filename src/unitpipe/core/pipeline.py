"""
unitpipe.core.pipeline
======================

Conversion pipelines: ordered, invertible sequences of elementary numeric
operations.

Every unit carries a pipeline that maps a magnitude expressed in that unit to
the magnitude in the canonical base unit of its dimension. Pipelines are
composed whenever units are combined, so a unit defined as
``KELVIN.add(273.15, "°C")`` or ``METRE.divide(100, "cm")`` gets its
conversion for free:

>>> p = ConversionPipeline(ElementaryOperation.multiply(9), ElementaryOperation.divide(5))
>>> p.apply(100.0)
180.0
>>> p.unapply(180.0)
100.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Iterator, List, Tuple

from unitpipe.core.utils import Number, format_number

Fn = Callable[[float], float]


@dataclass(frozen=True, slots=True)
class ElementaryOperation:
    """A pair of pure numeric functions that undo each other."""

    forward: Fn
    backward: Fn
    label: str = field(default="", compare=False)

    def apply(self, x: float) -> float:
        return self.forward(x)

    def unapply(self, x: float) -> float:
        return self.backward(x)

    @property
    def inverse(self) -> "ElementaryOperation":
        return ElementaryOperation(self.backward, self.forward, _invert_label(self.label))

    # --- Built-in constructors ---
    @classmethod
    def add(cls, k: Number) -> "ElementaryOperation":
        return cls(lambda y: y + k, lambda y: y - k, f"+{format_number(k)}")

    @classmethod
    def subtract(cls, k: Number) -> "ElementaryOperation":
        return cls.add(k).inverse

    @classmethod
    def multiply(cls, k: Number) -> "ElementaryOperation":
        return cls(lambda y: y * k, lambda y: y / k, f"*{format_number(k)}")

    @classmethod
    def divide(cls, k: Number) -> "ElementaryOperation":
        return cls.multiply(k).inverse

    def __repr__(self) -> str:
        return f"<op {self.label or '?'}>"


_INVERSE_SIGN = {"+": "-", "-": "+", "*": "/", "/": "*"}


def _invert_label(label: str) -> str:
    if label and label[0] in _INVERSE_SIGN:
        return _INVERSE_SIGN[label[0]] + label[1:]
    return label


class ConversionPipeline:
    """Immutable, ordered sequence of :class:`ElementaryOperation` steps."""

    __slots__ = ("_ops",)

    def __init__(self, *ops: ElementaryOperation) -> None:
        self._ops: Tuple[ElementaryOperation, ...] = tuple(ops)

    @property
    def operations(self) -> Tuple[ElementaryOperation, ...]:
        return self._ops

    @property
    def is_identity(self) -> bool:
        return not self._ops

    def apply(self, x: float) -> float:
        return reduce(lambda acc, op: op.apply(acc), self._ops, x)

    def unapply(self, x: float) -> float:
        return reduce(lambda acc, op: op.unapply(acc), reversed(self._ops), x)

    def push(self, op: ElementaryOperation) -> "ConversionPipeline":
        return ConversionPipeline(*self._ops, op)

    def concat(self, other: "ConversionPipeline") -> "ConversionPipeline":
        return ConversionPipeline(*self._ops, *other._ops)

    @property
    def inverse(self) -> "ConversionPipeline":
        """A pipeline whose ``apply`` is this pipeline's ``unapply`` and vice versa."""
        return ConversionPipeline(*(op.inverse for op in reversed(self._ops)))

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[ElementaryOperation]:
        return iter(self._ops)

    def __repr__(self) -> str:
        steps = " ".join(op.label or "?" for op in self._ops)
        return f"ConversionPipeline({steps})"


class PipelineBuilder:
    """
    Mutable accumulator used while a new unit is being composed.

    Only unit combinators use it; the unit they return holds the immutable
    pipeline produced by :meth:`build`.
    """

    def __init__(self) -> None:
        self._ops: List[ElementaryOperation] = []

    def push(self, op: ElementaryOperation) -> "PipelineBuilder":
        self._ops.append(op)
        return self

    def concat(self, pipeline: ConversionPipeline) -> "PipelineBuilder":
        self._ops.extend(pipeline.operations)
        return self

    def build(self) -> ConversionPipeline:
        return ConversionPipeline(*self._ops)


IDENTITY = ConversionPipeline()

__all__ = ["ElementaryOperation", "ConversionPipeline", "PipelineBuilder", "IDENTITY"]
