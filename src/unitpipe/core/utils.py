"""
unitpipe.core.utils
===================

Small numeric helpers shared by the symbolic-rational layer and the
display code: prime factorisation, signed term counting and compact number
rendering.
"""

from __future__ import annotations

import math
from typing import Dict, Hashable, Iterable, List, Tuple, TypeVar, Union

Number = Union[int, float]
Term = Union[int, float, str]

T = TypeVar("T", bound=Hashable)


def normalize_number(x: Number) -> Number:
    """Collapse integral floats (``4.0``) to ``int`` so they factor and hash like ints."""
    if isinstance(x, bool):
        return int(x)
    if isinstance(x, float) and x.is_integer() and abs(x) < 2**53:
        return int(x)
    return x


def prime_factors(n: Number) -> List[Number]:
    """
    Decompose ``n`` into prime factors by trial division up to √n.

    ``1`` has no factors, a prime is its own single factor, and a negative
    integer contributes a leading ``-1``. Values that are not integers
    (``0.5``, ``math.pi``) and zero cannot be factored and come back as a
    single opaque factor.
    """
    n = normalize_number(n)
    if not isinstance(n, int) or n == 0:
        return [n]

    factors: List[Number] = []
    if n < 0:
        factors.append(-1)
        n = -n

    while n % 2 == 0:
        factors.append(2)
        n //= 2

    x = 3
    root = math.isqrt(n)
    while x <= root:
        if n % x == 0:
            factors.append(x)
            n //= x
            root = math.isqrt(n)
        else:
            x += 2

    # whatever survives the sieve is itself prime
    if n > 1:
        factors.append(n)
    return factors


def net_counts(numer: Iterable[T], denom: Iterable[T]) -> Dict[T, int]:
    """Count +1 per numerator occurrence and -1 per denominator occurrence."""
    counts: Dict[T, int] = {}
    for term in numer:
        counts[term] = counts.get(term, 0) + 1
    for term in denom:
        counts[term] = counts.get(term, 0) - 1
    return counts


def cancel(numer: Iterable[T], denom: Iterable[T]) -> Tuple[Tuple[T, ...], Tuple[T, ...]]:
    """
    Cancel common terms between a numerator and a denominator multiset.

    Terms whose net count is zero vanish; the rest are re-expanded on the
    side given by the sign of their count.
    """
    new_numer: List[T] = []
    new_denom: List[T] = []
    for term, count in net_counts(numer, denom).items():
        if count > 0:
            new_numer.extend([term] * count)
        elif count < 0:
            new_denom.extend([term] * -count)
    return tuple(new_numer), tuple(new_denom)


def product(values: Iterable[Number]) -> Number:
    result: Number = 1
    for v in values:
        result *= v
    return normalize_number(result)


def format_number(x: Number) -> str:
    """Render ``160.0`` as ``'160'`` and every other float with its shortest repr."""
    x = normalize_number(x)
    if isinstance(x, int):
        return str(x)
    return repr(x)


__all__ = [
    "Number",
    "Term",
    "normalize_number",
    "prime_factors",
    "net_counts",
    "cancel",
    "product",
    "format_number",
]
