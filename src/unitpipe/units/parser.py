"""
unitpipe.units.parser
=====================

Lexer, recursive-descent parser and evaluator for unit expressions such as
``"m^3/s^2"`` or ``"kg*m/s^2"``.

Parsing produces a *plan* (a small tuple tree with no registry objects in it)
which is cached per expression string. Evaluation binds identifiers to units
from the registry passed at call time and combines them with the unit
algebra (``times``, ``divide``, ``pow``).
"""

from __future__ import annotations

import logging
import unicodedata
from functools import lru_cache
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple, Union

from unitpipe.core.dimensions import DIMENSIONLESS
from unitpipe.core.errors import InvalidArgumentError, LexError, ParseError
from unitpipe.core.unit import Unit

if TYPE_CHECKING:
    from unitpipe.units.registry import UnitsRegistry

logger = logging.getLogger(__name__)

# --- Tokens -----------------------------------------------------------------

_OPERATORS = {
    "*": "TIMES",
    "/": "DIV",
    "+": "PLUS",
    "-": "MINUS",
    "^": "POW",
}

# characters used by catalogue symbols beyond ASCII letters
_EXTRA_IDENT_CHARS = frozenset("_Ω°Å\"'")
_WHITESPACE = frozenset(" \t\r\n")


class Token(NamedTuple):
    kind: str
    value: Union[str, int]
    pos: int


def _is_ident_char(c: str) -> bool:
    # compatibility forms such as the OHM SIGN compose to the catalogue letter
    c = unicodedata.normalize("NFC", c)
    return len(c) == 1 and (("a" <= c <= "z") or ("A" <= c <= "Z") or c in _EXTRA_IDENT_CHARS)


def _continues_ident(c: str) -> bool:
    return _is_ident_char(c) or unicodedata.combining(c) != 0


def tokenize(text: str) -> List[Token]:
    """
    Split ``text`` into tokens; raises `LexError` on any other character.

    Positions index ``text`` as given. Identifier values are NFC-composed, so
    a decomposed "A" + ring (U+030A) yields the same token as "Å".
    """
    tokens: List[Token] = []
    i, n = 0, len(text)
    while i < n:
        c = text[i]
        if c in _WHITESPACE:
            i += 1
        elif c in _OPERATORS:
            tokens.append(Token(_OPERATORS[c], c, i))
            i += 1
        elif _is_ident_char(c):
            j = i + 1
            while j < n and _continues_ident(text[j]):
                j += 1
            tokens.append(Token("IDENT", unicodedata.normalize("NFC", text[i:j]), i))
            i = j
        elif c.isdigit() and c.isascii():
            j = i + 1
            while j < n and text[j].isdigit() and text[j].isascii():
                j += 1
            tokens.append(Token("NUM", int(text[i:j]), i))
            i = j
        else:
            raise LexError(f"Invalid token {c!r} at {i}", position=i)
    return tokens


# --- Plan node types ------------------------------------------------
# ("name", <str>, None)
# ("pow", <plan>, <int>)
# ("mul", <plan>, <plan>)
# ("div", <plan>, <plan>)
Plan = Tuple[str, Union[str, "Plan"], Union[int, "Plan", None]]


class _UnitExprParser:
    """
    Recursive-descent parser over a token list:

      EXPR       := TERMS '/' TERMS | TERMS
      TERMS      := TERM '*' TERMS | TERM
      TERM       := IDENT '^' SIGNED_NUM | IDENT
      SIGNED_NUM := '+' NUM | '-' NUM | NUM

    Every rule returns a plan or ``None``; on ``None`` the caller rewinds the
    cursor and tries the next alternative.
    """

    def __init__(self, tokens: List[Token], text_length: int = 0):
        self.tokens = tokens
        self.pos = 0
        self._end = text_length

    def parse(self) -> Plan:
        plan = self._expr()
        if plan is not None and self.pos == len(self.tokens):
            return plan
        where = self.tokens[self.pos].pos if self.pos < len(self.tokens) else self._end
        raise ParseError(f"Malformed expression at {where}", position=where)

    # ---- token helpers ----
    def _accept(self, kind: str) -> Optional[Token]:
        if self.pos < len(self.tokens) and self.tokens[self.pos].kind == kind:
            tok = self.tokens[self.pos]
            self.pos += 1
            return tok
        return None

    def _first(self, *alternatives) -> Optional[Plan]:
        save = self.pos
        for alt in alternatives:
            result = alt()
            if result is not None:
                return result
            self.pos = save
        return None

    # EXPR := TERMS '/' TERMS | TERMS
    def _expr(self) -> Optional[Plan]:
        return self._first(self._quotient, self._terms)

    def _quotient(self) -> Optional[Plan]:
        numer = self._terms()
        if numer is None or self._accept("DIV") is None:
            return None
        denom = self._terms()
        if denom is None:
            return None
        return ("div", numer, denom)

    # TERMS := TERM '*' TERMS | TERM
    def _terms(self) -> Optional[Plan]:
        # iterative form of the right-recursive rule; folds to the same nesting
        first = self._term()
        if first is None:
            return None
        factors = [first]
        while True:
            save = self.pos
            if self._accept("TIMES") is None:
                break
            nxt = self._term()
            if nxt is None:
                # TERM alone matches; leave the dangling "*" unconsumed
                self.pos = save
                break
            factors.append(nxt)
        plan = factors[-1]
        for factor in reversed(factors[:-1]):
            plan = ("mul", factor, plan)
        return plan

    # TERM := IDENT '^' SIGNED_NUM | IDENT
    def _term(self) -> Optional[Plan]:
        return self._first(self._power, self._name)

    def _power(self) -> Optional[Plan]:
        name = self._name()
        if name is None or self._accept("POW") is None:
            return None
        exp = self._signed_num()
        if exp is None:
            return None
        return ("pow", name, exp)

    def _name(self) -> Optional[Plan]:
        tok = self._accept("IDENT")
        if tok is None:
            return None
        return ("name", tok.value, None)

    # SIGNED_NUM := '+' NUM | '-' NUM | NUM
    def _signed_num(self) -> Optional[int]:
        save = self.pos
        sign = 1
        if self._accept("MINUS") is not None:
            sign = -1
        elif self._accept("PLUS") is None:
            self.pos = save
        num = self._accept("NUM")
        if num is None:
            self.pos = save
            return None
        return sign * num.value


# ---------------- Evaluation of a plan against a given registry ----------------
def _lookup(name: str, reg: "UnitsRegistry") -> Unit:
    unit = reg.lookup(name)
    if unit is None:
        # unknown symbols become dimensionless placeholders named after themselves
        return Unit(DIMENSIONLESS, name)
    return unit


def _eval_plan(plan: Plan, reg: "UnitsRegistry") -> Unit:
    kind = plan[0]
    if kind == "name":
        return _lookup(plan[1], reg)
    elif kind == "pow":
        base = _eval_plan(plan[1], reg)
        exp = plan[2]
        if not isinstance(exp, int) or exp < 1:
            raise InvalidArgumentError(f"Unit exponents must be integers >= 1, got {exp!r}")
        return base.pow(exp)
    elif kind == "mul":
        # walk the right spine so long products stay off the call stack
        factors = []
        while plan[0] == "mul":
            factors.append(_eval_plan(plan[1], reg))
            plan = plan[2]
        result = _eval_plan(plan, reg)
        for unit in reversed(factors):
            result = unit.times(result)
        return result
    elif kind == "div":
        return _eval_plan(plan[1], reg).divide(_eval_plan(plan[2], reg))
    else:
        raise ParseError(f"Invalid plan node: {plan!r}", position=0)


# ---------------- Public API with caching-safe compilation ----------------
# Cache the *compiled plan* only. Safe across registries because there's no bound objects inside.
@lru_cache(maxsize=4096)
def _compile_unit_expr(expr: str) -> Plan:
    plan = _UnitExprParser(tokenize(expr), len(expr)).parse()
    logger.debug("compiled unit expression %r -> %r", expr, plan)
    return plan


def extract_unit_expr(expr: str, reg: "UnitsRegistry") -> Unit:
    """Parse ``expr`` and evaluate it against ``reg``."""
    return _eval_plan(_compile_unit_expr(expr), reg)


def parse_unit(expr: str, registry: Optional["UnitsRegistry"] = None) -> Unit:
    """
    Turn a unit expression into a `Unit`.

    >>> parse_unit("m^3/s^2") == METRE.pow(3).divide(SECOND.pow(2))  # doctest: +SKIP
    True

    Allowed syntax:
      * Unit symbols (letters, ``_``, ``Ω``, ``°``, ``Å``, quote marks).
      * ``*`` between terms, at most one ``/``, ``^`` followed by an
        optionally signed integer.

    Raises `LexError` on stray characters, `ParseError` on malformed input
    and `InvalidArgumentError` for exponents below 1. Identifiers missing
    from ``registry`` (the default registry if omitted) evaluate to
    dimensionless units named after themselves.
    """
    if registry is None:
        from unitpipe.units.registry import default_registry

        registry = default_registry()
    return extract_unit_expr(expr, registry)


__all__ = ["Token", "tokenize", "parse_unit", "extract_unit_expr"]
