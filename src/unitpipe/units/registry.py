"""
unitpipe.units.registry
=======================

The unit symbol table.

A `UnitsRegistry` maps display symbols (``"m"``, ``"km/hr"``, ``"°C"``) to
`Unit` objects and is what the expression parser consults when it meets an
identifier. Registries are plain objects: tests and embedding applications
create their own, and the package keeps one shared default registry that is
populated from the built-in catalogue.

Lifecycle
---------
- ``UnitsRegistry()`` starts populated with the SI and non-SI catalogue.
- `register` adds user-defined units, refusing symbols already taken.
- `alias` binds an extra symbol to an existing unit.
- `restore` drops everything user-defined and reloads the catalogue.

Registries are meant to be configured during start-up and read afterwards;
they do not lock, so concurrent mutation needs external synchronisation.
"""
from __future__ import annotations

import logging
import unicodedata
from typing import Dict, Iterator, Mapping, Optional

from unitpipe.core.errors import InvalidArgumentError, UnitConflictError
from unitpipe.core.unit import Unit
from unitpipe.units.catalog import NON_SI, SI
from unitpipe.units.parser import extract_unit_expr

logger = logging.getLogger(__name__)


def normalize_symbol(s: str) -> str:
    """Strip surrounding whitespace and compose to NFC (so a decomposed 'A' + ring matches 'Å')."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Symbol table of `Unit` objects keyed by display symbol."""

    def __init__(self, populate: bool = True) -> None:
        self._units: Dict[str, Unit] = {}
        self._user: Dict[str, Unit] = {}
        if populate:
            self.restore()

    # -------------------------- public API ---------------------------------
    def lookup(self, symbol: str) -> Optional[Unit]:
        """Return the unit registered under ``symbol``, or ``None``."""
        return self._units.get(normalize_symbol(symbol))

    def get(self, symbol: str) -> Unit:
        """
        Lookup a unit by symbol; composed expressions (``"m/s^2"``) are parsed.

        Raises `InvalidArgumentError` for an unknown plain symbol.
        """
        if any(op in symbol for op in ("*", "/", "^")):
            return extract_unit_expr(symbol, self)
        unit = self.lookup(symbol)
        if unit is None:
            raise InvalidArgumentError(f"Unknown unit symbol: {symbol}")
        return unit

    def parse(self, expr: str) -> Unit:
        """Evaluate a unit expression against this registry."""
        return extract_unit_expr(expr, self)

    def register(self, unit: Unit) -> None:
        """Register a user-defined unit under its display symbol."""
        sym = normalize_symbol(str(unit))
        if sym in self._units:
            raise UnitConflictError(f'Unit "{sym}" already registered')
        self._user[sym] = unit
        self._units[sym] = unit
        logger.debug("registered unit %r", sym)

    def alias(self, existing: str, new: str) -> None:
        """Make ``new`` resolve to the unit registered under ``existing``."""
        src = normalize_symbol(existing)
        if src not in self._units:
            raise InvalidArgumentError(f'Symbol "{existing}" is not associated with any unit')
        self._units[normalize_symbol(new)] = self._units[src]
        logger.debug("aliased %r -> %r", new, src)

    def restore(self) -> None:
        """Forget user registrations and aliases; reload the built-in catalogue."""
        self._user.clear()
        self._units.clear()
        for catalogue in (SI, NON_SI):
            for unit in catalogue.values():
                # several catalogue names share one symbol (METRE/METER); last one wins
                self._units[normalize_symbol(str(unit))] = unit
        logger.debug("restored %d catalogue symbols", len(self._units))

    def user_units(self) -> Mapping[str, Unit]:
        return dict(self._user)

    def all(self) -> Mapping[str, Unit]:
        return dict(self._units)

    def as_namespace(self) -> "UnitNamespace":
        return UnitNamespace(self)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.lookup(symbol) is not None

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)


class UnitNamespace:
    """Attribute-style access to a registry: ``u.m``, ``u.hr``, ``u("m/s")``."""

    def __init__(self, reg: UnitsRegistry) -> None:
        self._reg = reg

    def __contains__(self, expr: str) -> bool:
        return expr in self._reg

    def __call__(self, expr: str) -> Unit:
        return self._reg.get(expr)

    def __getattr__(self, name: str) -> Unit:
        try:
            return self._reg.get(name)
        except ValueError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit symbols for autocomplete."""
        return sorted(set(super().__dir__()) | {s for s in self._reg if s.isidentifier()})


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = UnitsRegistry()


def default_registry() -> UnitsRegistry:
    return DEFAULT_REGISTRY


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
    "default_registry",
    "normalize_symbol",
]
