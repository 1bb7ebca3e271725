"""
Unit catalogue, expression parser and symbol registry.

Importing this package is cheap: the catalogue and the shared registry are
built on first access to one of the names below, e.g. ``from unitpipe.units
import u`` and then ``u.km``, ``u("m/s^2")``.
"""
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitpipe.units.registry import UnitNamespace

_FORWARDED = {
    "SI": "unitpipe.units.catalog",
    "NON_SI": "unitpipe.units.catalog",
    "parse_unit": "unitpipe.units.parser",
    "UnitsRegistry": "unitpipe.units.registry",
    "default_registry": "unitpipe.units.registry",
}


def _namespace() -> "UnitNamespace":
    from unitpipe.units.registry import default_registry  # local import
    return default_registry().as_namespace()


def __getattr__(name: str) -> Any:
    """Resolve ``u`` and the forwarded names on first use."""
    if name == "u":
        return _namespace()
    if name in _FORWARDED:
        import importlib
        return getattr(importlib.import_module(_FORWARDED[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["u", *_FORWARDED])
