"""
unitpipe: dimensional analysis and unit conversion driven by conversion pipelines.

Units are built algebraically from the SI base units (``METRE.divide(100, "cm")``,
``KELVIN.add(273.15, "°C")``) and every unit carries the invertible pipeline that
maps its magnitudes onto the base unit of its dimension, so conversions between
any two compatible units come for free. This module exposes a minimal, stable
public API; the unit catalogue and default registry are imported lazily to avoid
import-time side effects and circular imports.
"""

from importlib import metadata as _metadata
from typing import Any

__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("unitpipe")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

_LAZY = {
    "Quantity": ("unitpipe.core.quantity", "Quantity"),
    "Unit": ("unitpipe.core.unit", "Unit"),
    "Dimension": ("unitpipe.core.dimensions", "Dimension"),
    "SymbolicRational": ("unitpipe.core.rational", "SymbolicRational"),
    "parse_unit": ("unitpipe.units.parser", "parse_unit"),
    "UnitsRegistry": ("unitpipe.units.registry", "UnitsRegistry"),
}


def __getattr__(name: str) -> Any:
    if name == "u":
        from unitpipe.units import u
        return u
    if name in _LAZY:
        import importlib
        module, attr = _LAZY[name]
        return getattr(importlib.import_module(module), attr)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__license__", "u", *_LAZY]
