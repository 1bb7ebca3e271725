import logging

import pytest

from unitpipe.core.dimensions import LENGTH, MASS
from unitpipe.core.errors import InvalidArgumentError, UnitConflictError
from unitpipe.core.unit import Unit
from unitpipe.units.catalog import KILOGRAM, METRE, NON_SI, SECOND, SI
from unitpipe.units.registry import DEFAULT_REGISTRY, UnitNamespace, UnitsRegistry, default_registry


# -------------------------------
# Lookup
# -------------------------------

def test_default_registry_is_shared(ureg):
    assert default_registry() is DEFAULT_REGISTRY is ureg

def test_catalogue_symbols_are_registered(ureg):
    for sym in ("m", "kg", "s", "cm", "km", "N", "Pa", "°C", "°F", "ft", "in", "mi", "hr", "L", "gal"):
        assert sym in ureg, sym

def test_get_returns_catalogue_objects(ureg):
    assert ureg.get("m") is METRE
    assert ureg.get("kg") is KILOGRAM

def test_get_parses_composed_expressions(ureg):
    assert ureg.get("m/s") == METRE.divide(SECOND)

def test_get_unknown_symbol_raises(ureg):
    with pytest.raises(InvalidArgumentError):
        ureg.get("nope")

def test_lookup_unknown_returns_none(ureg):
    assert ureg.lookup("nope") is None

def test_lookup_strips_whitespace(ureg):
    assert ureg.lookup("  m ") is METRE

def test_parse_method(ureg):
    assert ureg.parse("kg*m") == KILOGRAM.times(METRE)

def test_unpopulated_registry_is_empty():
    reg = UnitsRegistry(populate=False)
    assert len(reg) == 0
    assert "m" not in reg


# -------------------------------
# Registration
# -------------------------------

def test_register_user_unit(fresh_reg):
    stone = KILOGRAM.times(6.35029318, "st")
    fresh_reg.register(stone)
    assert fresh_reg.get("st") is stone
    assert fresh_reg.user_units() == {"st": stone}

def test_register_conflict_raises(fresh_reg):
    with pytest.raises(UnitConflictError):
        fresh_reg.register(Unit(LENGTH, "m"))

def test_register_logs(fresh_reg, caplog):
    with caplog.at_level(logging.DEBUG, logger="unitpipe.units.registry"):
        fresh_reg.register(Unit(MASS, "slug_mass"))
    assert "slug_mass" in caplog.text

def test_alias(fresh_reg):
    fresh_reg.alias("m", "metre")
    assert fresh_reg.get("metre") is METRE

def test_alias_unknown_raises(fresh_reg):
    with pytest.raises(InvalidArgumentError):
        fresh_reg.alias("nope", "still_nope")

def test_restore_drops_user_state(fresh_reg):
    fresh_reg.register(Unit(LENGTH, "league"))
    fresh_reg.alias("m", "metre")
    fresh_reg.restore()
    assert "league" not in fresh_reg
    assert "metre" not in fresh_reg
    assert fresh_reg.user_units() == {}
    assert fresh_reg.get("m") is METRE

def test_registries_are_isolated(fresh_reg, ureg):
    fresh_reg.register(Unit(LENGTH, "cubit"))
    assert "cubit" in fresh_reg
    assert "cubit" not in ureg

def test_all_covers_catalogue(fresh_reg):
    symbols = {str(u) for u in (*SI.values(), *NON_SI.values())}
    assert symbols <= set(fresh_reg.all())


# -------------------------------
# Namespace
# -------------------------------

def test_namespace_attribute_access(ureg):
    u = ureg.as_namespace()
    assert isinstance(u, UnitNamespace)
    assert u.m is METRE
    assert u("m/s") == METRE / SECOND
    assert "kg" in u

def test_namespace_unknown_attribute(ureg):
    u = ureg.as_namespace()
    with pytest.raises(AttributeError):
        u.nope

def test_namespace_dir_lists_identifier_symbols(ureg):
    names = dir(ureg.as_namespace())
    assert "m" in names and "kg" in names
    assert "°C" not in names

def test_package_level_u():
    import unitpipe
    from unitpipe.units import u

    assert u.km == unitpipe.u.km
    assert unitpipe.Quantity(1, u.km).to(u.m).value == 1000

def test_units_package_forwards_names():
    import unitpipe.units as units

    assert units.SI is SI
    assert units.default_registry() is DEFAULT_REGISTRY
    assert units.parse_unit("m") is METRE
    assert "u" in dir(units)
    with pytest.raises(AttributeError):
        units.nothing_here
