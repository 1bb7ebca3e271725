import math

import pytest

from unitpipe.core.dimensions import LENGTH, MASS, TEMPERATURE, TIME
from unitpipe.core.quantity import Quantity
from unitpipe.units import catalog
from unitpipe.units.catalog import (
    ACRE,
    ATMOSPHERE,
    BAR,
    BYTE,
    BIT,
    CELSIUS,
    DAY,
    DEGREE_ANGLE,
    FAHRENHEIT,
    FOOT,
    GALLON_DRY_US,
    GALLON_LIQUID_US,
    HOUR,
    INCH,
    JOULE,
    KELVIN,
    KILOGRAM,
    KNOT,
    LITRE,
    METRE,
    METER,
    MILE,
    NAUTICAL_MILE,
    NEWTON,
    NON_SI,
    OUNCE_LIQUID_US,
    POUND,
    RADIAN,
    RANKINE,
    SECOND,
    SI,
    WATT,
)
from unitpipe.units.parser import parse_unit


def _convert(value, src, dst):
    return Quantity(value, src).to(dst).value


def test_mappings_are_read_only():
    with pytest.raises(TypeError):
        SI["FURLONG"] = METRE

def test_alternate_spellings():
    assert METER is METRE
    assert SI["METER"] is SI["METRE"]

def test_all_exports_exist():
    for name in catalog.__all__:
        assert hasattr(catalog, name), name

def test_base_units_are_base():
    for u in (METRE, KILOGRAM, SECOND, KELVIN):
        assert u.is_base

def test_named_derived_dimensions():
    assert NEWTON.dimension == MASS * LENGTH / TIME ** 2
    assert JOULE.dimension == NEWTON.dimension * LENGTH
    assert WATT.dimension == JOULE.dimension / TIME

@pytest.mark.parametrize(
    "value, src, dst, expected",
    [
        (1, FOOT, METRE, 0.3048),
        (1, INCH, METRE, 0.0254),
        (1, MILE, METRE, 1609.344),
        (1, NAUTICAL_MILE, METRE, 1852),
        (1, POUND, KILOGRAM, 0.45359237),
        (1, DAY, HOUR, 24),
        (1, ATMOSPHERE, BAR, 1.01325),
        (1, ACRE, METRE.pow(2), 4046.8564224),
        (1, KNOT, METRE.divide(SECOND), 1852 / 3600),
        (1, BYTE, BIT, 8),
        (180, DEGREE_ANGLE, RADIAN, math.pi),
        (1, GALLON_LIQUID_US, LITRE, 3.785411784),
        (0, CELSIUS, KELVIN, 273.15),
        (212, FAHRENHEIT, CELSIUS, 100),
        (491.67, RANKINE, KELVIN, 273.15),
    ],
)
def test_catalogue_conversions(value, src, dst, expected):
    assert _convert(value, src, dst) == pytest.approx(expected, rel=1e-9)

@pytest.mark.regression(reason="US fluid ounce is 1/128 of a US liquid gallon")
def test_us_fluid_ounce():
    assert _convert(128, OUNCE_LIQUID_US, GALLON_LIQUID_US) == pytest.approx(1)
    assert _convert(1, OUNCE_LIQUID_US, LITRE) == pytest.approx(0.0295735295625)

@pytest.mark.regression(reason="US dry gallon is 268.8025 cubic inches")
def test_us_dry_gallon():
    assert _convert(1, GALLON_DRY_US, LITRE) == pytest.approx(4.40488377086)

def test_temperature_dimension():
    for u in (KELVIN, CELSIUS, FAHRENHEIT, RANKINE):
        assert u.dimension == TEMPERATURE

def test_every_catalogue_symbol_parses_back():
    for unit in (*SI.values(), *NON_SI.values()):
        symbol = str(unit)
        if not symbol:
            continue
        parsed = parse_unit(symbol)
        assert parsed.dimension == unit.dimension, symbol
        assert str(parsed) == symbol
