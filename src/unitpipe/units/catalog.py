"""
unitpipe.units.catalog
======================

The built-in unit catalogue.

Every unit here is defined algebraically from the SI base units, so its
conversion pipeline is derived rather than written out. Two read-only
mappings are exported: ``SI`` (base, dimensionless and SI derived units)
and ``NON_SI`` (customary, astronomical, CGS and other units).
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from unitpipe.core.dimensions import (
    AMOUNT_OF_SUBSTANCE,
    ELECTRIC_CURRENT,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    NONE,
    TEMPERATURE,
    TIME,
)
from unitpipe.core.unit import Unit

# Constants used in SI/US conversions
STANDARD_GRAVITY_DIVIDEND = 980665
STANDARD_GRAVITY_DIVISOR = 100000
INTERNATIONAL_FOOT_DIVIDEND = 3048
INTERNATIONAL_FOOT_DIVISOR = 10000
AVOIRDUPOIS_POUND_DIVIDEND = 45359237
AVOIRDUPOIS_POUND_DIVISOR = 100000000
AVOGADRO_CONSTANT = 6.02214199e23
ELEMENTARY_CHARGE = 1.602176462e-19

# ---------------------------------------------------------------------------
# SI base units
# ---------------------------------------------------------------------------
ONE = Unit(NONE, "")
METRE = Unit(LENGTH, "m")
KILOGRAM = Unit(MASS, "kg")
SECOND = Unit(TIME, "s")
AMPERE = Unit(ELECTRIC_CURRENT, "A")
KELVIN = Unit(TEMPERATURE, "K")
MOLE = Unit(AMOUNT_OF_SUBSTANCE, "mol")
CANDELA = Unit(LUMINOUS_INTENSITY, "cd")

# Dimensionless
RADIAN = Unit(NONE, "rad")
STERADIAN = Unit(NONE, "sr")
BIT = Unit(NONE, "bit")

# Derived length / mass units
MILLIMETRE = METRE.divide(1000, "mm")
CENTIMETRE = METRE.divide(100, "cm")
KILOMETRE = METRE.times(1000, "km")
GRAM = KILOGRAM.divide(1000, "g")
MILLIGRAM = GRAM.divide(1000, "mg")

# Named derived units
HERTZ = ONE.divide(SECOND, "Hz")                         # frequency
NEWTON = METRE.times(KILOGRAM).divide(SECOND.pow(2), "N")  # force
PASCAL = NEWTON.divide(METRE.pow(2), "Pa")               # pressure
JOULE = NEWTON.times(METRE, "J")                         # energy
WATT = JOULE.divide(SECOND, "W")                         # power
COULOMB = SECOND.times(AMPERE, "C")                      # electric charge
VOLT = WATT.divide(AMPERE, "V")                          # electric potential
FARAD = COULOMB.divide(VOLT, "F")                        # capacitance
OHM = VOLT.divide(AMPERE, "Ω")                           # resistance
SIEMENS = AMPERE.divide(VOLT, "S")                       # conductance
WEBER = VOLT.times(SECOND, "Wb")                         # magnetic flux
TESLA = WEBER.divide(METRE.pow(2), "T")                  # magnetic flux density
HENRY = WEBER.divide(AMPERE, "H")                        # inductance
CELSIUS = KELVIN.add(273.15, "°C")                       # temperature
LUMEN = CANDELA.times(STERADIAN, "lm")                   # luminous flux
LUX = LUMEN.divide(METRE.pow(2), "lx")                   # illuminance
BECQUEREL = ONE.divide(SECOND, "Bq")                     # radioactive activity
GRAY = JOULE.divide(KILOGRAM, "Gy")                      # absorbed dose
SIEVERT = JOULE.divide(KILOGRAM, "Sv")                   # effective dose
KATAL = MOLE.divide(SECOND, "kat")                       # catalytic activity
SQUARE_METRE = METRE.times(METRE)
CUBIC_METRE = SQUARE_METRE.times(METRE)
METRES_PER_SECOND = METRE.divide(SECOND)
METRES_PER_SQUARE_SECOND = METRES_PER_SECOND.divide(SECOND)

# ---------------------------------------------------------------------------
# Non-SI units
# ---------------------------------------------------------------------------
PERCENT = ONE.divide(100, "prcnt")
ATOM = MOLE.divide(AVOGADRO_CONSTANT, "atom")

# Length
FOOT = METRE.times(INTERNATIONAL_FOOT_DIVIDEND, "").divide(INTERNATIONAL_FOOT_DIVISOR, "ft")
FOOT_SURVEY_US = METRE.times(1200, "").divide(3937, "foot_survey_us")
YARD = FOOT.times(3, "yd")
INCH = FOOT.divide(12, "in")
MILE = METRE.times(1609344, "").divide(1000, "mi")
NAUTICAL_MILE = METRE.times(1852, "nmi")
ANGSTROM = METRE.divide(10000000000, "Å")
ASTRONOMICAL_UNIT = METRE.times(149597870691.0, "ua")
LIGHT_YEAR = METRE.times(9.460528405e15, "ly")
PARSEC = METRE.times(30856770e9, "pc")
POINT = INCH.times(13837, "").divide(1000000, "pt")
PIXEL = INCH.divide(72, "px")

# Time
MINUTE = SECOND.times(60, "min")
HOUR = MINUTE.times(60, "hr")
DAY = HOUR.times(24, "d")
WEEK = DAY.times(7, "week")
YEAR = SECOND.times(31556952, "year")
MONTH = YEAR.divide(12, "month")
DAY_SIDEREAL = SECOND.times(86164.09, "day_sidereal")
YEAR_SIDEREAL = DAY.times(365, "year_sidereal")
YEAR_CALENDAR = SECOND.times(31558149.54, "year_calendar")

# Mass
ATOMIC_MASS = KILOGRAM.times(1e-3 / AVOGADRO_CONSTANT, "u")
ELECTRON_MASS = KILOGRAM.times(9.10938188e-31, "me")
POUND = KILOGRAM.times(AVOIRDUPOIS_POUND_DIVIDEND, "").divide(AVOIRDUPOIS_POUND_DIVISOR, "lb")
OUNCE = POUND.divide(16, "oz")
TON_US = POUND.times(2000, "ton_us")
TON_UK = POUND.times(2240, "ton_uk")
METRIC_TON = KILOGRAM.times(1000, "t")

# Charge
E = COULOMB.times(ELEMENTARY_CHARGE, "e")
FARADAY = COULOMB.times(ELEMENTARY_CHARGE * AVOGADRO_CONSTANT, "Fd")
FRANKLIN = COULOMB.times(3.3356e-10, "Fr")

# Temperature
RANKINE = KELVIN.times(5, "").divide(9, "°R")
FAHRENHEIT = RANKINE.add(459.67, "°F")

# Angle
REVOLUTION = RADIAN.times(2 * math.pi, "rev")
DEGREE_ANGLE = REVOLUTION.divide(360, "°")
MINUTE_ANGLE = DEGREE_ANGLE.divide(60, '"')
SECOND_ANGLE = MINUTE_ANGLE.divide(60, "'")
CENTIRADIAN = RADIAN.divide(100, "centiradian")
GRADE = REVOLUTION.divide(400, "grade")

# Speed / acceleration
MILES_PER_HOUR = MILE.divide(HOUR)
KILOMETRES_PER_HOUR = KILOMETRE.divide(HOUR)
KNOT = NAUTICAL_MILE.divide(HOUR, "kn")
MACH = METRES_PER_SECOND.times(331.6, "Mach")
C = METRES_PER_SECOND.times(299792458, "c")
G = METRES_PER_SQUARE_SECOND.times(STANDARD_GRAVITY_DIVIDEND, "").divide(STANDARD_GRAVITY_DIVISOR, "grav")

# Area
ARE = SQUARE_METRE.times(100, "a")
HECTARE = ARE.times(100, "ha")
ACRE = YARD.pow(2).times(4840, "ac")

# Information
BYTE = BIT.times(8, "byte")

# Electromagnetism, energy, force, power, pressure
GILBERT = AMPERE.times(10.0 / (4.0 * math.pi), "Gi")
ERG = JOULE.divide(10000000, "Erg")
ELECTRON_VOLT = JOULE.times(ELEMENTARY_CHARGE, "eV")
LAMBERT = LUX.times(10000, "La")
MAXWELL = WEBER.divide(100000000, "Mx")
GAUSS = TESLA.divide(10000, "G")
DYNE = NEWTON.divide(100000, "dyn")
KILOGRAM_FORCE = NEWTON.times(STANDARD_GRAVITY_DIVIDEND, "").divide(STANDARD_GRAVITY_DIVISOR, "kgf")
POUND_FORCE = NEWTON.times(AVOIRDUPOIS_POUND_DIVIDEND * STANDARD_GRAVITY_DIVIDEND, "").divide(
    AVOIRDUPOIS_POUND_DIVISOR * STANDARD_GRAVITY_DIVISOR, "lbf"
)
HORSEPOWER = WATT.times(735.499, "hp")
ATMOSPHERE = PASCAL.times(101325, "atm")
BAR = PASCAL.times(100000, "bar")
MILLIMETER_OF_MERCURY = PASCAL.times(133.322, "mmHg")
INCH_OF_MERCURY = PASCAL.times(3386.388, "inHg")

# Radiation
RAD = GRAY.divide(100, "rd")
REM = SIEVERT.divide(100, "rem")
CURIE = BECQUEREL.times(37000000000, "Ci")
RUTHERFORD = BECQUEREL.times(1000000, "Rd")
ROENTGEN = COULOMB.divide(KILOGRAM).times(2.58e-4, "Roentgen")

# Solid angle
SPHERE = STERADIAN.times(4 * math.pi, "sphere")

# Volume
LITRE = CUBIC_METRE.divide(1000, "L")
CUBIC_INCH = INCH.pow(3)
GALLON_LIQUID_US = CUBIC_INCH.times(231, "gal")
OUNCE_LIQUID_US = GALLON_LIQUID_US.divide(128, "oz_fl")
GALLON_DRY_US = CUBIC_INCH.times(268.8025, "gal_dry_us")
GALLON_UK = LITRE.times(454609, "").divide(100000, "gal_uk")
OUNCE_LIQUID_UK = GALLON_UK.divide(160, "oz_fl_uk")

# Viscosity
POISE = GRAM.divide(CENTIMETRE.times(SECOND))
STOKE = CENTIMETRE.pow(2).divide(SECOND)

# Alternate spellings
METER = METRE
MILLIMETER = MILLIMETRE
CENTIMETER = CENTIMETRE
KILOMETER = KILOMETRE
SQUARE_METER = SQUARE_METRE
CUBIC_METER = CUBIC_METRE
METERS_PER_SECOND = METRES_PER_SECOND
KILOMETERS_PER_HOUR = KILOMETRES_PER_HOUR
METERS_PER_SQUARE_SECOND = METRES_PER_SQUARE_SECOND


SI: Mapping[str, Unit] = MappingProxyType({
    # Base units
    "ONE": ONE,
    "METRE": METRE,
    "METER": METRE,  # alternate spelling
    "KILOGRAM": KILOGRAM,
    "SECOND": SECOND,
    "AMPERE": AMPERE,
    "KELVIN": KELVIN,
    "MOLE": MOLE,
    "CANDELA": CANDELA,

    # Dimensionless
    "RADIAN": RADIAN,
    "STERADIAN": STERADIAN,
    "BIT": BIT,

    # Derived length / mass
    "MILLIMETRE": MILLIMETRE,
    "MILLIMETER": MILLIMETRE,
    "CENTIMETRE": CENTIMETRE,
    "CENTIMETER": CENTIMETRE,
    "KILOMETRE": KILOMETRE,
    "KILOMETER": KILOMETRE,
    "GRAM": GRAM,
    "MILLIGRAM": MILLIGRAM,

    # Named derived units
    "HERTZ": HERTZ,
    "NEWTON": NEWTON,
    "PASCAL": PASCAL,
    "JOULE": JOULE,
    "WATT": WATT,
    "COULOMB": COULOMB,
    "VOLT": VOLT,
    "FARAD": FARAD,
    "OHM": OHM,
    "SIEMENS": SIEMENS,
    "WEBER": WEBER,
    "TESLA": TESLA,
    "HENRY": HENRY,
    "CELSIUS": CELSIUS,
    "LUMEN": LUMEN,
    "LUX": LUX,
    "BECQUEREL": BECQUEREL,
    "GRAY": GRAY,
    "SIEVERT": SIEVERT,
    "KATAL": KATAL,
    "SQUARE_METRE": SQUARE_METRE,
    "SQUARE_METER": SQUARE_METRE,
    "CUBIC_METRE": CUBIC_METRE,
    "CUBIC_METER": CUBIC_METRE,
    "METRES_PER_SECOND": METRES_PER_SECOND,
    "METERS_PER_SECOND": METRES_PER_SECOND,
    "KILOMETRES_PER_HOUR": KILOMETRES_PER_HOUR,
    "KILOMETERS_PER_HOUR": KILOMETRES_PER_HOUR,
    "METRES_PER_SQUARE_SECOND": METRES_PER_SQUARE_SECOND,
    "METERS_PER_SQUARE_SECOND": METRES_PER_SQUARE_SECOND,
})

NON_SI: Mapping[str, Unit] = MappingProxyType({
    "PERCENT": PERCENT,
    "ATOM": ATOM,
    "FOOT": FOOT,
    "FOOT_SURVEY_US": FOOT_SURVEY_US,
    "YARD": YARD,
    "INCH": INCH,
    "MILE": MILE,
    "NAUTICAL_MILE": NAUTICAL_MILE,
    "ANGSTROM": ANGSTROM,
    "ASTRONOMICAL_UNIT": ASTRONOMICAL_UNIT,
    "LIGHT_YEAR": LIGHT_YEAR,
    "PARSEC": PARSEC,
    "POINT": POINT,
    "PIXEL": PIXEL,
    "MINUTE": MINUTE,
    "HOUR": HOUR,
    "DAY": DAY,
    "WEEK": WEEK,
    "YEAR": YEAR,
    "MONTH": MONTH,
    "DAY_SIDEREAL": DAY_SIDEREAL,
    "YEAR_SIDEREAL": YEAR_SIDEREAL,
    "YEAR_CALENDAR": YEAR_CALENDAR,
    "ATOMIC_MASS": ATOMIC_MASS,
    "ELECTRON_MASS": ELECTRON_MASS,
    "POUND": POUND,
    "OUNCE": OUNCE,
    "TON_US": TON_US,
    "TON_UK": TON_UK,
    "METRIC_TON": METRIC_TON,
    "E": E,
    "FARADAY": FARADAY,
    "FRANKLIN": FRANKLIN,
    "RANKINE": RANKINE,
    "FAHRENHEIT": FAHRENHEIT,
    "REVOLUTION": REVOLUTION,
    "DEGREE_ANGLE": DEGREE_ANGLE,
    "MINUTE_ANGLE": MINUTE_ANGLE,
    "SECOND_ANGLE": SECOND_ANGLE,
    "CENTIRADIAN": CENTIRADIAN,
    "GRADE": GRADE,
    "MILES_PER_HOUR": MILES_PER_HOUR,
    "KNOT": KNOT,
    "MACH": MACH,
    "C": C,
    "G": G,
    "ARE": ARE,
    "HECTARE": HECTARE,
    "ACRE": ACRE,
    "BYTE": BYTE,
    "GILBERT": GILBERT,
    "ERG": ERG,
    "ELECTRON_VOLT": ELECTRON_VOLT,
    "LAMBERT": LAMBERT,
    "MAXWELL": MAXWELL,
    "GAUSS": GAUSS,
    "DYNE": DYNE,
    "KILOGRAM_FORCE": KILOGRAM_FORCE,
    "POUND_FORCE": POUND_FORCE,
    "HORSEPOWER": HORSEPOWER,
    "ATMOSPHERE": ATMOSPHERE,
    "BAR": BAR,
    "MILLIMETER_OF_MERCURY": MILLIMETER_OF_MERCURY,
    "INCH_OF_MERCURY": INCH_OF_MERCURY,
    "RAD": RAD,
    "REM": REM,
    "CURIE": CURIE,
    "RUTHERFORD": RUTHERFORD,
    "SPHERE": SPHERE,
    "LITRE": LITRE,
    "CUBIC_INCH": CUBIC_INCH,
    "GALLON_LIQUID_US": GALLON_LIQUID_US,
    "OUNCE_LIQUID_US": OUNCE_LIQUID_US,
    "GALLON_DRY_US": GALLON_DRY_US,
    "GALLON_UK": GALLON_UK,
    "OUNCE_LIQUID_UK": OUNCE_LIQUID_UK,
    "POISE": POISE,
    "STOKE": STOKE,
    "ROENTGEN": ROENTGEN,
})

__all__ = ["SI", "NON_SI"] + sorted(set(SI) | set(NON_SI))
