"""
measura.catalog.definitions
===========================

Built-in definition feed: quantities, their units, and the alias seed.

Each unit is ``(name, symbol, a, b, c, d)`` with ``base = (a*v + b) / (c*v + d)``,
or a display override appended as a seventh item. The first unit of every
quantity is its base.
"""

from __future__ import annotations

import math
from typing import Iterator, Optional, Tuple

from measura.catalog.feed import AliasRecord, UnitRecord

UnitDef = Tuple  # (name, symbol, a, b, c, d[, display])


def _lin(name: str, symbol: str, scale: float, offset: float = 0.0,
         display: Optional[str] = None) -> UnitDef:
    return (name, symbol, scale, offset, 0.0, 1.0, display)


def _rat(name: str, symbol: str, a: float, b: float, c: float, d: float,
         display: Optional[str] = None) -> UnitDef:
    return (name, symbol, a, b, c, d, display)


# ---------------------------------------------------------------------------
# Exact or conventional factors
# ---------------------------------------------------------------------------
_FT = 0.3048
_IN = 0.0254
_MI = 1609.344
_NMI = 1852.0
_LBM = 0.45359237
_GAL_US = 3.785411784e-3
_GAL_UK = 4.54609e-3
_BBL = 42 * _GAL_US
_STD_G = 9.80665
_LBF = _LBM * _STD_G
_BTU = 1055.05585262          # International Table
_HOUR = 3600.0
_DAY = 86400.0

QUANTITIES: Tuple[Tuple[str, str, Tuple[UnitDef, ...]], ...] = (
    ("length", "Distance between two points.", (
        _lin("metre", "m", 1.0),
        _lin("kilometre", "km", 1e3),
        _lin("centimetre", "cm", 1e-2),
        _lin("millimetre", "mm", 1e-3),
        _lin("micrometre", "um", 1e-6),
        _lin("nanometre", "nm", 1e-9),
        _lin("angstrom", "Angstrom", 1e-10),
        _lin("foot", "ft", _FT),
        _lin("US survey foot", "ftUS", 1200.0 / 3937.0),
        _lin("inch", "in", _IN),
        _lin("yard", "yd", 3 * _FT),
        _lin("mile", "mi", _MI),
        _lin("nautical mile", "nmi", _NMI),
    )),
    ("mass", "Amount of matter of a body.", (
        _lin("kilogram", "kg", 1.0),
        _lin("gram", "g", 1e-3),
        _lin("milligram", "mg", 1e-6),
        _lin("microgram", "ug", 1e-9),
        _lin("tonne", "t", 1e3),
        _lin("pound mass", "lbm", _LBM),
        _lin("ounce mass", "ozm", _LBM / 16),
        _lin("grain", "gr", _LBM / 7000),
        _lin("short ton", "tonUS", 2000 * _LBM),
        _lin("long ton", "tonUK", 2240 * _LBM),
    )),
    ("time", "Duration of an event.", (
        _lin("second", "s", 1.0),
        _lin("millisecond", "ms", 1e-3),
        _lin("microsecond", "us", 1e-6),
        _lin("nanosecond", "ns", 1e-9),
        _lin("minute", "min", 60.0),
        _lin("hour", "h", _HOUR),
        _lin("day", "d", _DAY),
        _lin("week", "wk", 7 * _DAY),
        _lin("julian year", "a", 365.25 * _DAY),
    )),
    ("temperature", "Thermodynamic temperature.", (
        _lin("kelvin", "K", 1.0),
        _lin("degree Celsius", "degC", 1.0, 273.15),
        _lin("degree Fahrenheit", "degF", 5.0 / 9.0, 459.67 * 5.0 / 9.0),
        _lin("degree Rankine", "degR", 5.0 / 9.0),
    )),
    ("pressure", "Force per unit area.", (
        _lin("pascal", "Pa", 1.0),
        _lin("kilopascal", "kPa", 1e3),
        _lin("megapascal", "MPa", 1e6),
        _lin("gigapascal", "GPa", 1e9),
        _lin("bar", "bar", 1e5),
        _lin("millibar", "mbar", 1e2),
        _lin("standard atmosphere", "atm", 101325.0),
        _lin("pound-force per square inch", "psi", _LBF / _IN ** 2),
        _lin("kilopound-force per square inch", "ksi", 1e3 * _LBF / _IN ** 2),
        _lin("torr", "torr", 101325.0 / 760.0),
        _lin("millimetre of mercury", "mmHg", 133.322387415),
        _lin("inch of mercury", "inHg", 3386.388640341),
        _lin("kilogram-force per square centimetre", "kgf/cm2", _STD_G * 1e4),
    )),
    ("velocity", "Distance travelled per unit time.", (
        _lin("metre per second", "m/s", 1.0),
        _lin("centimetre per second", "cm/s", 1e-2),
        _lin("kilometre per hour", "km/h", 1e3 / _HOUR),
        _lin("mile per hour", "mi/h", _MI / _HOUR),
        _lin("foot per second", "ft/s", _FT),
        _lin("knot", "knot", _NMI / _HOUR),
    )),
    ("area", "Extent of a surface.", (
        _lin("square metre", "m2", 1.0),
        _lin("square centimetre", "cm2", 1e-4),
        _lin("square millimetre", "mm2", 1e-6),
        _lin("square kilometre", "km2", 1e6),
        _lin("hectare", "ha", 1e4),
        _lin("acre", "acre", 4046.8564224),
        _lin("square foot", "ft2", _FT ** 2),
        _lin("square inch", "in2", _IN ** 2),
        _lin("square yard", "yd2", (3 * _FT) ** 2),
        _lin("square mile", "mi2", _MI ** 2),
    )),
    ("volume", "Extent of a three-dimensional region.", (
        _lin("cubic metre", "m3", 1.0),
        _lin("litre", "L", 1e-3),
        _lin("millilitre", "mL", 1e-6),
        _lin("cubic decimetre", "dm3", 1e-3),
        _lin("cubic centimetre", "cm3", 1e-6),
        _lin("cubic foot", "ft3", _FT ** 3),
        _lin("cubic inch", "in3", _IN ** 3),
        _lin("US gallon", "galUS", _GAL_US),
        _lin("UK gallon", "galUK", _GAL_UK),
        _lin("US fluid ounce", "flozUS", _GAL_US / 128),
        _lin("barrel", "bbl", _BBL),
    )),
    ("volume flow rate", "Volume passing per unit time.", (
        _lin("cubic metre per second", "m3/s", 1.0),
        _lin("cubic metre per hour", "m3/h", 1.0 / _HOUR),
        _lin("cubic metre per day", "m3/d", 1.0 / _DAY),
        _lin("litre per second", "L/s", 1e-3),
        _lin("litre per minute", "L/min", 1e-3 / 60),
        _lin("cubic foot per second", "ft3/s", _FT ** 3),
        _lin("US gallon per minute", "galUS/min", _GAL_US / 60),
        _lin("barrel per day", "bbl/d", _BBL / _DAY),
    )),
    ("mass flow rate", "Mass passing per unit time.", (
        _lin("kilogram per second", "kg/s", 1.0),
        _lin("kilogram per hour", "kg/h", 1.0 / _HOUR),
        _lin("tonne per hour", "t/h", 1e3 / _HOUR),
        _lin("pound mass per second", "lbm/s", _LBM),
        _lin("pound mass per hour", "lbm/h", _LBM / _HOUR),
    )),
    ("density", "Mass per unit volume.", (
        _lin("kilogram per cubic metre", "kg/m3", 1.0),
        _lin("gram per cubic centimetre", "g/cm3", 1e3),
        _lin("gram per litre", "g/L", 1.0),
        _lin("pound mass per cubic foot", "lbm/ft3", _LBM / _FT ** 3),
        _lin("pound mass per US gallon", "lbm/galUS", _LBM / _GAL_US),
    )),
    ("relative density", "Density relative to water at 60 degF.", (
        _lin("specific gravity", "sg", 1.0),
        # sg = 141.5 / (API + 131.5)
        _rat("API gravity", "dAPI", 0.0, 141.5, 1.0, 131.5),
        # heavier than water: sg = 145 / (145 - Be)
        _rat("degree Baume", "dBaume", 0.0, 145.0, -1.0, 145.0),
    )),
    ("energy", "Capacity to do work.", (
        _lin("joule", "J", 1.0),
        _lin("kilojoule", "kJ", 1e3),
        _lin("megajoule", "MJ", 1e6),
        _lin("gigajoule", "GJ", 1e9),
        _lin("calorie", "cal", 4.184),
        _lin("kilocalorie", "kcal", 4184.0),
        _lin("British thermal unit", "Btu", _BTU),
        _lin("watt hour", "W.h", _HOUR),
        _lin("kilowatt hour", "kW.h", 1e3 * _HOUR),
        _lin("electronvolt", "eV", 1.602176634e-19),
        _lin("erg", "erg", 1e-7),
        _lin("foot pound-force", "ft.lbf", _FT * _LBF),
    )),
    ("power", "Energy transferred per unit time.", (
        _lin("watt", "W", 1.0),
        _lin("kilowatt", "kW", 1e3),
        _lin("megawatt", "MW", 1e6),
        _lin("gigawatt", "GW", 1e9),
        _lin("mechanical horsepower", "hp", 550 * _FT * _LBF),
        _lin("metric horsepower", "hpM", 75 * _STD_G),
        _lin("British thermal unit per hour", "Btu/h", _BTU / _HOUR),
    )),
    ("force", "Interaction that changes the motion of a body.", (
        _lin("newton", "N", 1.0),
        _lin("kilonewton", "kN", 1e3),
        _lin("meganewton", "MN", 1e6),
        _lin("dyne", "dyne", 1e-5),
        _lin("pound-force", "lbf", _LBF),
        _lin("kilopound-force", "kip", 1e3 * _LBF),
        _lin("kilogram-force", "kgf", _STD_G),
    )),
    ("frequency", "Number of occurrences per unit time.", (
        _lin("hertz", "Hz", 1.0),
        _lin("kilohertz", "kHz", 1e3),
        _lin("megahertz", "MHz", 1e6),
        _lin("gigahertz", "GHz", 1e9),
        _lin("per minute", "1/min", 1.0 / 60),
    )),
    ("plane angle", "Figure formed by two rays.", (
        _lin("radian", "rad", 1.0),
        _lin("milliradian", "mrad", 1e-3),
        _lin("degree of an angle", "dega", math.pi / 180),
        _lin("minute of arc", "mina", math.pi / 10800, display="′"),
        _lin("second of arc", "seca", math.pi / 648000, display="″"),
        _lin("gon", "gon", math.pi / 200),
        _lin("revolution", "rev", 2 * math.pi),
    )),
    ("dynamic viscosity", "Resistance of a fluid to shear.", (
        _lin("pascal second", "Pa.s", 1.0),
        _lin("millipascal second", "mPa.s", 1e-3),
        _lin("poise", "P", 0.1),
        _lin("centipoise", "cP", 1e-3),
    )),
    ("fuel economy", "Distance travelled per unit volume of fuel.", (
        _lin("kilometre per litre", "km/L", 1.0),
        _lin("mile per US gallon", "mi/galUS", (_MI / 1e3) / (_GAL_US * 1e3)),
        _lin("mile per UK gallon", "mi/galUK", (_MI / 1e3) / (_GAL_UK * 1e3)),
        # km/L = 100 / (L/100km)
        _rat("litre per 100 kilometres", "L/100km", 0.0, 100.0, 1.0, 0.0),
    )),
    ("dimensionless", "Ratio of two values of the same quantity.", (
        _lin("euclid", "Euc", 1.0),
        _lin("percent", "%", 1e-2),
        _lin("part per thousand", "ppk", 1e-3),
        _lin("part per million", "ppm", 1e-6),
        _lin("part per billion", "ppb", 1e-9),
    )),
)

ALIASES: Tuple[Tuple[str, str], ...] = (
    # length
    ("m", "meter"), ("m", "metre"), ("km", "kilometer"),
    ("ft", "foot"), ("ft", "feet"), ("in", "inch"), ("yd", "yard"),
    ("mi", "mile"), ("um", "µm"), ("um", "micron"),
    # mass
    ("kg", "kilogram"), ("g", "gram"), ("t", "tonne"),
    ("lbm", "lb"), ("lbm", "lbs"), ("ozm", "oz"), ("ug", "µg"),
    # time
    ("s", "sec"), ("min", "minute"), ("h", "hr"), ("h", "hour"), ("d", "day"),
    ("us", "µs"),
    # temperature
    ("K", "kelvin"), ("degC", "°C"), ("degC", "celsius"),
    ("degF", "°F"), ("degF", "fahrenheit"), ("degR", "°R"),
    # pressure
    ("atm", "atmosphere"), ("psi", "lbf/in2"),
    # velocity
    ("mi/h", "mph"), ("km/h", "kph"), ("km/h", "kmh"), ("knot", "kn"), ("knot", "kt"),
    # area / volume
    ("ft2", "sqft"), ("L", "l"), ("L", "liter"), ("L", "litre"), ("mL", "ml"),
    ("cm3", "cc"), ("galUS", "gal"), ("bbl", "barrel"),
    # flow rates
    ("bbl/d", "bpd"), ("galUS/min", "gpm"),
    # energy / power / force
    ("kW.h", "kWh"), ("W.h", "Wh"), ("Btu", "BTU"), ("cal", "calorie"),
    ("hp", "horsepower"), ("lbf", "pound-force"),
    # frequency / angle
    ("Hz", "hertz"), ("1/min", "rpm"), ("rad", "radian"), ("dega", "deg"), ("dega", "°"),
    # viscosity
    ("Pa.s", "Pa*s"), ("cP", "centipoise"),
    # relative density / fuel economy / ratios
    ("sg", "SG"), ("dAPI", "API"), ("dAPI", "°API"),
    ("mi/galUS", "mpg"), ("L/100km", "l/100km"), ("%", "percent"),
)


def iter_unit_records() -> Iterator[UnitRecord]:
    """Yield the built-in feed as `UnitRecord`s."""
    for quantity, description, units in QUANTITIES:
        for i, (name, symbol, a, b, c, d, display) in enumerate(units):
            yield UnitRecord(quantity, description, name, symbol, a, b, c, d, i == 0, display)


def iter_alias_records() -> Iterator[AliasRecord]:
    """Yield the built-in alias seed."""
    for canonical, alias in ALIASES:
        yield AliasRecord(canonical, alias)


__all__ = ["QUANTITIES", "ALIASES", "iter_unit_records", "iter_alias_records"]
