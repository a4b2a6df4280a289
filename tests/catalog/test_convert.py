# pytest tests for UnitCatalog.convert
#
# The pivot-through-base conversion: alias transparency, cross-quantity
# rejection, the worked scenarios, and IEEE propagation.

import math

import pytest

from measura.core.errors import (
    CatalogError,
    IncompatibleQuantityError,
    UnitNotFoundError,
)
from measura.core.unit import Unit

from tests.utils import make_storage_quantity


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_mph_to_kmh(catalog):
    assert catalog.convert("mi/h", "km/h", 55.0) == pytest.approx(88.51, abs=5e-3)
    assert catalog.convert("mph", "km/h", 55.0) == pytest.approx(55.0 * 1.609344)


def test_computer_storage(empty_catalog):
    empty_catalog.add_quantity(make_storage_quantity())
    assert empty_catalog.convert("byte", "MB", 1_230_000) == pytest.approx(1.23)
    assert empty_catalog.convert("GB", "kB", 2) == pytest.approx(2e6)


def test_client_quantity_merges_with_builtin(catalog):
    catalog.add_quantity(make_storage_quantity())
    assert catalog.convert("byte", "MB", 1_230_000) == pytest.approx(1.23)
    assert catalog.convert("ft", "m", 1) == pytest.approx(0.3048)


def test_temperature_convertible_units(catalog):
    symbols = {u.symbol for u in catalog.find_convertible_units("degC")}
    assert {"degC", "degF", "K"} <= symbols


@pytest.mark.parametrize("frm, to, value, expected", [
    ("degC", "degF", 100.0, 212.0),
    ("degF", "degC", -40.0, -40.0),
    ("degC", "K", 0.0, 273.15),
    ("degF", "degR", 0.0, 459.67),
    ("atm", "psi", 1.0, 14.69594877551),
    ("bar", "kPa", 1.0, 100.0),
    ("galUS", "L", 1.0, 3.785411784),
    ("bbl", "m3", 1.0, 0.158987294928),
    ("kW.h", "MJ", 1.0, 3.6),
    ("hp", "W", 1.0, 745.69987158227),
    ("lbf", "N", 1.0, 4.4482216152605),
    ("dega", "rad", 180.0, math.pi),
    ("cP", "Pa.s", 1.0, 1e-3),
    ("g/cm3", "lbm/ft3", 1.0, 62.427960576145),
    ("knot", "km/h", 1.0, 1.852),
    ("acre", "ha", 1.0, 0.40468564224),
    ("%", "ppm", 1.0, 1e4),
])
def test_known_conversions(catalog, frm, to, value, expected):
    assert catalog.convert(frm, to, value) == pytest.approx(expected, rel=1e-9)


def test_api_gravity(catalog):
    # water is 10 degAPI
    assert catalog.convert("dAPI", "sg", 10.0) == pytest.approx(1.0)
    assert catalog.convert("sg", "dAPI", 0.876) == pytest.approx(141.5 / 0.876 - 131.5)
    assert catalog.convert("dBaume", "dAPI", 0.0) == pytest.approx(10.0)


def test_fuel_economy_reciprocal(catalog):
    assert catalog.convert("L/100km", "km/L", 5.0) == pytest.approx(20.0)
    assert catalog.convert("mpg", "L/100km", 30.0) == pytest.approx(7.840486, rel=1e-6)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("v", [-12.5, 0.3, 1.0, 98.6, 4.2e5])
def test_conversion_consistency(catalog, v):
    for q in catalog.get_quantities():
        units = q.units
        for a, b in zip(units, units[1:]):
            back = catalog.convert(a, b, catalog.convert(b, a, v))
            assert back == pytest.approx(v, rel=1e-9), (q.name, a.symbol, b.symbol)


@pytest.mark.parametrize("v", [-1e10, -3.5, 0.1, 7.0, 1e10])
def test_base_unit_identity(catalog, v):
    for q in catalog.get_quantities():
        base = q.base_unit
        assert catalog.convert(base, base, v) == v
        assert base.to_base(v) == v


@pytest.mark.parametrize("alias, canonical, target", [
    ("feet", "ft", "m"),
    ("foot", "ft", "in"),
    ("mph", "mi/h", "km/h"),
    ("°C", "degC", "degF"),
    ("kWh", "kW.h", "J"),
])
def test_alias_transparency(catalog, alias, canonical, target):
    assert catalog.convert(alias, target, 3.3) == catalog.convert(canonical, target, 3.3)
    assert catalog.convert(target, alias, 3.3) == catalog.convert(target, canonical, 3.3)


def test_alias_transparency_client_alias(catalog):
    catalog.add_unit_alias("ft", "pie")
    assert catalog.convert("pie", "m", 12.0) == catalog.convert("ft", "m", 12.0)


def test_same_unit_returns_value(catalog):
    assert catalog.convert("degF", "degF", 451.0) == 451.0
    assert catalog.convert("ft", "feet", 3.0) == 3.0


def test_unit_objects_accepted(catalog):
    ft = catalog.find_unit("ft")
    assert catalog.convert(ft, "m", 10) == pytest.approx(3.048)
    assert catalog.convert("m", ft, 3.048) == pytest.approx(10)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_cross_quantity_rejected(catalog):
    with pytest.raises(IncompatibleQuantityError) as exc:
        catalog.convert("degC", "m", 100)
    assert exc.value.from_quantity == "temperature"
    assert exc.value.to_quantity == "length"


@pytest.mark.parametrize("frm, to", [("furlong", "m"), ("m", "furlong")])
def test_unknown_unit(catalog, frm, to):
    with pytest.raises(UnitNotFoundError) as exc:
        catalog.convert(frm, to, 1.0)
    assert exc.value.symbol == "furlong"


def test_unregistered_unit_object(catalog):
    with pytest.raises(UnitNotFoundError):
        catalog.convert(Unit.linear("foot", "ft", 0.3048), "m", 1.0)


def test_errors_are_value_errors(catalog):
    with pytest.raises(ValueError):
        catalog.convert("degC", "m", 1)
    with pytest.raises(CatalogError):
        catalog.convert("nope", "m", 1)


# ---------------------------------------------------------------------------
# Numeric edge cases
# ---------------------------------------------------------------------------

def test_degenerate_result_propagates(catalog):
    assert catalog.convert("L/100km", "km/L", 0.0) == math.inf
    assert math.isinf(catalog.convert("km/L", "L/100km", 0.0))


def test_nan_propagates(catalog):
    assert math.isnan(catalog.convert("ft", "m", math.nan))


def test_to_base_and_from_base(catalog):
    assert catalog.to_base("degC", 25.0) == pytest.approx(298.15)
    assert catalog.from_base("celsius", 298.15) == pytest.approx(25.0)
    with pytest.raises(UnitNotFoundError):
        catalog.to_base("furlong", 1.0)
