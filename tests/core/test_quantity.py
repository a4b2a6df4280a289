# pytest tests for measura.core.quantity
#
# Base-unit invariant, insertion order, local lookup and duplicate handling
# for a standalone Quantity (not registered in any catalog).

import pytest

from measura.core.errors import DuplicateSymbolError
from measura.core.quantity import Quantity
from measura.core.unit import Unit

from tests.utils import make_storage_quantity


@pytest.fixture()
def length():
    q = Quantity("length", Unit.identity("metre", "m"), "Distance between two points.")
    q.add_unit(Unit.linear("kilometre", "km", 1e3))
    q.add_unit(Unit.linear("foot", "ft", 0.3048))
    return q


# ---------------------------------------------------------------------------
# Construction & base unit
# ---------------------------------------------------------------------------

def test_constructed_with_base(length):
    assert length.name == "length"
    assert length.description == "Distance between two points."
    assert length.base_unit.symbol == "m"
    assert length.base_unit.quantity is length


@pytest.mark.parametrize("bad", ["", "  ", None])
def test_name_required(bad):
    with pytest.raises(ValueError):
        Quantity(bad, Unit.identity("metre", "m"))


def test_base_unit_must_be_identity():
    with pytest.raises(ValueError):
        Quantity("length", Unit.linear("foot", "ft", 0.3048))


def test_add_base_demotes_previous(length):
    old_base = length.base_unit
    metre2 = Unit.identity("meter", "meter")
    length.add_unit(metre2, is_base=True)

    assert length.base_unit is metre2
    assert old_base in length
    assert sum(1 for u in length if u is length.base_unit) == 1


def test_non_identity_base_rejected_and_state_unchanged(length):
    before = length.units
    with pytest.raises(ValueError):
        length.add_unit(Unit.linear("yard", "yd", 0.9144), is_base=True)
    assert length.units == before
    assert length.base_unit.symbol == "m"


# ---------------------------------------------------------------------------
# Units collection
# ---------------------------------------------------------------------------

def test_units_keep_insertion_order(length):
    assert [u.symbol for u in length.get_units()] == ["m", "km", "ft"]
    assert [u.symbol for u in length] == ["m", "km", "ft"]
    assert len(length) == 3


def test_units_is_a_snapshot(length):
    units = length.units
    length.add_unit(Unit.linear("inch", "in", 0.0254))
    assert len(units) == 3
    assert len(length.units) == 4


def test_find_unit_is_local(length):
    assert length.find_unit("ft").name == "foot"
    assert length.find_unit(" km ").symbol == "km"
    assert length.find_unit("kg") is None


def test_duplicate_symbol_rejected(length):
    with pytest.raises(DuplicateSymbolError):
        length.add_unit(Unit.linear("another foot", "ft", 0.3048))


def test_contains_by_symbol_and_unit(length):
    ft = length.find_unit("ft")
    assert "ft" in length
    assert ft in length
    assert Unit.linear("foot", "ft", 0.3048) not in length
    assert 42 not in length


def test_add_unit_requires_unit(length):
    with pytest.raises(TypeError):
        length.add_unit("ft")  # type: ignore[arg-type]


def test_unregistered_quantity_has_no_catalog():
    assert make_storage_quantity().catalog is None


def test_repr_mentions_base():
    q = make_storage_quantity()
    assert "computer storage" in repr(q)
    assert "byte" in repr(q)


def test_missing_base_raises_runtime_error(length):
    length._base = None
    with pytest.raises(RuntimeError, match="no base unit"):
        length.base_unit
