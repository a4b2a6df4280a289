# tests/conftest.py
import pytest

from measura.catalog.registry import UnitCatalog, _bootstrap_default_catalog


@pytest.fixture()
def catalog():
    """Fresh, fully-bootstrapped UnitCatalog for isolation per test."""
    return _bootstrap_default_catalog()


@pytest.fixture()
def empty_catalog():
    return UnitCatalog()
