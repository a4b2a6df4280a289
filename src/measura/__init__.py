"""
Measura: a unit-of-measure catalog for Python.

Measura exposes a catalog of physical quantities (length, pressure,
temperature, ...), their units and symbols, and converts values between any
two units of the same quantity. Client code can add its own quantities,
units and aliases; they merge with the built-in catalog.

This module exposes a minimal, stable public API. The built-in catalog is
loaded lazily, on first access to `default_catalog`.
"""

from importlib import metadata as _metadata
from typing import TYPE_CHECKING, Any

__author__ = "Measura developers"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("measura")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

from measura.catalog.config import CatalogConfig
from measura.catalog.registry import UnitCatalog, get_default_catalog
from measura.core.errors import (
    AliasConflictError,
    CatalogError,
    ConflictError,
    DuplicateQuantityError,
    DuplicateSymbolError,
    IncompatibleQuantityError,
    UnitNotFoundError,
)
from measura.core.quantity import Quantity
from measura.core.unit import Unit

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    default_catalog: UnitCatalog

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Unit",
    "Quantity",
    "UnitCatalog",
    "CatalogConfig",
    "get_default_catalog",
    "CatalogError",
    "UnitNotFoundError",
    "IncompatibleQuantityError",
    "ConflictError",
    "DuplicateSymbolError",
    "DuplicateQuantityError",
    "AliasConflictError",
]


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'default_catalog' builds the shared
    catalog from the built-in definitions on first use.
    """
    if name == "default_catalog":
        return get_default_catalog()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["default_catalog"])
