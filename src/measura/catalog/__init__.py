# measura/catalog/__init__.py
from typing import TYPE_CHECKING, Any

from measura.catalog.aliases import AliasTable
from measura.catalog.config import CatalogConfig
from measura.catalog.feed import AliasRecord, UnitRecord, build_quantities
from measura.catalog.registry import UnitCatalog, get_default_catalog

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    DEFAULT_CATALOG: UnitCatalog


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. `DEFAULT_CATALOG` is built from the built-in
    definitions on first use only.
    """
    if name == "DEFAULT_CATALOG":
        return get_default_catalog()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["DEFAULT_CATALOG"])


__all__ = [
    "AliasTable",
    "AliasRecord",
    "CatalogConfig",
    "UnitCatalog",
    "UnitRecord",
    "build_quantities",
    "get_default_catalog",
]
