"""
measura.catalog.config
======================

Policy switches for a `UnitCatalog`. The defaults are the deterministic ones:
case-sensitive quantity names, duplicate quantities rejected, aliases never
silently redirected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DuplicateQuantityPolicy = Literal["reject", "merge"]

_DUPLICATE_POLICIES = ("reject", "merge")


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    case_sensitive_names: bool = True
    duplicate_quantities: DuplicateQuantityPolicy = "reject"
    allow_alias_overwrite: bool = False

    def __post_init__(self) -> None:
        if self.duplicate_quantities not in _DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_quantities must be one of {_DUPLICATE_POLICIES}, "
                f"got {self.duplicate_quantities!r}"
            )


DEFAULT_CONFIG = CatalogConfig()

__all__ = ["CatalogConfig", "DEFAULT_CONFIG", "DuplicateQuantityPolicy"]
