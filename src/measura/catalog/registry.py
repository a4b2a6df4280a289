"""
measura.catalog.registry
========================

The unit catalog: quantities, the global symbol index, aliases and the
conversion entry point.

Design
------
- State lives in an explicitly constructed `UnitCatalog` (thread-safe);
  `get_default_catalog()` hands out one shared, lazily built instance for
  callers that do not need their own.
- Every unit symbol is unique across the whole catalog, because lookups and
  conversions are global. Aliases may never shadow a symbol.
- Conversions pivot through the quantity's base unit:
  ``to.from_base(frm.to_base(value))``. Adding a unit never requires new
  pairwise conversion code.
- Lookups return ``None`` (or an empty list) for unknown input. Conversions
  and mutations raise the errors in `measura.core.errors`.
"""
from __future__ import annotations

import logging
import threading
import weakref
from typing import Dict, Iterable, List, Optional, Tuple, Union

from measura.catalog.aliases import AliasTable
from measura.catalog.config import DEFAULT_CONFIG, CatalogConfig
from measura.catalog.feed import AliasRecord, UnitRecord, build_quantities
from measura.core.errors import (
    AliasConflictError,
    DuplicateQuantityError,
    DuplicateSymbolError,
    IncompatibleQuantityError,
    UnitNotFoundError,
)
from measura.core.quantity import Quantity
from measura.core.unit import Unit
from measura.core.utils import name_key, normalize_symbol

logger = logging.getLogger(__name__)

UnitLike = Union[Unit, str]


class UnitCatalog:
    """Registry of quantities and units with alias-aware lookup and conversion.

    Mutations (`add_quantity`, `add_unit`, `add_unit_alias`) and lookups are
    serialised by a re-entrant lock, so a catalog may be shared between
    threads while it is still being extended.
    """

    def __init__(self, config: CatalogConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._lock = threading.RLock()
        self._quantities: Dict[str, Quantity] = {}
        self._index: Dict[str, Tuple[Quantity, Unit]] = {}
        self._aliases = AliasTable(allow_overwrite=self.config.allow_alias_overwrite)

    # ------------------------------------------------------------------
    # building
    # ------------------------------------------------------------------
    def add_quantity(self, quantity: Quantity) -> Quantity:
        """Register `quantity` and index all of its units.

        A quantity whose name is already taken is rejected, or merged into
        the registered one when the catalog is configured with
        ``duplicate_quantities="merge"``. Returns the registered quantity.
        """
        with self._lock:
            owner = quantity.catalog
            if owner is not None:
                raise ValueError(
                    f"Quantity '{quantity.name}' is already registered in a catalog"
                )

            key = self._name_key(quantity.name)
            existing = self._quantities.get(key)
            if existing is not None:
                if self.config.duplicate_quantities == "merge":
                    return self._merge_quantity(existing, quantity)
                raise DuplicateQuantityError(
                    f"Cannot add quantity '{quantity.name}': "
                    "a quantity with this name already exists."
                )

            for unit in quantity.units:
                self._check_symbol_free(unit.symbol)

            self._quantities[key] = quantity
            quantity._catalog = weakref.ref(self)
            for unit in quantity.units:
                self._index[unit.symbol] = (quantity, unit)

            logger.debug("Added quantity %r with %d units", quantity.name, len(quantity))
            return quantity

    def add_unit(self, quantity: Union[Quantity, str], unit: Unit, is_base: bool = False) -> Unit:
        """Add `unit` to a registered quantity, keeping the symbol index in sync."""
        with self._lock:
            target = self._registered_quantity(quantity)
            self._check_symbol_free(unit.symbol)
            target._attach(unit, is_base)
            self._index[unit.symbol] = (target, unit)
            if is_base:
                logger.debug("Unit %r is now the base of %r", unit.symbol, target.name)
            return unit

    def add_unit_alias(self, symbol: str, alias: str, replace: bool = False) -> None:
        """Register `alias` for the unit named by `symbol` (a symbol or an existing alias)."""
        with self._lock:
            canonical = self._aliases.resolve(symbol)
            if canonical not in self._index:
                raise UnitNotFoundError(symbol)

            alias = normalize_symbol(alias)
            if alias in self._index:
                if alias == canonical:
                    return
                raise AliasConflictError(
                    f"Cannot register alias '{alias}': a unit with this symbol already exists."
                )
            self._aliases.add_alias(canonical, alias, replace=replace)
            logger.debug("Alias %r -> %r", alias, canonical)

    def load_definitions(self, records: Iterable[UnitRecord]) -> List[Quantity]:
        """Ingest a definition feed; returns the registered quantities in feed order."""
        return [self.add_quantity(q) for q in build_quantities(records)]

    def load_aliases(self, pairs: Iterable[Union[AliasRecord, Tuple[str, str]]]) -> int:
        """Ingest an alias seed of ``(canonical, alias)`` pairs; returns how many were read."""
        count = 0
        for canonical, alias in pairs:
            self.add_unit_alias(canonical, alias)
            count += 1
        return count

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------
    def get_quantities(self) -> List[Quantity]:
        with self._lock:
            return list(self._quantities.values())

    def find_quantity(self, name: str) -> Optional[Quantity]:
        with self._lock:
            return self._quantities.get(self._name_key(name))

    def find_quantity_for_unit(self, unit: UnitLike) -> Optional[Quantity]:
        """Owning quantity of a unit given as object, symbol or alias."""
        entry = self._lookup(unit)
        return entry[0] if entry else None

    def find_unit(self, symbol: str) -> Optional[Unit]:
        entry = self._lookup(symbol)
        return entry[1] if entry else None

    def find_convertible_units(self, unit: UnitLike) -> List[Unit]:
        """All units of the owning quantity, the unit itself included."""
        entry = self._lookup(unit)
        return list(entry[0].units) if entry else []

    def get_display_symbol(self, symbol: str) -> Optional[str]:
        unit = self.find_unit(symbol)
        return unit.display_symbol if unit else None

    def get_aliases(self, symbol: str) -> List[str]:
        with self._lock:
            unit = self.find_unit(symbol)
            return self._aliases.aliases_of(unit.symbol) if unit else []

    def search_units(self, text: str) -> List[Unit]:
        """Units whose symbol, name, display symbol or an alias contains `text`.

        Case-insensitive, across all quantities, in catalog order.
        """
        needle = normalize_symbol(text).casefold()
        if not needle:
            return []
        with self._lock:
            alias_hits = {
                canonical for alias, canonical in self._aliases.items()
                if needle in alias.casefold()
            }
            return [
                unit for unit in self.units()
                if needle in unit.symbol.casefold()
                or needle in unit.name.casefold()
                or needle in unit.display_symbol.casefold()
                or unit.symbol in alias_hits
            ]

    def units(self) -> List[Unit]:
        with self._lock:
            return [u for q in self._quantities.values() for u in q.units]

    def resolve(self, symbol: str) -> str:
        """Canonical symbol for `symbol` (single alias hop)."""
        with self._lock:
            return self._aliases.resolve(symbol)

    # ------------------------------------------------------------------
    # conversion
    # ------------------------------------------------------------------
    def convert(self, frm: UnitLike, to: UnitLike, value: float) -> float:
        """Convert `value` from unit `frm` to unit `to`.

        Raises `UnitNotFoundError` if either unit is unknown and
        `IncompatibleQuantityError` if they belong to different quantities.
        Non-finite results of degenerate formulas are returned as-is.
        """
        src_q, src = self._require(frm)
        dst_q, dst = self._require(to)
        if src_q is not dst_q:
            raise IncompatibleQuantityError(src.symbol, dst.symbol, src_q.name, dst_q.name)
        if src is dst:
            return float(value)
        return dst.from_base(src.to_base(value))

    def to_base(self, unit: UnitLike, value: float) -> float:
        return self._require(unit)[1].to_base(value)

    def from_base(self, unit: UnitLike, value: float) -> float:
        return self._require(unit)[1].from_base(value)

    # ------------------------------------------------------------------
    # container
    # ------------------------------------------------------------------
    def __contains__(self, symbol: str) -> bool:
        return self._lookup(symbol) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)

    def __repr__(self) -> str:
        return (
            f"UnitCatalog({len(self._quantities)} quantities, "
            f"{len(self._index)} units, {len(self._aliases)} aliases)"
        )

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _name_key(self, name: str) -> str:
        return name_key(name, self.config.case_sensitive_names)

    def _lookup(self, unit: UnitLike) -> Optional[Tuple[Quantity, Unit]]:
        with self._lock:
            if isinstance(unit, Unit):
                entry = self._index.get(unit.symbol)
                return entry if entry is not None and entry[1] is unit else None
            if not isinstance(unit, str):
                return None
            return self._index.get(self._aliases.resolve(unit))

    def _require(self, unit: UnitLike) -> Tuple[Quantity, Unit]:
        entry = self._lookup(unit)
        if entry is None:
            sym = unit.symbol if isinstance(unit, Unit) else str(unit)
            raise UnitNotFoundError(sym)
        return entry

    def _registered_quantity(self, quantity: Union[Quantity, str]) -> Quantity:
        if isinstance(quantity, Quantity):
            if quantity.catalog is not self:
                raise ValueError(f"Quantity '{quantity.name}' is not registered in this catalog")
            return quantity
        found = self.find_quantity(quantity)
        if found is None:
            raise UnitNotFoundError(quantity, f"Unknown quantity: {quantity}")
        return found

    def _check_symbol_free(self, symbol: str) -> None:
        entry = self._index.get(symbol)
        if entry is not None:
            raise DuplicateSymbolError(
                f"Cannot register unit '{symbol}': already defined in quantity '{entry[0].name}'."
            )
        if symbol in self._aliases:
            raise DuplicateSymbolError(
                f"Cannot register unit '{symbol}': an alias with this name already exists."
            )

    def _merge_quantity(self, existing: Quantity, incoming: Quantity) -> Quantity:
        """Append `incoming`'s new units to `existing`, rebasing them if needed."""
        pivot = existing.find_unit(incoming.base_unit.symbol)
        if pivot is None:
            raise DuplicateQuantityError(
                f"Cannot merge quantity '{incoming.name}': its base unit "
                f"'{incoming.base_unit.symbol}' is unknown to the registered quantity."
            )

        additions: List[Unit] = []
        for unit in incoming.units:
            candidate = unit.rebased(pivot)
            current = existing.find_unit(unit.symbol)
            if current is not None:
                if not current.same_conversion(candidate):
                    raise DuplicateSymbolError(
                        f"Cannot merge unit '{unit.symbol}' into quantity '{existing.name}': "
                        "it is already defined with a different conversion."
                    )
                continue
            self._check_symbol_free(unit.symbol)
            additions.append(candidate)

        for unit in additions:
            existing._attach(unit, False)
            self._index[unit.symbol] = (existing, unit)

        logger.debug("Merged %d units into quantity %r", len(additions), existing.name)
        return existing


# ---------------------------------------------------------------------------
# Bootstrap a catalog with the built-in definitions
# ---------------------------------------------------------------------------

def _bootstrap_default_catalog(config: CatalogConfig | None = None) -> UnitCatalog:
    from measura.catalog.definitions import iter_alias_records, iter_unit_records

    catalog = UnitCatalog(config)
    catalog.load_definitions(iter_unit_records())
    catalog.load_aliases(iter_alias_records())
    return catalog


_DEFAULT_CATALOG: UnitCatalog | None = None
_DEFAULT_LOCK = threading.Lock()


def get_default_catalog() -> UnitCatalog:
    """Return the shared catalog loaded with the built-in definitions.

    Built on first use; concurrent first callers all receive the same instance.
    """
    global _DEFAULT_CATALOG
    catalog = _DEFAULT_CATALOG
    if catalog is None:
        with _DEFAULT_LOCK:
            catalog = _DEFAULT_CATALOG
            if catalog is None:
                catalog = _bootstrap_default_catalog()
                _DEFAULT_CATALOG = catalog
                logger.info("Default unit catalog loaded: %r", catalog)
    return catalog


__all__ = [
    "UnitCatalog",
    "get_default_catalog",
]
