"""
measura.core.quantity
=====================

Defines the `Quantity` class: a named physical quantity (length, pressure,
temperature, ...) owning an ordered collection of `Unit` objects, exactly one
of which is the base unit every conversion pivots through.

Units are kept in insertion order for display and are never removed.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple, Union

from measura.core.errors import DuplicateSymbolError
from measura.core.unit import Unit
from measura.core.utils import normalize_symbol

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measura.catalog.registry import UnitCatalog


class Quantity:
    """A measurable physical property with its units.

    The base unit is required at construction, so a quantity always has
    exactly one. `add_unit(..., is_base=True)` moves the designation; the
    previous base stays in the collection as an ordinary unit.
    """

    def __init__(self, name: str, base_unit: Unit, description: str = "") -> None:
        if not isinstance(name, str) or not normalize_symbol(name):
            raise ValueError("Quantity name must be a non-empty string")
        self.name = normalize_symbol(name)
        self.description = description
        self._units: List[Unit] = []
        self._by_symbol: Dict[str, Unit] = {}
        self._base: Optional[Unit] = None
        self._catalog: Optional["weakref.ReferenceType[UnitCatalog]"] = None
        self._attach(base_unit, is_base=True)

    # -------------------------- public API ---------------------------------
    @property
    def base_unit(self) -> Unit:
        if self._base is None:
            raise RuntimeError(f"Quantity '{self.name}' has no base unit")
        return self._base

    @property
    def units(self) -> Tuple[Unit, ...]:
        return tuple(self._units)

    def get_units(self) -> Tuple[Unit, ...]:
        """Units in insertion order (first added first)."""
        return self.units

    def find_unit(self, symbol: str) -> Optional[Unit]:
        """Local lookup among this quantity's own units. No alias resolution."""
        return self._by_symbol.get(normalize_symbol(symbol))

    def add_unit(self, unit: Unit, is_base: bool = False) -> Unit:
        """Append `unit`; with `is_base` it also becomes the base unit.

        Once the quantity is registered in a catalog, the call is routed
        through it so the global symbol index stays consistent.
        """
        catalog = self.catalog
        if catalog is not None:
            return catalog.add_unit(self, unit, is_base=is_base)
        return self._attach(unit, is_base)

    @property
    def catalog(self) -> Optional["UnitCatalog"]:
        return self._catalog() if self._catalog is not None else None

    # ------------------------- internals -----------------------------------
    def _attach(self, unit: Unit, is_base: bool) -> Unit:
        if not isinstance(unit, Unit):
            raise TypeError(f"Expected a Unit, got {type(unit).__name__}")
        if unit.symbol in self._by_symbol:
            raise DuplicateSymbolError(
                f"Cannot add unit '{unit.symbol}' to quantity '{self.name}': "
                "a unit with this symbol already exists."
            )
        if is_base and not unit.is_identity:
            raise ValueError(
                f"Base unit '{unit.symbol}' of quantity '{self.name}' must have "
                f"identity conversion (1, 0, 0, 1), got {unit.coefficients}"
            )

        unit._bind(self)
        self._units.append(unit)
        self._by_symbol[unit.symbol] = unit
        if is_base:
            self._base = unit
        return unit

    # ------------------------- container -----------------------------------
    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(tuple(self._units))

    def __contains__(self, item: Union[str, Unit]) -> bool:
        if isinstance(item, Unit):
            return self._by_symbol.get(item.symbol) is item
        if isinstance(item, str):
            return normalize_symbol(item) in self._by_symbol
        return False

    def __repr__(self) -> str:
        return f"Quantity({self.name!r}, base={self.base_unit.symbol!r}, units={len(self)})"


__all__ = ["Quantity"]
