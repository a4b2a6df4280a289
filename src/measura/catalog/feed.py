"""
measura.catalog.feed
====================

Plain in-memory records for the definition feed and the alias seed.

The catalog does not care where records come from (an embedded module, a
CSV file read with `csv.DictReader`, a database query); it only consumes
`UnitRecord` / `AliasRecord` tuples.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional

from measura.core.quantity import Quantity
from measura.core.unit import Unit
from measura.core.utils import normalize_symbol

_TRUE_STRINGS = frozenset({"1", "true", "yes", "y", "t"})


def _coefficient(row: Mapping[str, Any], key: str, default: float) -> float:
    # csv.DictReader yields "" for an empty cell
    value = row.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return float(value)


class UnitRecord(NamedTuple):
    quantity: str
    description: str
    name: str
    symbol: str
    a: float
    b: float
    c: float
    d: float
    is_base: bool = False
    display: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "UnitRecord":
        """Build a record from a dict-like row; missing or blank coefficients default to identity."""
        is_base = row.get("is_base", False)
        if isinstance(is_base, str):
            is_base = is_base.strip().lower() in _TRUE_STRINGS
        display = row.get("display") or None
        return cls(
            quantity=row["quantity"],
            description=row.get("description") or "",
            name=row["name"],
            symbol=row["symbol"],
            a=_coefficient(row, "a", 1.0),
            b=_coefficient(row, "b", 0.0),
            c=_coefficient(row, "c", 0.0),
            d=_coefficient(row, "d", 1.0),
            is_base=bool(is_base),
            display=display,
        )

    def to_unit(self) -> Unit:
        return Unit(self.name, self.symbol, self.a, self.b, self.c, self.d, self.display)


class AliasRecord(NamedTuple):
    canonical: str
    alias: str


def build_quantities(records: Iterable[UnitRecord]) -> List[Quantity]:
    """Group records by quantity name (order of first appearance) into quantities.

    Each group must flag exactly one base unit. Units keep their feed order,
    the base unit first.
    """
    groups: Dict[str, List[UnitRecord]] = {}
    for rec in records:
        groups.setdefault(normalize_symbol(rec.quantity), []).append(rec)

    quantities: List[Quantity] = []
    for name, recs in groups.items():
        bases = [r for r in recs if r.is_base]
        if len(bases) != 1:
            raise ValueError(
                f"Quantity '{name}' must declare exactly one base unit, got {len(bases)}"
            )
        base = bases[0]
        description = next((r.description for r in recs if r.description), "")
        quantity = Quantity(name, base.to_unit(), description)
        for rec in recs:
            if rec is not base:
                quantity.add_unit(rec.to_unit())
        quantities.append(quantity)
    return quantities


__all__ = ["UnitRecord", "AliasRecord", "build_quantities"]
