"""
measura.catalog.aliases
=======================

Many-to-one mapping from alternate spellings to canonical unit symbols.

Resolution is a single hop: an alias always maps straight to a canonical
symbol, never to another alias. The table only grows.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, ItemsView, List

from measura.core.errors import AliasConflictError
from measura.core.utils import normalize_symbol

logger = logging.getLogger(__name__)


class AliasTable:
    """Alias -> canonical symbol map.

    The table knows nothing about units; checking that an alias does not
    shadow a unit symbol is the catalog's job.
    """

    def __init__(self, allow_overwrite: bool = False) -> None:
        self.allow_overwrite = allow_overwrite
        self._aliases: Dict[str, str] = {}
        # how many aliases point at each canonical symbol
        self._targets: Counter[str] = Counter()

    def add_alias(self, canonical: str, alias: str, replace: bool = False) -> None:
        """Register `alias` as another spelling of `canonical`.

        Re-adding an identical pair is a no-op. Redirecting an existing alias
        raises `AliasConflictError` unless `replace` (or the table's
        `allow_overwrite`) is set.
        """
        canonical = normalize_symbol(canonical)
        alias = normalize_symbol(alias)
        if not canonical or not alias:
            raise ValueError("Alias and canonical symbol must be non-empty strings")
        if alias == canonical:
            raise AliasConflictError(f"Cannot alias '{alias}' to itself")

        if canonical in self._aliases:
            raise AliasConflictError(
                f"Cannot register alias '{alias}': target '{canonical}' is itself an alias "
                f"of '{self._aliases[canonical]}'."
            )
        if self._targets[alias]:
            raise AliasConflictError(
                f"Cannot register alias '{alias}': it is the canonical target of other aliases."
            )

        current = self._aliases.get(alias)
        if current == canonical:
            return
        if current is not None:
            if not (replace or self.allow_overwrite):
                raise AliasConflictError(
                    f"Cannot register alias '{alias}' -> '{canonical}': "
                    f"it already resolves to '{current}'."
                )
            logger.debug("Alias %r redirected from %r to %r", alias, current, canonical)
            self._targets[current] -= 1

        self._aliases[alias] = canonical
        self._targets[canonical] += 1

    def resolve(self, symbol: str) -> str:
        """Canonical symbol for `symbol`; unknown or canonical input comes back unchanged."""
        sym = normalize_symbol(symbol)
        return self._aliases.get(sym, sym)

    def get(self, alias: str) -> str | None:
        return self._aliases.get(normalize_symbol(alias))

    def aliases_of(self, canonical: str) -> List[str]:
        canonical = normalize_symbol(canonical)
        if not self._targets[canonical]:
            return []
        return [a for a, c in self._aliases.items() if c == canonical]

    def is_target(self, symbol: str) -> bool:
        return bool(self._targets[normalize_symbol(symbol)])

    def items(self) -> ItemsView[str, str]:
        return dict(self._aliases).items()

    def __contains__(self, alias: str) -> bool:
        return normalize_symbol(alias) in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AliasTable({len(self)} aliases)"


__all__ = ["AliasTable"]
