"""
measura.core.errors
===================

Exception taxonomy for the unit catalog.

Every error derives from `CatalogError`, itself a `ValueError`, so callers
that only care about "bad unit input" can keep catching `ValueError`.

Lookups (`find_*`) never raise these for unknown names; they return `None`
or an empty list. Only operations that must produce a value (conversions)
or mutate the catalog raise.
"""


class CatalogError(ValueError):
    """Base class for all unit catalog errors."""


class UnitNotFoundError(CatalogError):
    """A symbol, alias or quantity name has no match."""

    def __init__(self, symbol: str, message: str | None = None) -> None:
        self.symbol = symbol
        super().__init__(message or f"Unknown unit symbol: {symbol}")


class IncompatibleQuantityError(CatalogError):
    """Two units belong to different quantities and cannot be converted."""

    def __init__(self, from_symbol: str, to_symbol: str, from_quantity: str, to_quantity: str) -> None:
        self.from_symbol = from_symbol
        self.to_symbol = to_symbol
        self.from_quantity = from_quantity
        self.to_quantity = to_quantity
        super().__init__(
            f"Cannot convert '{from_symbol}' ({from_quantity}) "
            f"to '{to_symbol}' ({to_quantity}): incompatible quantities."
        )


class ConflictError(CatalogError):
    """A mutation would break a uniqueness or consistency invariant."""


class DuplicateSymbolError(ConflictError):
    """A unit symbol is already taken by another unit or by an alias."""


class DuplicateQuantityError(ConflictError):
    """A quantity with the same name is already registered."""


class AliasConflictError(ConflictError):
    """An alias would be redirected, chained, or shadow a unit symbol."""


__all__ = [
    "CatalogError",
    "UnitNotFoundError",
    "IncompatibleQuantityError",
    "ConflictError",
    "DuplicateSymbolError",
    "DuplicateQuantityError",
    "AliasConflictError",
]
