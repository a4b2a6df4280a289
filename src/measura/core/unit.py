from __future__ import annotations

import weakref
from dataclasses import dataclass, field, replace
from math import isclose
from typing import TYPE_CHECKING, Optional, Tuple

from measura.core.utils import format_display_symbol, ieee_div, normalize_symbol

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measura.core.quantity import Quantity

Coefficients = Tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Unit:
    """A unit of measure with its conversion to the quantity's base unit.

    The conversion is the rational form::

        base = (a * value + b) / (c * value + d)

    which covers plain scales (``c == 0, d == 1``), offset scales such as
    degrees Celsius (``b != 0``) and reciprocal scales such as API gravity
    or litres per 100 km (``c != 0``).
    """

    name: str
    symbol: str
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    display: Optional[str] = None
    _quantity: Optional["weakref.ReferenceType[Quantity]"] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or not normalize_symbol(self.symbol):
            raise ValueError("Unit symbol must be a non-empty string")
        object.__setattr__(self, "symbol", normalize_symbol(self.symbol))
        for coef in ("a", "b", "c", "d"):
            object.__setattr__(self, coef, float(getattr(self, coef)))

    @classmethod
    def linear(cls, name: str, symbol: str, scale: float, offset: float = 0.0,
               display: Optional[str] = None) -> Unit:
        """Factory for ``base = scale * value + offset``."""
        return cls(name, symbol, scale, offset, 0.0, 1.0, display)

    @classmethod
    def identity(cls, name: str, symbol: str, display: Optional[str] = None) -> Unit:
        """Factory for a base unit."""
        return cls(name, symbol, display=display)

    # -------------------------- conversion ---------------------------------
    def to_base(self, value: float) -> float:
        value = float(value)
        if self.c == 0.0:
            return ieee_div(self.a * value + self.b, self.d)
        return ieee_div(self.a * value + self.b, self.c * value + self.d)

    def from_base(self, value: float) -> float:
        value = float(value)
        if self.c == 0.0:
            return ieee_div(self.d * value - self.b, self.a)
        return ieee_div(self.d * value - self.b, self.a - self.c * value)

    # --------------------------- metadata ----------------------------------
    @property
    def display_symbol(self) -> str:
        return self.display if self.display else format_display_symbol(self.symbol)

    @property
    def quantity(self) -> Optional["Quantity"]:
        """Owning quantity, or None while the unit is unattached."""
        return self._quantity() if self._quantity is not None else None

    @property
    def coefficients(self) -> Coefficients:
        return (self.a, self.b, self.c, self.d)

    @property
    def is_linear(self) -> bool:
        return self.c == 0.0

    @property
    def is_identity(self) -> bool:
        return self.coefficients == (1.0, 0.0, 0.0, 1.0)

    def same_conversion(self, other: Unit, rel_tol: float = 1e-12) -> bool:
        """True if both units apply the same formula (up to a common factor)."""
        # (a, b, c, d) and k*(a, b, c, d) describe the same mapping
        mine, theirs = self.coefficients, other.coefficients
        i = max(range(4), key=lambda k: abs(mine[k]))
        if theirs[i] == 0.0:
            return False
        k = mine[i] / theirs[i]
        tol = rel_tol * abs(mine[i])
        return all(isclose(x, k * y, rel_tol=rel_tol, abs_tol=tol) for x, y in zip(mine, theirs))

    def rebased(self, onto: Unit) -> Unit:
        """Return an unbound copy whose base is `onto`'s base.

        `self` converts to some unit X; `onto` converts X to another base.
        Composing the two rational maps is a 2x2 matrix product.
        """
        a1, b1, c1, d1 = self.coefficients
        a2, b2, c2, d2 = onto.coefficients
        return replace(
            self,
            a=a2 * a1 + b2 * c1,
            b=a2 * b1 + b2 * d1,
            c=c2 * a1 + d2 * c1,
            d=c2 * b1 + d2 * d1,
        )

    def _bind(self, quantity: "Quantity") -> None:
        owner = self.quantity
        if owner is not None and owner is not quantity:
            raise ValueError(
                f"Unit '{self.symbol}' already belongs to quantity '{owner.name}'"
            )
        object.__setattr__(self, "_quantity", weakref.ref(quantity))

    def __str__(self) -> str:
        return self.display_symbol


__all__ = ["Unit", "Coefficients"]
