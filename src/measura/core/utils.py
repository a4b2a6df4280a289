"""
measura.core.utils
==================

Small helpers shared by the core types and the catalog:

- symbol normalisation (whitespace, Unicode NFC) applied to every lookup key;
- derivation of presentation symbols (``m/s2`` -> ``m/s²``, ``degC`` -> ``°C``);
- IEEE 754 style division, so degenerate formulas yield ``inf``/``nan``
  instead of raising `ZeroDivisionError`.
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Dict, Pattern

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def normalize_symbol(s: str) -> str:
    """Normalize a user-provided symbol, alias or quantity name.

    Rules:
    - Strip surrounding whitespace.
    - Unicode normalize to NFC (composed forms like "µ").
    - Leave case as-is; symbols are case-sensitive ("m" vs "M").
    """
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


def name_key(name: str, case_sensitive: bool = True) -> str:
    """Dictionary key for a quantity name."""
    key = normalize_symbol(name)
    return key if case_sensitive else key.casefold()


# ---------------------------------------------------------------------------
# Display symbols
# ---------------------------------------------------------------------------
# Whole-token substitutions. Tokens are the pieces between '/', '*', '·' and '.'.
_TOKEN_DISPLAY: Dict[str, str] = {
    "degC": "°C",
    "degF": "°F",
    "degR": "°R",
    "dega": "°",
    "ohm": "Ω",
    "Angstrom": "Å",
    "dAPI": "°API",
    "dBaume": "°Bé",
}

# '.' only separates factors when it sits between two non-digits ("kW.h", not "0.5")
_SEP_RE: Pattern[str] = re.compile(r"(/|\*|·|(?<=\D)\.(?=\D))")

# bodies written with an ASCII "u" for the micro prefix ("um", "us")
_MICRO_BASES = frozenset({
    "m", "g", "s", "L", "l", "A", "V", "W", "J", "N", "Pa", "mol", "Hz", "F", "H", "C", "T",
    "in", "bar",
})

# trailing exponent on a token: "m2", "ft3", "s-1"
_EXP_RE: Pattern[str] = re.compile(r"(?P<body>.*[^\W\d_])(?P<exp>-?\d+)")


def _display_token(token: str) -> str:
    m = _EXP_RE.fullmatch(token)
    body, exp = (m.group("body"), int(m.group("exp"))) if m else (token, 1)

    if body in _TOKEN_DISPLAY:
        body = _TOKEN_DISPLAY[body]
    elif body[:1] == "u" and body[1:] in _MICRO_BASES:
        body = "µ" + body[1:]
    return body + _sup(exp)


def format_display_symbol(symbol: str) -> str:
    """Turn a catalog symbol into its presentation form.

    >>> format_display_symbol("kg/m3")
    'kg/m³'
    >>> format_display_symbol("kW.h")
    'kW·h'
    """
    if not symbol:
        return symbol

    out = []
    for part in _SEP_RE.split(symbol):
        if not part:
            continue
        if part == "/":
            out.append("/")
        elif part in ("*", "·", "."):
            out.append("·")
        else:
            out.append(_display_token(part))
    return "".join(out)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------
def ieee_div(n: float, d: float) -> float:
    """Divide following IEEE 754: x/0 is ±inf, 0/0 and nan/0 are nan."""
    if d == 0.0:
        if n == 0.0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, d)
    return n / d


__all__ = ["normalize_symbol", "name_key", "format_display_symbol", "ieee_div"]
