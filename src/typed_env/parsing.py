"""Strict text-to-value parsers for single tokens.

Python's builtins are forgiving: ``int(" 1_0 ")`` is ``10`` and
``float("１")`` is ``1.0``.  Configuration read from the environment is
better served by a strict grammar, so each parser here accepts only the
conventional textual form of its type and raises ``ValueError`` for
anything else:

- **bool** — exactly ``1 t T TRUE true True 0 f F FALSE false False``.
- **int** — optional sign plus ASCII digits, within the signed 64-bit range.
- **float64** — decimal/scientific notation, ``inf``/``infinity``/``nan``,
  or a hexadecimal float with a ``p`` exponent.  NaN takes no sign.  A
  finite literal that overflows a double is rejected.
- **float32** — the float64 grammar rounded once, straight to single
  precision; finite literals that overflow single precision are rejected.

Surrounding whitespace and digit-group underscores are never accepted.
"""

import math
import re
from fractions import Fraction

import numpy as np

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_FLOAT_RE = re.compile(r"([+-]?)0[xX](?=\.?[0-9a-fA-F])([0-9a-fA-F]*)(?:\.([0-9a-fA-F]*))?[pP]([+-]?[0-9]+)")
_INF_RE = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)
_SIGNED_NAN_RE = re.compile(r"[+-]nan", re.IGNORECASE)


def parse_bool(raw: str) -> bool:
    """Parse one of the accepted boolean literals."""
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    msg = f"invalid syntax for bool: {raw!r}"
    raise ValueError(msg)


def parse_int(raw: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits.

    Raises:
        ValueError: On bad syntax or when the value is out of range.

    """
    if not _INT_RE.fullmatch(raw):
        msg = f"invalid syntax for int: {raw!r}"
        raise ValueError(msg)
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        msg = f"value out of range for int: {raw!r}"
        raise ValueError(msg)
    return value


def parse_float64(raw: str) -> float:
    """Parse a double-precision float.

    Raises:
        ValueError: On bad syntax or when a finite literal overflows.

    """
    if not raw.isascii() or "_" in raw or raw != raw.strip() or _SIGNED_NAN_RE.fullmatch(raw):
        msg = f"invalid syntax for float: {raw!r}"
        raise ValueError(msg)
    if _HEX_FLOAT_RE.fullmatch(raw):
        try:
            return float.fromhex(raw)
        except OverflowError:
            msg = f"value out of range for float64: {raw!r}"
            raise ValueError(msg) from None
    value = float(raw)
    if math.isinf(value) and not _INF_RE.fullmatch(raw):
        msg = f"value out of range for float64: {raw!r}"
        raise ValueError(msg)
    return value


def _exact(raw: str) -> Fraction:
    """Return the exact rational value of a finite float literal."""
    match = _HEX_FLOAT_RE.fullmatch(raw)
    if match is None:
        return Fraction(raw)
    sign, whole, frac, exp = match.groups()
    frac = frac or ""
    mantissa = Fraction(int(whole + frac or "0", 16))
    value = mantissa * Fraction(2) ** (int(exp) - 4 * len(frac))
    return -value if sign == "-" else value


def parse_float32(raw: str) -> np.float32:
    """Parse a float and round it once, directly to single precision.

    Narrowing the double is only wrong when the double lands exactly
    halfway between two float32 neighbours; the literal's exact value
    then decides which neighbour is nearest.

    Raises:
        ValueError: On bad syntax or when a finite literal overflows
            single precision.

    """
    wide = parse_float64(raw)
    with np.errstate(over="ignore"):
        narrow = np.float32(wide)
    if np.isinf(narrow) and not math.isinf(wide):
        msg = f"value out of range for float32: {raw!r}"
        raise ValueError(msg)
    if not np.isfinite(narrow) or float(narrow) == wide:
        return narrow
    toward = np.float32(np.inf) if float(narrow) < wide else np.float32(-np.inf)
    other = np.nextafter(narrow, toward)
    if np.isinf(other) or (float(narrow) + float(other)) / 2 != wide:
        return narrow
    exact = _exact(raw)
    if exact == Fraction(wide):
        return narrow
    lo, hi = sorted((narrow, other))
    return hi if exact > Fraction(wide) else lo
