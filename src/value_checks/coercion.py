"""
Stringification and numeric coercion for scalar values.

Scalars are ``str``, ``int`` or ``float``. ``to_text`` and ``to_number`` follow
the loose rules of the runtime the checks were first written for: numbers
render with their shortest round-trip digits and no trailing ``.0``, strings
that do not parse coerce to NaN instead of raising.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Optional, Union

Scalar = Union[str, int, float]

# Exponent notation is used outside [1e-6, 1e21)
_MAX_PLAIN_EXPONENT = 21
_MIN_PLAIN_EXPONENT = -6

# What the loose runtime trims: ASCII blanks, no-break space, Unicode space
# separators, line/paragraph separators and the byte order mark.
# Python's str.strip() also drops \x1c-\x1f and \x85 and keeps the BOM.
WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_LITERAL = re.compile(r"[+-]?Infinity")
_RADIX_LITERALS = (
    (re.compile(r"0[xX][0-9a-fA-F]+", re.ASCII), 16),
    (re.compile(r"0[oO][0-7]+", re.ASCII), 8),
    (re.compile(r"0[bB][01]+", re.ASCII), 2),
)


# -----------------------------------------------------------------------------
# Textual form
# -----------------------------------------------------------------------------


def format_number(number: float) -> str:
    """
    Render a float the way a loosely typed runtime stringifies numbers.

    ``4.0`` -> ``"4"``, ``1e21`` -> ``"1e+21"``, ``1e-7`` -> ``"1e-7"``,
    ``nan`` -> ``"NaN"``, ``-inf`` -> ``"-Infinity"``, ``-0.0`` -> ``"0"``.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # repr() gives the shortest digit string that round-trips
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= _MAX_PLAIN_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_PLAIN_EXPONENT:
        body = digits[:n] + "." + digits[n:]
    elif _MIN_PLAIN_EXPONENT < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        power = n - 1
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + body


def to_text(value: Scalar) -> str:
    """
    Return the textual form of a scalar.

    Ints are rendered through their float value, so ``10**21`` gives
    ``"1e+21"`` and ints beyond the float range give ``"Infinity"``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return format_number(to_number(value))


def trim_text(text: str) -> str:
    """Strip leading and trailing WHITESPACE characters."""
    return text.strip(WHITESPACE)


def text_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count as 2."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


# -----------------------------------------------------------------------------
# Numeric coercion
# -----------------------------------------------------------------------------


def to_number(value: Scalar) -> float:
    """
    Coerce a scalar to a float. Never raises; unparseable text gives NaN.

    Whitespace around text is ignored and blank text coerces to ``0.0``.
    Accepts decimal literals with an optional exponent, ``Infinity`` with an
    optional sign, and unsigned ``0x``/``0o``/``0b`` integer literals.
    """
    if isinstance(value, int):
        return _int_to_float(value)
    if not isinstance(value, str):
        return float(value)

    text = trim_text(value)
    if not text:
        return 0.0
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    if _INFINITY_LITERAL.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    for pattern, base in _RADIX_LITERALS:
        if pattern.fullmatch(text):
            return _int_to_float(int(text[2:], base))
    return math.nan


def _int_to_float(value: int) -> float:
    """Convert an int, saturating to an infinity past the float range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def parse_number(value: Scalar) -> Optional[float]:
    """Coerce a scalar to a float, returning None where ``to_number`` gives NaN."""
    number = to_number(value)
    if math.isnan(number):
        return None
    return number


def fraction_part(value: Scalar) -> Optional[str]:
    """
    Return the digits after the decimal point of the coerced value's textual form.

    None when the textual form has no decimal point (whole numbers, NaN,
    infinities, and exponent forms such as ``1e-7``).
    """
    segments = format_number(to_number(value)).split(".")
    if len(segments) < 2:
        return None
    return segments[1]
