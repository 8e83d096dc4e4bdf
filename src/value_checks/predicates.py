"""
Scalar value checks.

Eight independent predicates over a single str/int/float value. Each one is
pure: no logging, no shared state, and the same arguments always give the
same answer. Text-based checks look at ``to_text(value)``; number-based checks
look at ``to_number(value)``.
"""

from __future__ import annotations

import math
import re

from value_checks.coercion import (
    Scalar,
    format_number,
    fraction_part,
    parse_number,
    text_length,
    to_number,
    to_text,
    trim_text,
)
from value_checks.exceptions import MissingFractionError

# Optional sign (the class also admits ','), no leading zeros, optional fraction
NUMERIC_PATTERN = re.compile(r"[+,-]?([1-9]\d*|0)(\.\d+)?", re.ASCII)


def contains_blank(value: Scalar) -> bool:
    """True if the textual form is empty or only whitespace. ``0`` is not blank."""
    return not trim_text(to_text(value))


def is_numeric(value: Scalar) -> bool:
    """
    True if the textual form is a plain decimal number.

    ``"42"``, ``"-3.14"`` and ``"0.5"`` pass; ``"007"``, ``"1e5"`` and ``"1."`` do not.
    """
    return NUMERIC_PATTERN.fullmatch(to_text(value)) is not None


def is_integer(value: Scalar) -> bool:
    """True if the coerced value is a finite whole number. ``"abc"`` coerces to NaN."""
    number = to_number(value)
    return math.isfinite(number) and number.is_integer()


def is_empty(value: Scalar) -> bool:
    """
    True if the trimmed textual form has at least one character.

    Despite the name, True means the value is NOT empty. Callers rely on
    this polarity.
    """
    return len(trim_text(to_text(value))) > 0


def exceeds_max_length(value: Scalar, max_length: int) -> bool:
    """
    True if the textual form is longer than ``max_length``.

    Length is counted in UTF-16 code units, so an emoji counts as 2.
    """
    return text_length(to_text(value)) > max_length


def is_in_range(value: Scalar, minimum: float, maximum: float) -> bool:
    """True if ``minimum <= number <= maximum``. Values that do not coerce fail."""
    number = parse_number(value)
    if number is None:
        return False
    return minimum <= number <= maximum


def meets_min_digits(value: Scalar, digits: int) -> bool:
    """
    True if the integer part of the coerced value has at least ``digits`` characters.

    The integer part is the floor, so ``-1.5`` gives ``"-2"`` and its minus
    sign counts. NaN and infinities are measured by their textual form.
    """
    number = to_number(value)
    if math.isfinite(number):
        number = float(math.floor(number))
    return len(format_number(number)) >= digits


def meets_min_fraction_digits(value: Scalar, digits: int) -> bool:
    """
    True if the coerced value has at least ``digits`` digits after the decimal point.

    Raises:
        MissingFractionError: the coerced value has no fractional segment
            (whole numbers, NaN, infinities, exponent forms like ``1e-7``).
    """
    fraction = fraction_part(value)
    if fraction is None:
        raise MissingFractionError(format_number(to_number(value)))
    return len(fraction) >= digits
