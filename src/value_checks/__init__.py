"""
value_checks: pure predicates that validate a single scalar value.

Checks cover blankness, numeric text, integrality, emptiness, maximum length,
range membership, and minimum integer/fraction digit counts.
"""

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
from value_checks.exceptions import MissingFractionError, UnknownCheckError, ValueCheckError
from value_checks.predicates import (
    contains_blank,
    exceeds_max_length,
    is_empty,
    is_in_range,
    is_integer,
    is_numeric,
    meets_min_digits,
    meets_min_fraction_digits,
)
from value_checks.registry import CHECKS, get_check, make_check

__all__ = [
    # Checks
    "contains_blank",
    "is_numeric",
    "is_integer",
    "is_empty",
    "exceeds_max_length",
    "is_in_range",
    "meets_min_digits",
    "meets_min_fraction_digits",
    # Registry
    "CHECKS",
    "get_check",
    "make_check",
    # Coercion
    "Scalar",
    "to_text",
    "to_number",
    "parse_number",
    "fraction_part",
    "format_number",
    "trim_text",
    "text_length",
    # Errors
    "ValueCheckError",
    "MissingFractionError",
    "UnknownCheckError",
]
