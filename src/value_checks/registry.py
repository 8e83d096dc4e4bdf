"""
Named access to the value checks.

CHECKS maps stable names to the predicates. make_check() binds a check's
auxiliary arguments so it can be handed to code that only supplies the value,
the same way a guardrail is wrapped into a single-argument callable.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Union

import structlog

from value_checks.coercion import Scalar
from value_checks.config.settings import get_settings
from value_checks.exceptions import MissingFractionError, UnknownCheckError
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

logger = structlog.get_logger(__name__)

CHECKS: Dict[str, Callable[..., bool]] = {
    "contains_blank": contains_blank,
    "is_numeric": is_numeric,
    "is_integer": is_integer,
    "is_empty": is_empty,
    "exceeds_max_length": exceeds_max_length,
    "is_in_range": is_in_range,
    "meets_min_digits": meets_min_digits,
    "meets_min_fraction_digits": meets_min_fraction_digits,
}


def get_check(name: str) -> Callable[..., bool]:
    """Return the check registered under ``name``."""
    try:
        return CHECKS[name]
    except KeyError:
        raise UnknownCheckError(name) from None


def make_check(
    check: Union[str, Callable[..., bool]],
    *args: Any,
    **kwargs: Any,
) -> Callable[[Scalar], bool]:
    """
    Bind auxiliary arguments to a check and return ``fn(value) -> bool``.

    ``check`` is a registered name or one of the predicates. Settings are read
    when the check is bound: with ``checks.tolerate_missing_fraction`` on, a
    missing fractional segment counts as a failed check instead of raising.
    """
    fn = get_check(check) if isinstance(check, str) else check
    name = getattr(fn, "__name__", repr(fn))
    settings = get_settings().checks
    tolerate = settings.tolerate_missing_fraction
    log_evaluations = settings.log_evaluations

    def bound_check(value: Scalar) -> bool:
        try:
            result = fn(value, *args, **kwargs)
        except MissingFractionError as e:
            if not tolerate:
                raise
            logger.warning("value_check_missing_fraction", check=name, text=e.text)
            result = False
        if log_evaluations:
            logger.debug("value_check_evaluated", check=name, result=result)
        return result

    bound_check.__name__ = f"bound_{name}"
    return bound_check
