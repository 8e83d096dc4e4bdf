"""Shared utilities for the value_checks package."""

from value_checks.utils.logging import configure_logging

__all__ = ["configure_logging"]
