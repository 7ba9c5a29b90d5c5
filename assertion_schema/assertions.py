"""
assertions.py – ready-made value assertions for the primitive kinds.

Each assertion has the signature ``(value, context=None) -> None`` and can be
used directly as a schema field, e.g. ``{"name": assert_string}``.
"""

from __future__ import annotations

from typing import Any, Optional

from . import checks
from .checks import UNDEFINED
from .errors import ErrorProvider, assert_truthy
from .formatter import format_error

__all__ = [
    "assert_string",
    "assert_number",
    "assert_boolean",
    "assert_uuid",
    "assert_hex_string",
    "assert_email",
    "assert_date",
    "assert_iso_date_time",
    "assert_non_nullable",
]


def assert_string(value: Any, context: Optional[ErrorProvider] = None) -> None:
    """Assert that *value* is a ``str``."""
    assert_truthy(checks.is_string(value), lambda: format_error(context, "Not a string", value))


def assert_number(value: Any, context: Optional[ErrorProvider] = None) -> None:
    assert_truthy(checks.is_number(value), lambda: format_error(context, "Not a number", value))


def assert_boolean(value: Any, context: Optional[ErrorProvider] = None) -> None:
    assert_truthy(checks.is_boolean(value), lambda: format_error(context, "Not a boolean", value))


def assert_uuid(value: Any, context: Optional[ErrorProvider] = None) -> None:
    assert_truthy(checks.is_uuid(value), lambda: format_error(context, "Invalid uuid", value))


def assert_hex_string(value: Any, context: Optional[ErrorProvider] = None) -> None:
    assert_truthy(checks.is_hex_string(value), lambda: format_error(context, "Invalid hex string", value))


def assert_email(value: Any, context: Optional[ErrorProvider] = None) -> None:
    """Assert that *value* is an ASCII email address (see :func:`~.checks.is_email`)."""
    assert_truthy(checks.is_email(value), lambda: format_error(context, "Invalid email", value))


def assert_date(value: Any, context: Optional[ErrorProvider] = None) -> None:
    """Assert that *value* is a ``datetime`` object."""
    assert_truthy(checks.is_date(value), lambda: format_error(context, "Invalid Date", value))


def assert_iso_date_time(value: Any, context: Optional[ErrorProvider] = None) -> None:
    """Assert that *value* is an ISO-8601 date-time *string* such as ``2025-08-03T12:00:00Z``."""
    assert_truthy(
        checks.is_iso_date_time(value),
        lambda: format_error(context, "Invalid ISO-8601 date-time", value),
    )


def assert_non_nullable(value: Any, context: Optional[ErrorProvider] = None) -> None:
    """Assert that *value* is neither ``None`` nor :data:`~.checks.UNDEFINED`."""
    assert_truthy(
        checks.is_non_nullable(value),
        lambda: format_error(context, f"Value is {'undefined' if value is UNDEFINED else 'null'}", value),
    )
