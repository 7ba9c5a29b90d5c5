"""
factories.py – build new assertions out of existing ones.

Public API
----------
from_check(check, error_message=None) / from_any_check(...)
    Lift a ``value -> bool`` predicate into a value assertion.
object_assertion(schema, context=None, constraints=None)
    Turn a schema mapping into a value assertion.
array_assertion(element_assertion, constraints=None)
record_assertion(value_assertion, constraints=None)
    Reusable assertions for arrays and string-keyed records.
value_or(expected, or_assertion) / undefined_or(...) / null_or(...)
    Accept one exact value, otherwise delegate (optional / nullable fields).
string_assertion(constraints=None)
    A string with inclusive length bounds.

All factories return plain functions: build them once at schema-definition
time and reuse them freely.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from .assertions import assert_string
from .checks import UNDEFINED, strict_equals
from .errors import ErrorProvider, fail, get_error_message
from .formatter import _format_scalar
from .validator import (
    ArrayConstraints,
    Assertion,
    ObjectAssertion,
    ObjectConstraints,
    RecordConstraints,
    ValueAssertion,
    assert_array,
    assert_object,
    assert_record,
    call_value_assertion,
)

__all__ = [
    "CheckFn",
    "StringConstraints",
    "from_check",
    "from_any_check",
    "object_assertion",
    "array_assertion",
    "record_assertion",
    "value_or",
    "undefined_or",
    "null_or",
    "string_assertion",
]

T = TypeVar("T")

CheckFn = Callable[[T], bool]

# --------------------------------------------------------------------------- #
# Predicates                                                                  #
# --------------------------------------------------------------------------- #

def _render_checked_value(value: Any) -> str:
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return "[object]"
    return f"'{_format_scalar(value)}'"


def from_check(check: CheckFn[T], error_message: Optional[ErrorProvider] = None) -> ValueAssertion:
    """Create a value assertion that passes iff ``check(value)`` is truthy.

    On failure the message is ``"<context>: <error_message>"``; the context
    defaults to ``"Check is failed"`` and the message to the quoted value,
    e.g. ``from_check(lambda v: v == "a")("b")`` fails with
    ``Check is failed: 'b'``.
    """
    if not callable(check):
        fail(f'"check" is not a function: {check!r}')

    def assertion(value: Any, context: Optional[ErrorProvider] = None) -> None:
        if check(value):
            return

        def message() -> str:
            error_context = get_error_message(context) or "Check is failed"
            if not error_context.endswith(":"):
                error_context += ":"
            return f"{error_context} {get_error_message(error_message) or _render_checked_value(value)}"

        fail(message)

    return assertion


def from_any_check(check: Callable[[Any], bool], error_message: Optional[ErrorProvider] = None) -> ValueAssertion:
    """Same as :func:`from_check` for predicates written against untyped input."""
    return from_check(check, error_message)

# --------------------------------------------------------------------------- #
# Containers                                                                  #
# --------------------------------------------------------------------------- #

def object_assertion(
    schema: ObjectAssertion,
    context: Optional[ErrorProvider] = None,
    constraints: Optional[ObjectConstraints] = None,
) -> ValueAssertion:
    """Wrap *schema* so it can be used wherever a value assertion is expected.

    A *context* given here takes precedence over the one the assertion is
    later called with.
    """
    def assertion(value: Any, caller_context: Optional[ErrorProvider] = None) -> None:
        assert_object(value, schema, context if context is not None else caller_context, constraints)
    return assertion


def array_assertion(element_assertion: Assertion, constraints: Optional[ArrayConstraints] = None) -> ValueAssertion:
    """Create an assertion for arrays of *element_assertion* elements.

    The constraints themselves are checked right away: a bad bound is a
    programming error and fails when the schema is built, not when data is
    validated.
    """
    if constraints is None:
        constraints = ArrayConstraints()
    min_length = constraints.min_length or 0
    max_length = math.inf if constraints.max_length is None else constraints.max_length
    if min_length > max_length:
        fail(f"min_length must be <= max_length! min_length: {min_length}, max_length: {max_length}")
    if min_length < 0:
        fail(f"min_length must be a positive number: {min_length}")
    if max_length < 0:
        fail(f"max_length must be a positive number: {max_length}")

    def assertion(value: Any, context: Optional[ErrorProvider] = None) -> None:
        assert_array(value, element_assertion, constraints, context)
    return assertion


def record_assertion(value_assertion: Assertion, constraints: Optional[RecordConstraints] = None) -> ValueAssertion:
    def assertion(value: Any, context: Optional[ErrorProvider] = None) -> None:
        assert_record(value, value_assertion, constraints, context)
    return assertion

# --------------------------------------------------------------------------- #
# Optional / nullable                                                         #
# --------------------------------------------------------------------------- #

def value_or(expected: Any, or_assertion: Assertion) -> ValueAssertion:
    """Accept *expected* as is; run *or_assertion* for every other value."""
    def assertion(value: Any, context: Optional[ErrorProvider] = None) -> None:
        if strict_equals(value, expected):
            return
        if isinstance(or_assertion, Mapping):
            assert_object(value, or_assertion, context)
        else:
            call_value_assertion(value, or_assertion, context)
    return assertion


def undefined_or(or_assertion: Assertion) -> ValueAssertion:
    """Optional field: a missing value passes, anything else must satisfy *or_assertion*."""
    return value_or(UNDEFINED, or_assertion)


def null_or(or_assertion: Assertion) -> ValueAssertion:
    """Nullable field: ``None`` passes, anything else must satisfy *or_assertion*."""
    return value_or(None, or_assertion)

# --------------------------------------------------------------------------- #
# Strings                                                                     #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class StringConstraints:
    """Inclusive length bounds for :func:`string_assertion`."""

    min_length: int = 0
    max_length: Optional[Union[int, float]] = None


def string_assertion(constraints: Optional[StringConstraints] = None) -> ValueAssertion:
    if constraints is None:
        constraints = StringConstraints()
    min_length = constraints.min_length or 0
    max_length = math.inf if constraints.max_length is None else constraints.max_length

    def assertion(value: Any, context: Optional[ErrorProvider] = None) -> None:
        assert_string(value, context)

        def with_context(message: str) -> str:
            text = get_error_message(context)
            return f"{text} {message}" if text else message

        if len(value) < min_length:
            fail(lambda: with_context(f"length is too small {len(value)} < {min_length}"))
        if len(value) > max_length:
            fail(lambda: with_context(f"length is too large {len(value)} > {max_length}"))

    return assertion
