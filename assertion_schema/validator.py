"""
validator.py - the recursive assertion engine
=============================================

Walks an untyped value (parsed JSON, a config mapping …) against a schema made
of assertions and raises a path-qualified :class:`~.errors.SchemaError` at the
first violation.

An *assertion* comes in exactly two shapes:

* a **value assertion** – any callable ``(value, context=None) -> None`` that
  raises when *value* is wrong and returns ``None`` otherwise;
* an **object assertion** (schema) – a ``Mapping`` from field name to
  assertion, with an optional ``"$o"`` entry holding a cross-field check that
  runs on the whole object once every field has passed.

Public API
----------
assert_object(value, schema, context=None, constraints=None)
assert_array(value, element_assertion, constraints=None, context=None)
assert_record(value, value_assertion, constraints=None, context=None)
call_value_assertion(value, assertion, context)

Error contexts accumulate as ``.field`` for objects and ``[i]`` / ``['key']``
for arrays and records, e.g. ``.address.lines[2]: Not a string <number:1>``.
"""

from __future__ import annotations

import inspect
import math
from dataclasses import dataclass
from typing import Any, Callable, Collection, Generic, Mapping, Optional, TypeVar, Union

from .checks import UNDEFINED, check_array_has_unique_elements, strict_equals
from .errors import ErrorProvider, fail, get_error_message
from .formatter import format_value, type_name

__all__ = [
    "CROSS_FIELD_KEY",
    "Assertion",
    "ValueAssertion",
    "ObjectAssertion",
    "CrossFieldAssertion",
    "ObjectConstraints",
    "ArrayConstraints",
    "RecordConstraints",
    "assert_object",
    "assert_array",
    "assert_record",
    "call_value_assertion",
]

T = TypeVar("T")

CROSS_FIELD_KEY = "$o"

ValueAssertion = Callable[..., None]
ObjectAssertion = Mapping[str, Any]
Assertion = Union[ValueAssertion, ObjectAssertion]
CrossFieldAssertion = Callable[[Any, Optional[ErrorProvider]], None]

# --------------------------------------------------------------------------- #
# Constraints                                                                 #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class ObjectConstraints:
    """Extra rules for :func:`assert_object`.

    ``fail_on_unknown_fields`` rejects keys of the value that have no entry in
    the schema, except for the names listed in ``allowed_unknown_field_names``.
    """

    fail_on_unknown_fields: bool = False
    allowed_unknown_field_names: Collection[str] = ()


@dataclass(frozen=True)
class ArrayConstraints(Generic[T]):
    """Length bounds (both inclusive) and optional uniqueness for arrays."""

    min_length: int = 0
    max_length: Optional[Union[int, float]] = None
    unique_by_identity: Optional[Callable[[T], str]] = None


@dataclass(frozen=True)
class RecordConstraints(Generic[T]):
    """Extra rules for :func:`assert_record`.

    ``key_assertion`` validates every key, ``key_field`` names a field of each
    value that must equal the key the value is stored under and
    ``cross_field`` checks the whole record after every entry has passed.
    """

    key_assertion: Optional[ValueAssertion] = None
    key_field: Optional[str] = None
    cross_field: Optional[CrossFieldAssertion] = None


# --------------------------------------------------------------------------- #
# Context helpers                                                             #
# --------------------------------------------------------------------------- #

def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _node_context(provider: Optional[ErrorProvider]) -> Callable[..., str]:
    """Return ``ctx(separator=True)``: the parent path, space-terminated if non-empty."""
    def ctx(separator: bool = True) -> str:
        text = get_error_message(provider)
        if not text:
            return ""
        return f"{text} " if separator else text
    return ctx


def _field_context(ctx: Callable[[], str], key: Any) -> Callable[[], str]:
    return lambda: f"{ctx()}.{key}"


def _index_context(ctx: Callable[..., str], index: int) -> Callable[[], str]:
    return lambda: f"{ctx(False)}[{index}]"


def _key_context(ctx: Callable[..., str], key: Any) -> Callable[[], str]:
    return lambda: f"{ctx(False)}['{key}']"


# --------------------------------------------------------------------------- #
# Dispatch                                                                    #
# --------------------------------------------------------------------------- #

def _accepts_context(assertion: Callable[..., Any]) -> bool:
    """True unless *assertion* can only take the value itself (e.g. a bare predicate)."""
    try:
        signature = inspect.signature(assertion)
    except (TypeError, ValueError):  # builtins without introspection data
        return True
    try:
        signature.bind(None, None)
    except TypeError:
        return False
    return True


def call_value_assertion(value: Any, assertion: ValueAssertion, context: Optional[ErrorProvider]) -> None:
    """Invoke a value assertion and make sure it behaved like one.

    A one-argument callable is called with the value only, so a predicate
    used in place of an assertion reaches the return-value check below.
    """
    if _accepts_context(assertion):
        result = assertion(value, context)
    else:
        result = assertion(value)
    if result is not None:
        fail(
            f"Assertion function must assert (return None) but it returns a value: "
            f"{result!r}. Wrap with from_check()?"
        )


def _assert_child_value(value: Any, assertion: Assertion, context: Callable[[], str]) -> None:
    if isinstance(assertion, Mapping):
        if _is_array(value):
            fail(lambda: f"{context()} use array_assertion() to create a value assertion for an array")
        assert_object(value, assertion, context)
    elif callable(assertion):
        call_value_assertion(value, assertion, context)
    else:
        fail(lambda: f"{context()} assertion is not an object or a function: {type_name(assertion)}")


# --------------------------------------------------------------------------- #
# Objects                                                                     #
# --------------------------------------------------------------------------- #

def assert_object(
    value: Any,
    schema: ObjectAssertion,
    context: Optional[ErrorProvider] = None,
    constraints: Optional[ObjectConstraints] = None,
) -> None:
    """Assert that *value* is a mapping whose fields satisfy *schema*.

    Fields are checked in schema order; a field missing from *value* is seen
    by its assertion as :data:`~.checks.UNDEFINED`.  The ``"$o"`` entry, when
    present, is called as ``schema["$o"](value, context)`` only after all
    fields have passed.  Arrays are rejected: use :func:`assert_array`.
    """

    def ctx() -> str:
        return get_error_message(context)

    def with_context(message: str) -> str:
        text = ctx()
        return f"{text} {message}" if text else message

    # 1) shape ---------------------------------------------------------------
    if _is_array(value):
        fail(lambda: with_context("is an array."))
    if value is None:
        fail(lambda: with_context("is null"))
    if not isinstance(value, Mapping):
        fail(lambda: with_context(f"is not an object: {type_name(value)}"))

    # 2) unknown fields ------------------------------------------------------
    if constraints is not None and constraints.fail_on_unknown_fields:
        allowed = set(constraints.allowed_unknown_field_names)
        for name in value:
            if name not in schema and name not in allowed:
                fail(lambda: with_context(f"property can't be checked: {name}"))

    # 3) per-field assertions ------------------------------------------------
    cross_field: Optional[CrossFieldAssertion] = None
    for key, assertion in schema.items():
        if key == CROSS_FIELD_KEY:
            if not callable(assertion):
                fail(lambda: f"{ctx()}.{key} cross-field assertion is not a function: {type_name(assertion)}")
            cross_field = assertion  # run last
            continue
        _assert_child_value(value.get(key, UNDEFINED), assertion, _field_context(ctx, key))

    # 4) whole-object check --------------------------------------------------
    if cross_field is not None:
        cross_field(value, context)


# --------------------------------------------------------------------------- #
# Arrays                                                                      #
# --------------------------------------------------------------------------- #

def assert_array(
    value: Any,
    element_assertion: Assertion,
    constraints: Optional[ArrayConstraints] = None,
    context: Optional[ErrorProvider] = None,
) -> None:
    """Assert that *value* is a list (or tuple) of valid elements.

    Length bounds are checked first, then uniqueness, then every element in
    index order; the first failing element aborts the call.
    """
    if constraints is None:
        constraints = ArrayConstraints()
    ctx = _node_context(context)
    if not _is_array(value):
        fail(lambda: f"{ctx()}value is not an array: {format_value(value)}")

    min_length = constraints.min_length or 0
    max_length = math.inf if constraints.max_length is None else constraints.max_length
    if len(value) < min_length:
        fail(lambda: f"{ctx()}array length < min_length. Array length: {len(value)}, min_length: {min_length}")
    if len(value) > max_length:
        fail(lambda: f"{ctx()}array length > max_length. Array length: {len(value)}, max_length: {max_length}")
    if constraints.unique_by_identity is not None:
        if not check_array_has_unique_elements(value, constraints.unique_by_identity):
            fail(lambda: f"{ctx()}array contains non-unique elements")

    for i, element in enumerate(value):
        _assert_child_value(element, element_assertion, _index_context(ctx, i))


# --------------------------------------------------------------------------- #
# Records                                                                     #
# --------------------------------------------------------------------------- #

def assert_record(
    value: Any,
    value_assertion: Assertion,
    constraints: Optional[RecordConstraints] = None,
    context: Optional[ErrorProvider] = None,
) -> None:
    """Assert that *value* is a mapping whose every value satisfies *value_assertion*."""
    if constraints is None:
        constraints = RecordConstraints()
    ctx = _node_context(context)
    if _is_array(value):
        fail(lambda: f"{ctx()}the value is not a record, but is an array")
    if value is None:
        fail(lambda: f"{ctx()}value is null")
    if not isinstance(value, Mapping):
        fail(lambda: f"{ctx()}value is not an object: {format_value(value)}")

    key_field = constraints.key_field
    for key, item in value.items():
        key_ctx = _key_context(ctx, key)
        if constraints.key_assertion is not None:
            _assert_child_value(key, constraints.key_assertion, lambda: f"{key_ctx()}, key assertion failed:")
        _assert_child_value(item, value_assertion, key_ctx)
        if key_field:
            if not isinstance(item, Mapping):
                fail(lambda: f"{key_ctx()} is not an object: {format_value(item)}")
            field_value = item.get(key_field, UNDEFINED)
            if not strict_equals(field_value, key):
                fail(lambda: f"{key_ctx()} key value does not match object field '{key_field}' value: "
                             f"{format_value(field_value)}")

    if constraints.cross_field is not None:
        constraints.cross_field(value, context)
