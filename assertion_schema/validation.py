"""
validation.py – non-throwing counterparts of the ``assert_*`` functions.

Every ``validate_*`` function returns ``None`` when the value is valid and the
error message otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .errors import ErrorProvider
from .formatter import get_message_from_error
from .frame import assert_frame
from .validator import (
    ArrayConstraints,
    Assertion,
    ObjectAssertion,
    ObjectConstraints,
    RecordConstraints,
    assert_array,
    assert_object,
    assert_record,
)

__all__ = ["try_catch", "validate_object", "validate_array", "validate_record", "validate_frame"]

logger = logging.getLogger(__name__)


def try_catch(fn: Callable[[], Any]) -> Optional[str]:
    """Run *fn* and return the message of the exception it raises, if any."""
    try:
        fn()
    except Exception as exc:
        message = get_message_from_error(exc)
        logger.debug("validation failed: %s", message)
        return message
    return None


def validate_object(
    value: Any,
    schema: ObjectAssertion,
    context: Optional[ErrorProvider] = None,
    constraints: Optional[ObjectConstraints] = None,
) -> Optional[str]:
    return try_catch(lambda: assert_object(value, schema, context, constraints))


def validate_array(
    value: Any,
    element_assertion: Assertion,
    constraints: Optional[ArrayConstraints] = None,
    context: Optional[ErrorProvider] = None,
) -> Optional[str]:
    return try_catch(lambda: assert_array(value, element_assertion, constraints, context))


def validate_record(
    value: Any,
    value_assertion: Assertion,
    constraints: Optional[RecordConstraints] = None,
    context: Optional[ErrorProvider] = None,
) -> Optional[str]:
    return try_catch(lambda: assert_record(value, value_assertion, constraints, context))


def validate_frame(
    frame: Any,
    row_assertion: Assertion,
    constraints: Optional[ArrayConstraints] = None,
    context: Optional[ErrorProvider] = None,
) -> Optional[str]:
    """Non-throwing :func:`~.frame.assert_frame`."""
    return try_catch(lambda: assert_frame(frame, row_assertion, constraints, context))
