"""
assertion_schema – runtime validation of untyped values against composable assertions.
"""
from .checks import (
    UNDEFINED,
    EmailConstraints,
    check_array_has_unique_elements,
    check_arrays_have_equal_elements,
    is_boolean,
    is_date,
    is_email,
    is_hex_string,
    is_iso_date_time,
    is_non_nullable,
    is_number,
    is_string,
    is_uuid,
)
from .errors import (
    SchemaError,
    assert_truthy,
    fail,
    get_default_assertion_error_factory,
    get_error_message,
    set_default_assertion_error_factory,
    truthy,
)
from .formatter import format_error, format_value, get_message_from_error
from .assertions import (
    assert_boolean,
    assert_date,
    assert_email,
    assert_hex_string,
    assert_iso_date_time,
    assert_non_nullable,
    assert_number,
    assert_string,
    assert_uuid,
)
from .validator import (
    ArrayConstraints,
    ObjectConstraints,
    RecordConstraints,
    assert_array,
    assert_object,
    assert_record,
)
from .factories import (
    StringConstraints,
    array_assertion,
    from_any_check,
    from_check,
    null_or,
    object_assertion,
    record_assertion,
    string_assertion,
    undefined_or,
    value_or,
)
from .frame import assert_frame
from .validation import try_catch, validate_array, validate_frame, validate_object, validate_record

__all__ = [
    # predicates
    "UNDEFINED",
    "EmailConstraints",
    "check_array_has_unique_elements",
    "check_arrays_have_equal_elements",
    "is_boolean",
    "is_date",
    "is_email",
    "is_hex_string",
    "is_iso_date_time",
    "is_non_nullable",
    "is_number",
    "is_string",
    "is_uuid",
    # errors
    "SchemaError",
    "assert_truthy",
    "fail",
    "get_default_assertion_error_factory",
    "get_error_message",
    "set_default_assertion_error_factory",
    "truthy",
    "format_error",
    "format_value",
    "get_message_from_error",
    # assertions
    "assert_boolean",
    "assert_date",
    "assert_email",
    "assert_hex_string",
    "assert_iso_date_time",
    "assert_non_nullable",
    "assert_number",
    "assert_string",
    "assert_uuid",
    # engine
    "ArrayConstraints",
    "ObjectConstraints",
    "RecordConstraints",
    "assert_array",
    "assert_object",
    "assert_record",
    "assert_frame",
    # factories
    "StringConstraints",
    "array_assertion",
    "from_any_check",
    "from_check",
    "null_or",
    "object_assertion",
    "record_assertion",
    "string_assertion",
    "undefined_or",
    "value_or",
    # facade
    "try_catch",
    "validate_array",
    "validate_frame",
    "validate_object",
    "validate_record",
]
