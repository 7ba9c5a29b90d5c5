# assertion_schema/formatter.py
from __future__ import annotations

from typing import Any, Optional

from .checks import UNDEFINED, is_number
from .errors import ErrorProvider, get_assertion_error_from_provider

__all__ = ["type_name", "format_value", "format_error", "get_message_from_error"]


def type_name(value: Any) -> str:
    """Return the diagnostic type label of *value* (``number``, ``string`` …)."""
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value) and not isinstance(value, type):
        return "function"
    return "object"


def _format_scalar(v: Any) -> str:
    """Return a stable text form of *v* for error messages."""
    if v is True:   return "true"
    if v is False:  return "false"
    if v is None:   return "null"
    if callable(v) and not isinstance(v, type):
        return getattr(v, "__qualname__", None) or repr(v)
    return str(v)


def format_value(value: Any) -> str:
    """Render *value* as ``<type:text>`` (``<undefined>`` / ``<null>`` for the missing ones)."""
    if value is UNDEFINED:
        return "<undefined>"
    if value is None:
        return "<null>"
    return f"<{type_name(value)}:{_format_scalar(value)}>"


def format_error(context: Optional[ErrorProvider], message: str, value: Any) -> str:
    """
    Build ``"<context>: <message> <value>"``.

    Parameters
    ----------
    context : ErrorProvider, optional
        Path of the checked value.  When the provider yields an exception
        instead of text, that exception is raised as is.
    message : str
        What is wrong with the value, e.g. ``"Not a string"``.
    value : Any
        The offending value, rendered with :func:`format_value`.
    """
    text = get_assertion_error_from_provider(context)
    if isinstance(text, BaseException):
        raise text
    prefix = f"{text}: " if text else ""
    return f"{prefix}{message} {format_value(value)}"


def get_message_from_error(error: Any, default_message: Optional[str] = None) -> str:
    """Extract a message from a raised object, falling back to ``str()``.

    A single string argument is returned as given (``str(KeyError("x"))``
    would quote it).
    """
    if isinstance(error, BaseException):
        if len(error.args) == 1 and isinstance(error.args[0], str):
            return error.args[0] or repr(error)
        return str(error) or repr(error)
    return default_message if default_message is not None else str(error)
