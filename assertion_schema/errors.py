"""
errors.py – the failure primitives shared by every assertion.

Public API
----------
SchemaError
    Exception raised for any assertion failure.

ErrorProvider
    A literal message or a zero-argument callable that builds the message (or
    an exception) lazily, only when a check actually fails.

fail / assert_truthy / truthy
    The lowest-level failure primitives.  All of them raise through the
    process-wide error factory, see :func:`set_default_assertion_error_factory`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar, Union

__all__ = [
    "SchemaError",
    "ErrorProvider",
    "ErrorFactory",
    "fail",
    "assert_truthy",
    "truthy",
    "get_assertion_error_from_provider",
    "get_error_message",
    "set_default_assertion_error_factory",
    "get_default_assertion_error_factory",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorProvider = Union[str, Callable[[], Union[str, BaseException]]]
ErrorFactory = Callable[..., BaseException]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a value violates the supplied assertion."""


# --------------------------------------------------------------------------- #
# Error factory (process-wide configuration)                                  #
# --------------------------------------------------------------------------- #

def _default_error_factory(message: str, *extra: Any) -> BaseException:
    return SchemaError(message)


_error_factory: ErrorFactory = _default_error_factory


def set_default_assertion_error_factory(factory: Optional[ErrorFactory] = None) -> None:
    """Replace the factory used by :func:`fail` to build exceptions.

    The factory is called as ``factory(message, *extra)`` and must return an
    exception instance.  Passing ``None`` restores the default, which builds
    a :class:`SchemaError` from the message and ignores *extra*.  The setting
    is global: it affects every later call in the process until replaced.
    """
    global _error_factory
    _error_factory = factory if factory is not None else _default_error_factory
    logger.debug("assertion error factory set to %r", _error_factory)


def get_default_assertion_error_factory() -> ErrorFactory:
    return _error_factory


# --------------------------------------------------------------------------- #
# Lazy error providers                                                        #
# --------------------------------------------------------------------------- #

def get_assertion_error_from_provider(provider: Optional[ErrorProvider]) -> Union[str, BaseException]:
    """Evaluate *provider* once and return its message or exception."""
    if provider is None:
        return ""
    if isinstance(provider, str):
        return provider
    return provider()


def get_error_message(provider: Optional[ErrorProvider]) -> str:
    """Like :func:`get_assertion_error_from_provider` but always a string."""
    error = get_assertion_error_from_provider(provider)
    if isinstance(error, str):
        return error
    return str(error) or "<no error message>"


# --------------------------------------------------------------------------- #
# Failure primitives                                                          #
# --------------------------------------------------------------------------- #

def fail(error: Optional[ErrorProvider] = None, *extra: Any) -> None:
    """Raise unconditionally.

    An exception produced by *error* is raised as is; a message is turned into
    an exception by the current error factory (``"Assertion error"`` when the
    message is empty).
    """
    message = get_assertion_error_from_provider(error)
    if isinstance(message, BaseException):
        raise message
    raise _error_factory(message or "Assertion error", *extra)


def assert_truthy(value: Any, error: Optional[ErrorProvider] = None, *extra: Any) -> None:
    """Raise via :func:`fail` unless *value* is truthy."""
    if not value:
        fail(error, *extra)


def truthy(value: Optional[T], error: Optional[ErrorProvider] = None, *extra: Any) -> T:
    """Return *value* unchanged if it is truthy, raise otherwise."""
    assert_truthy(value, error, *extra)
    return value  # type: ignore[return-value]
