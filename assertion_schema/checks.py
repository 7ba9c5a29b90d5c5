"""
checks.py – pure boolean predicates used as the leaves of every assertion.

Every predicate accepts *any* value and returns ``True``/``False``; none of
them raise, whatever the input (``None``, :data:`UNDEFINED`, containers,
callables, arbitrarily large integers …).

Public API
----------
UNDEFINED
    Sentinel standing for a value that is absent (e.g. a missing mapping key).
is_string / is_number / is_boolean / is_date / is_iso_date_time
    Primitive type tests.
is_email / is_uuid / is_hex_string
    String format tests.
is_non_nullable
    ``False`` for ``None`` and :data:`UNDEFINED`.
check_array_has_unique_elements / check_arrays_have_equal_elements
    Sequence helpers.
strict_equals
    Identity-or-same-type equality (numbers across int/float) used by ``value_or`` and ``key_field``.
"""

from __future__ import annotations

import datetime as _dt
import numbers
import re
import unicodedata
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

__all__ = [
    "UNDEFINED",
    "EmailConstraints",
    "is_string",
    "is_number",
    "is_boolean",
    "is_date",
    "is_iso_date_time",
    "is_non_nullable",
    "is_email",
    "is_uuid",
    "is_hex_string",
    "check_array_has_unique_elements",
    "check_arrays_have_equal_elements",
    "strict_equals",
]

T = TypeVar("T")

# --------------------------------------------------------------------------- #
# The "undefined" sentinel                                                    #
# --------------------------------------------------------------------------- #

class _Undefined:
    """Marker for a value that does not exist at all (not even ``None``)."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

# --------------------------------------------------------------------------- #
# Primitive type predicates                                                   #
# --------------------------------------------------------------------------- #

def is_string(value: Any) -> bool:
    """Return True iff *value* is a ``str``."""
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Return True iff *value* is a real number (``bool`` is not a number)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_date(value: Any) -> bool:
    """Return True iff *value* is a ``datetime`` (pandas ``Timestamp`` included)."""
    return isinstance(value, _dt.datetime)


_DT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+\-]\d{2}:\d{2})$", re.ASCII)

def is_iso_date_time(value: Any) -> bool:
    """Return True iff *value* is a valid ISO-8601 date-time string with a zone."""
    if not isinstance(value, str) or not _DT_RE.fullmatch(value):
        return False
    try:
        _dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def is_non_nullable(value: Any) -> bool:
    """Return True unless *value* is ``None`` or :data:`UNDEFINED`."""
    return value is not None and value is not UNDEFINED

# --------------------------------------------------------------------------- #
# String format predicates                                                    #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class EmailConstraints:
    """Options for :func:`is_email`."""

    allow_international_domains: bool = False


_EMAIL_RE = re.compile(
    r"[-!#$%&'*+/\d=?A-Z^_a-z{|}~](\.?[-!#$%&'*+/\d=?A-Z^_a-z`{|}~])*"
    r"@[a-zA-Z0-9](-*\.?[a-zA-Z\d])*\.[a-zA-Z](-?[a-zA-Z\d])+",
    re.ASCII,
)
_EMAIL_LOCAL_SPECIALS = frozenset("-!#$%&'*+/=?^_`{|}~")


def _is_word_char(ch: str) -> bool:
    """Letters, combining marks and digits of any script."""
    return unicodedata.category(ch)[0] in ("L", "M", "N")


def _is_i18n_local_part(local: str) -> bool:
    if not local or local.startswith(".") or local.endswith(".") or ".." in local:
        return False
    return all(ch == "." or ch in _EMAIL_LOCAL_SPECIALS or _is_word_char(ch) for ch in local)


def _is_i18n_domain(domain: str) -> bool:
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    for label in labels:
        if not label or label.startswith("-") or label.endswith("-"):
            return False
        if not all(ch == "-" or _is_word_char(ch) for ch in label):
            return False
    tld = labels[-1]
    return len(tld) >= 2 and unicodedata.category(tld[0]).startswith("L")


def is_email(value: Any, *, constraints: Optional[EmailConstraints] = None) -> bool:
    """Return True if *value* is a valid email address.

    Parameters
    ----------
    value : Any
        Candidate value; non-strings are rejected.
    constraints : EmailConstraints, optional
        With ``allow_international_domains`` set, letters and digits of any
        script are accepted in both the local part and the domain labels.
    """
    if not isinstance(value, str) or len(value) == 0 or len(value) > 254:
        return False
    if constraints is not None and constraints.allow_international_domains:
        if value.count("@") != 1:
            return False
        local, domain = value.split("@")
        if not (_is_i18n_local_part(local) and _is_i18n_domain(domain)):
            return False
    elif not _EMAIL_RE.fullmatch(value):
        return False

    local, domain = value.split("@", 1)
    if len(local) > 64:
        return False
    return not any(len(part) > 63 for part in domain.split("."))


_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.IGNORECASE)

def is_uuid(value: Any) -> bool:
    """Return True if *value* is a valid (v1..v5) UUID string."""
    return isinstance(value, str) and _UUID_RE.fullmatch(value) is not None


_HEX_RE = re.compile(r"[0-9A-Fa-f]*")

def is_hex_string(value: Any) -> bool:
    """Return True if *value* is a string of hexadecimal digits only (or empty)."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None

# --------------------------------------------------------------------------- #
# Sequence & equality helpers                                                 #
# --------------------------------------------------------------------------- #

def check_array_has_unique_elements(array: Sequence[T], identity: Callable[[T], str]) -> bool:
    """Return True if no two elements of *array* share the same ``identity()``."""
    if len(array) <= 1:
        return True
    seen: set[str] = set()
    for element in array:
        key = identity(element)
        if key in seen:
            return False
        seen.add(key)
    return True


def check_arrays_have_equal_elements(
    array1: Optional[Sequence[T]],
    array2: Optional[Sequence[T]],
    comparator: Callable[[T, T], bool],
) -> bool:
    """Return True if both arrays hold pairwise-equal elements.

    Two missing arrays (both ``None`` or both :data:`UNDEFINED`) are equal;
    a missing array never equals a present one.
    """
    if not is_non_nullable(array1) or not is_non_nullable(array2):
        return array1 is array2
    if len(array1) != len(array2):
        return False
    return all(comparator(e1, e2) for e1, e2 in zip(array1, array2))


def strict_equals(a: Any, b: Any) -> bool:
    """Identity for containers, same-type equality for scalars.

    Numbers compare by value across ``int``/``float`` (``0 == 0.0``); ``bool``
    is not a number and never equals one.
    """
    if a is b:
        return True
    if is_number(a) and is_number(b):
        return bool(a == b)
    if type(a) is not type(b) or isinstance(a, (Mapping, list, tuple, set)):
        return False
    try:
        return bool(a == b)
    except Exception:  # exotic __eq__ implementations (e.g. numpy arrays)
        return False
