"""
frame.py – validate the rows of a pandas DataFrame.

Each row is turned into a plain ``dict`` (``DataFrame.to_dict(orient="records")``)
and checked like an element of an array, so errors read ``[3].price: Not a
number <string:n/a>``.  Missing cells (``NaN``, ``None``, ``NaT``, ``pd.NA``)
are seen by the assertions as :data:`~.checks.UNDEFINED`; wrap optional columns
with :func:`~.factories.undefined_or`.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from .checks import UNDEFINED
from .errors import ErrorProvider, fail
from .formatter import format_value
from .validator import ArrayConstraints, Assertion, _node_context, assert_array

__all__ = ["frame_records", "assert_frame"]


def _cell(value: Any) -> Any:
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return UNDEFINED
    return value


def frame_records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """Return the rows of *frame* as dicts, missing cells replaced by ``UNDEFINED``."""
    return [
        {column: _cell(value) for column, value in row.items()}
        for row in frame.to_dict(orient="records")
    ]


def assert_frame(
    frame: Any,
    row_assertion: Assertion,
    constraints: Optional[ArrayConstraints] = None,
    context: Optional[ErrorProvider] = None,
) -> None:
    """Assert that *frame* is a DataFrame whose every row satisfies *row_assertion*.

    Parameters
    ----------
    frame : Any
        The value to check; anything but a ``pandas.DataFrame`` fails.
    row_assertion : Assertion
        Usually a schema mapping column names to assertions.
    constraints : ArrayConstraints, optional
        Bounds on the number of rows and row uniqueness.
    context : ErrorProvider, optional
        Path prefix for error messages.
    """
    if not isinstance(frame, pd.DataFrame):
        ctx = _node_context(context)
        fail(lambda: f"{ctx()}value is not a DataFrame: {format_value(frame)}")
    assert_array(frame_records(frame), row_assertion, constraints, context)
