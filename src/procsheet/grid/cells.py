"""Cell classification and coercion helpers.

A grid cell is untyped: whatever the spreadsheet decoder produced. These
helpers give every use site the same view of it.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any


class CellKind(str, Enum):
    """Kinds of value a grid cell can hold."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BLANK = "blank"


def classify_cell(value: Any) -> CellKind:
    """Return the kind of a raw cell value."""
    if value is None or value == "":
        return CellKind.BLANK
    if isinstance(value, (datetime, date)):
        return CellKind.DATE
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return CellKind.NUMBER
    return CellKind.TEXT


def is_blank(value: Any) -> bool:
    """True for absent cells: ``None`` or the empty string."""
    return classify_cell(value) is CellKind.BLANK


def cell_to_text(value: Any) -> str:
    """
    Stringify a cell.

    ``None`` becomes ``""`` and integral floats drop their ``.0`` so that a
    process number read as ``1234567890.0`` stays ``"1234567890"``.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
