"""HTML character entity decoding for exported cell text."""

import html
from typing import Any

from ..grid.cells import cell_to_text

NBSP = "\u00a0"


def decode_entities(value: Any) -> str:
    """
    Resolve HTML character entities embedded in a cell.

    Handles the full HTML5 named table plus decimal and hex numeric
    references. Non-breaking spaces come out as plain spaces. Unknown
    entities are left as written.

    Args:
        value: Raw cell value; non-text values are stringified first

    Returns:
        The decoded text ("" for an absent cell)
    """
    return html.unescape(cell_to_text(value)).replace(NBSP, " ")
