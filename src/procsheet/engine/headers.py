"""Header row lookup of the semantic columns."""

import logging
import unicodedata
from typing import Any, Sequence

from ..grid.cells import cell_to_text, is_blank
from ..grid.models import UNRESOLVED, ColumnMap, ColumnRole

logger = logging.getLogger(__name__)

# Lower-case substrings a header must contain to take each role
HEADER_KEYWORDS = {
    ColumnRole.PROCESS_NUMBER: "número processo",
    ColumnRole.LOCATORS: "localizadores",
    ColumnRole.INCLUSION_DATE: "inclusão no localizador",
    ColumnRole.LAST_EVENT_DATE: "último evento",
}


def _normalize_header(value: Any) -> str:
    return unicodedata.normalize("NFC", cell_to_text(value)).lower()


def find_column(header_row: Sequence[Any], keyword: str) -> int:
    """Index of the first header containing ``keyword``, or ``-1``."""
    for index, header in enumerate(header_row):
        if is_blank(header):
            continue
        if keyword in _normalize_header(header):
            return index
    return UNRESOLVED


def resolve_columns(header_row: Sequence[Any]) -> ColumnMap:
    """
    Map every column role onto a physical column of the header row.

    Roles are resolved independently; a role with no matching header is
    left unresolved.
    """
    indices = {
        role.value: find_column(header_row, keyword)
        for role, keyword in HEADER_KEYWORDS.items()
    }
    column_map = ColumnMap(**indices)

    missing = [role.value for role in ColumnRole if not column_map.is_resolved(role)]
    if missing:
        logger.warning(f"Columns not found in header row: {', '.join(missing)}")
    return column_map
