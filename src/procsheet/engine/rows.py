"""Per-row cleaning, derivation and reassembly."""

import logging
from typing import Any, Sequence

from ..grid.cells import cell_to_text, is_blank
from ..grid.models import ColumnMap, ColumnRole, DerivedColumn, HeaderDefinition
from .dates import parse_brazilian_date
from .locators import normalize_locators

logger = logging.getLogger(__name__)

FEITO_DEFAULT = "FALSO"
DIGITO_POSITION = 6


def compute_digito(process_number: str) -> str:
    """Seventh character of the process number, "" when it is too short."""
    if len(process_number) > DIGITO_POSITION:
        return process_number[DIGITO_POSITION]
    return ""


class RowTransformer:
    """
    Transforms data rows into the output schema.

    One transformer serves a single grid: it keeps the running total of
    gabinete markers seen across the rows it transformed.
    """

    def __init__(self, column_map: ColumnMap, definitions: Sequence[HeaderDefinition]):
        self.column_map = column_map
        self.definitions = list(definitions)
        self.gabinete_total = 0

    def _index(self, role: ColumnRole) -> int:
        return self.column_map.index_of(role)

    def _cell(self, row: list, role: ColumnRole) -> Any:
        """Value of the role's column, ``None`` if unresolved or out of range."""
        index = self._index(role)
        if index < 0 or index >= len(row):
            return None
        return row[index]

    def transform(self, row: Any) -> Any:
        """
        Clean one row and lay it out per the header definitions.

        Rows that are not lists are returned as they are.
        """
        if not isinstance(row, (list, tuple)):
            logger.warning(
                f"Passing through malformed row of type {type(row).__name__}; "
                f"it will not match the {len(self.definitions)}-column schema"
            )
            return row

        working = list(row)

        process_number = self._cell(working, ColumnRole.PROCESS_NUMBER)
        if not is_blank(process_number):
            process_number = cell_to_text(process_number).strip()
            working[self._index(ColumnRole.PROCESS_NUMBER)] = process_number

        marker_count = 0
        locators = self._cell(working, ColumnRole.LOCATORS)
        if not is_blank(locators):
            normalized = normalize_locators(cell_to_text(locators))
            working[self._index(ColumnRole.LOCATORS)] = normalized.text
            marker_count = normalized.marker_count
        self.gabinete_total += marker_count

        for role in (ColumnRole.INCLUSION_DATE, ColumnRole.LAST_EVENT_DATE):
            value = self._cell(working, role)
            if not is_blank(value):
                working[self._index(role)] = parse_brazilian_date(value)

        digito = "" if is_blank(process_number) else compute_digito(process_number)

        derived = {
            DerivedColumn.GABINETE_COUNT: marker_count,
            DerivedColumn.DIGITO: digito,
            DerivedColumn.FEITO: FEITO_DEFAULT,
        }
        return [self._output_value(working, definition, derived) for definition in self.definitions]

    @staticmethod
    def _output_value(
        working: list, definition: HeaderDefinition, derived: dict[DerivedColumn, Any]
    ) -> Any:
        if not definition.is_existing:
            return derived[definition.key]
        if definition.index >= len(working) or working[definition.index] is None:
            return ""
        return working[definition.index]
