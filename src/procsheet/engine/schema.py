"""Output schema: original headers plus derived columns at their anchors."""

from typing import Any, Sequence

from ..grid.cells import cell_to_text
from ..grid.models import ColumnMap, ColumnRole, DerivedColumn, HeaderDefinition

GABINETE_HEADER = "Localizadores do Gabinete"
DIGITO_HEADER = "Dígito"
FEITO_HEADER = "Feito"


def _anchor_position(definitions: list[HeaderDefinition], index: int) -> int:
    """Position of the existing definition drawn from column ``index``."""
    for position, definition in enumerate(definitions):
        if definition.is_existing and definition.index == index:
            return position
    return -1


def _insert_after(
    definitions: list[HeaderDefinition],
    source_index: int,
    new_definitions: list[HeaderDefinition],
) -> None:
    """Insert after the anchor column, or append when there is none."""
    position = _anchor_position(definitions, source_index)
    if position == -1:
        definitions.extend(new_definitions)
    else:
        definitions[position + 1:position + 1] = new_definitions


def build_schema(
    header_row: Sequence[Any], column_map: ColumnMap
) -> list[HeaderDefinition]:
    """
    Build the ordered output columns.

    "Localizadores do Gabinete" follows the locators column, "Dígito" and
    "Feito" follow the process number column. Derived columns whose anchor
    was not found go to the end.
    """
    definitions = [
        HeaderDefinition.existing(index, cell_to_text(header))
        for index, header in enumerate(header_row)
    ]

    _insert_after(
        definitions,
        column_map.index_of(ColumnRole.LOCATORS),
        [HeaderDefinition.new(DerivedColumn.GABINETE_COUNT, GABINETE_HEADER)],
    )
    _insert_after(
        definitions,
        column_map.index_of(ColumnRole.PROCESS_NUMBER),
        [
            HeaderDefinition.new(DerivedColumn.DIGITO, DIGITO_HEADER),
            HeaderDefinition.new(DerivedColumn.FEITO, FEITO_HEADER),
        ],
    )
    return definitions


def header_names(definitions: Sequence[HeaderDefinition]) -> list[str]:
    return [definition.name for definition in definitions]
