"""Grid cell and schema models."""

from .cells import CellKind, classify_cell, is_blank, cell_to_text
from .models import (
    UNRESOLVED,
    ColumnRole,
    DerivedColumn,
    DefinitionKind,
    ColumnMap,
    HeaderDefinition,
    ProcessResult,
)

__all__ = [
    "CellKind",
    "classify_cell",
    "is_blank",
    "cell_to_text",
    "UNRESOLVED",
    "ColumnRole",
    "DerivedColumn",
    "DefinitionKind",
    "ColumnMap",
    "HeaderDefinition",
    "ProcessResult",
]
