"""Data models for grid processing."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

UNRESOLVED = -1


class ColumnRole(str, Enum):
    """Semantic columns looked up in the header row."""

    PROCESS_NUMBER = "process_number"
    LOCATORS = "locators"
    INCLUSION_DATE = "inclusion_date"
    LAST_EVENT_DATE = "last_event_date"


class DerivedColumn(str, Enum):
    """Columns computed from other cells of the row."""

    GABINETE_COUNT = "gabinete"
    DIGITO = "digito"
    FEITO = "feito"


class ColumnMap(BaseModel):
    """Physical column index per role, ``-1`` when no header matched."""

    process_number: int = UNRESOLVED
    locators: int = UNRESOLVED
    inclusion_date: int = UNRESOLVED
    last_event_date: int = UNRESOLVED

    def index_of(self, role: ColumnRole) -> int:
        return getattr(self, role.value)

    def is_resolved(self, role: ColumnRole) -> bool:
        return self.index_of(role) != UNRESOLVED


class DefinitionKind(str, Enum):
    """Whether an output column copies a source column or is derived."""

    EXISTING = "existing"
    NEW = "new"


class HeaderDefinition(BaseModel):
    """One output column: an existing source column or a derived slot."""

    kind: DefinitionKind
    name: str
    index: Optional[int] = None  # Source column, existing only
    key: Optional[DerivedColumn] = None  # Derivation, new only

    @classmethod
    def existing(cls, index: int, name: str) -> "HeaderDefinition":
        return cls(kind=DefinitionKind.EXISTING, name=name, index=index)

    @classmethod
    def new(cls, key: DerivedColumn, name: str) -> "HeaderDefinition":
        return cls(kind=DefinitionKind.NEW, name=name, key=key)

    @property
    def is_existing(self) -> bool:
        return self.kind is DefinitionKind.EXISTING


class ProcessResult(BaseModel):
    """Outcome of processing a grid."""

    headers: list[str] = Field(default_factory=list)
    data: list[Any] = Field(default_factory=list)
    error: Optional[str] = None
    gabinete_total: int = 0  # Sum of (G) markers over all rows

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "ProcessResult":
        """Build an error result with empty headers and data."""
        return cls(headers=[], data=[], error=message)

    def column(self, name: str) -> list[Any]:
        """Return the values of the named output column, one per row."""
        position = self.headers.index(name)
        return [row[position] for row in self.data]
