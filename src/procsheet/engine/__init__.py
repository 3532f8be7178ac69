"""Grid transformation engine."""

from .dates import parse_brazilian_date
from .entities import decode_entities
from .errors import ProcessingError, EmptyInputError, NoDataRowsError
from .headers import resolve_columns, find_column, HEADER_KEYWORDS
from .locators import LocatorText, normalize_locators, split_separators, break_before
from .processor import GridProcessor, process_rows
from .rows import RowTransformer, compute_digito
from .schema import build_schema, header_names

__all__ = [
    "parse_brazilian_date",
    "decode_entities",
    "ProcessingError",
    "EmptyInputError",
    "NoDataRowsError",
    "resolve_columns",
    "find_column",
    "HEADER_KEYWORDS",
    "LocatorText",
    "normalize_locators",
    "split_separators",
    "break_before",
    "GridProcessor",
    "process_rows",
    "RowTransformer",
    "compute_digito",
    "build_schema",
    "header_names",
]
