"""Grid processing entry point."""

import logging
from typing import Any, Sequence

from ..grid.models import ProcessResult
from .errors import EmptyInputError, NoDataRowsError
from .headers import resolve_columns
from .rows import RowTransformer
from .schema import build_schema, header_names

logger = logging.getLogger(__name__)


class GridProcessor:
    """
    Turns a raw exported grid into the presentation grid.

    The first row of the grid is a banner and is dropped; the second row
    holds the headers; every following row is data. Each call to
    :meth:`process` is independent.
    """

    def process(self, grid: Sequence[Sequence[Any]]) -> ProcessResult:
        """
        Process a grid.

        Args:
            grid: Rows of cells as read from the spreadsheet

        Returns:
            ProcessResult with headers and rows, or with ``error`` set and
            nothing else when processing failed
        """
        try:
            if len(grid) < 2:
                raise EmptyInputError()

            clean = list(grid[1:])
            if not clean:
                raise NoDataRowsError()

            header_row = clean[0]
            rows = clean[1:]

            column_map = resolve_columns(header_row)
            definitions = build_schema(header_row, column_map)
            transformer = RowTransformer(column_map, definitions)
            data = [transformer.transform(row) for row in rows]

            headers = header_names(definitions)
            logger.info(
                f"Processed {len(data)} rows into {len(headers)} columns "
                f"({transformer.gabinete_total} gabinete markers)"
            )
            return ProcessResult(
                headers=headers,
                data=data,
                gabinete_total=transformer.gabinete_total,
            )

        except Exception as e:
            message = str(e) or type(e).__name__
            logger.error(f"Grid processing failed: {message}")
            return ProcessResult.failure(message)


def process_rows(grid: Sequence[Sequence[Any]]) -> ProcessResult:
    """Process ``grid`` with a fresh :class:`GridProcessor`."""
    return GridProcessor().process(grid)
