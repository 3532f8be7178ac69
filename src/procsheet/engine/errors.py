"""Errors raised while processing a grid."""


class ProcessingError(Exception):
    """Base class for precondition failures of the grid processor."""
    pass


class EmptyInputError(ProcessingError):
    """Raised when the grid has fewer than two rows."""

    def __init__(self, message: str = "file empty or insufficient rows"):
        super().__init__(message)


class NoDataRowsError(ProcessingError):
    """Raised when nothing is left after dropping the banner row."""

    def __init__(self, message: str = "no data after removing header row"):
        super().__init__(message)
