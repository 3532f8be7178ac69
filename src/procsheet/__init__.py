"""procsheet - cleans and extends judicial process spreadsheets."""

from .engine import process_rows
from .grid import ProcessResult

__version__ = "0.1.0"

__all__ = ["process_rows", "ProcessResult", "__version__"]
