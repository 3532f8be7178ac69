"""Parsing of Brazilian formatted date strings."""

import logging
from datetime import datetime
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _to_int(token: Optional[str]) -> Optional[int]:
    """Convert a date/time token, ``None`` when it is not an integer."""
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def parse_brazilian_date(value: Any) -> Any:
    """
    Parse ``DD/MM/YYYY[ HH:MM[:SS]]`` into a naive datetime.

    Anything that does not parse is returned unchanged, as is any
    non-string value.
    """
    if not isinstance(value, str) or not value:
        return value

    parts = value.split(" ")
    date_part = parts[0]
    time_part = parts[1] if len(parts) > 1 else ""
    if not date_part:
        return value

    date_tokens = date_part.split("/")
    day, month, year = (
        _to_int(date_tokens[i]) if i < len(date_tokens) else None for i in range(3)
    )
    if not day or not month or not year:
        return value

    time_values = [0, 0, 0]
    if time_part:
        for i, token in enumerate(time_part.split(":")[:3]):
            if token == "":
                continue
            number = _to_int(token)
            if number is None:
                return value
            time_values[i] = number

    try:
        return datetime(year, month, day, *time_values)
    except ValueError as e:
        logger.debug(f"Keeping unparseable date {value!r}: {e}")
        return value
