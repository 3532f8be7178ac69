"""Normalization of the "Localizadores" free-text column.

Line breaking follows a small grammar::

    separator := WHITESPACE+ "-" WHITESPACE+ TOKEN
    TOKEN     := NON-WHITESPACE+

Separators are found in a single left-to-right, non-overlapping pass. A
separator whose token has no lower-case letters starts a new line before the
token; any other separator is rewritten as ``" - "``.
"""

import re
from typing import Any, NamedTuple, Optional

from ..grid.cells import cell_to_text
from .entities import decode_entities

GABINETE_MARKER = "(G)"
PRINCIPAL_PATTERN = re.compile(re.escape("(Principal)"), re.IGNORECASE)
SEPARATOR_PATTERN = re.compile(r"\s+-\s+(\S+)")


class LocatorText(NamedTuple):
    """Normalized locator text and its count of gabinete markers."""

    text: str
    marker_count: int


def break_before(token: str) -> bool:
    """True when ``token`` is upper-case only (digits and symbols included)."""
    return token == token.upper()


def split_separators(text: str) -> list[tuple[str, Optional[str]]]:
    """
    Split ``text`` on the separator grammar.

    Returns ``(prefix, token)`` pairs in order, where ``prefix`` is the text
    before a separator and ``token`` the word after its hyphen. The final
    pair carries the trailing text with ``token`` set to ``None``.
    """
    pieces = []
    position = 0
    for match in SEPARATOR_PATTERN.finditer(text):
        pieces.append((text[position:match.start()], match.group(1)))
        position = match.end()
    pieces.append((text[position:], None))
    return pieces


def format_separators(text: str) -> str:
    """Rejoin the pieces of ``text`` with a newline or ``" - "`` per token."""
    out = []
    for prefix, token in split_separators(text):
        out.append(prefix)
        if token is not None:
            out.append("\n" if break_before(token) else " - ")
            out.append(token)
    return "".join(out)


def normalize_locators(value: Any) -> LocatorText:
    """
    Clean a locators cell and count its ``(G)`` markers.

    Markers are counted on the decoded text before any cleaning. Empty and
    non-text values are only stringified (``""`` for ``None``) and carry no
    markers.
    """
    if not isinstance(value, str) or not value:
        return LocatorText(cell_to_text(value), 0)

    text = decode_entities(value)
    marker_count = text.count(GABINETE_MARKER)

    text = PRINCIPAL_PATTERN.sub("", text).strip()
    return LocatorText(format_separators(text), marker_count)
