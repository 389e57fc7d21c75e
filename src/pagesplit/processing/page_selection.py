"""Page-selection parsing (`"1, 3-5, 8"` -> `[1, 3, 4, 5, 8]`)."""

from __future__ import annotations

import re

from pagesplit.exceptions import PageSelectionError
from pagesplit.typing.enums import ErrorKind

_ALLOWED_CHARACTERS = re.compile(r"[0-9,\-\s]+")
_LEADING_DIGITS = re.compile(r"[0-9]+")


def parse_page_selection(selection: str, total_pages: int) -> list[int]:
    """Resolve a page-selection string into sorted unique page numbers.

    Checks run from cheapest to most specific: the character class of the
    whole string, then the structure of each token, then ordering and bounds.

    Args:
        selection (str): Comma-separated pages and inclusive `start-end` ranges.
        total_pages (int): Page count of the document the selection applies to.

    Raises:
        ValueError: If `total_pages` is lower than 1.
        PageSelectionError: If the selection is empty, malformed or out of bounds.

    Returns:
        list[int]: Ascending 1-based page numbers without duplicates.
    """
    if total_pages < 1:
        raise ValueError(f"total_pages must be >= 1, got {total_pages}")  # noqa: TRY003

    if not selection or not selection.strip():
        raise PageSelectionError(kind=ErrorKind.EMPTY_SELECTION)
    if not _ALLOWED_CHARACTERS.fullmatch(selection):
        raise PageSelectionError(kind=ErrorKind.INVALID_CHARACTERS)

    pages: set[int] = set()
    for raw_token in selection.split(","):
        token = raw_token.strip()
        if "-" in token:
            start, end = _parse_range(token, total_pages)
            pages.update(range(start, end + 1))
        else:
            pages.add(_parse_single(token, total_pages))

    if not pages:
        raise PageSelectionError(kind=ErrorKind.EMPTY_SELECTION)
    return sorted(pages)


def _parse_range(token: str, total_pages: int) -> tuple[int, int]:
    """Parse and validate a `start-end` token.

    Args:
        token (str): Trimmed token containing a hyphen.
        total_pages (int): Document page count.

    Raises:
        PageSelectionError: If the range is malformed, reversed or out of bounds.

    Returns:
        tuple[int, int]: Inclusive start and end page numbers.
    """
    parts = [part.strip() for part in token.split("-")]
    if len(parts) != 2 or not all(parts):  # noqa: PLR2004
        raise PageSelectionError(kind=ErrorKind.INVALID_RANGE_FORMAT, token=token)

    start, end = _to_int(parts[0]), _to_int(parts[1])
    if start is None or end is None:
        raise PageSelectionError(kind=ErrorKind.INVALID_RANGE_FORMAT, token=token)
    if start > end:
        raise PageSelectionError(kind=ErrorKind.INVALID_RANGE_ORDER, token=token)
    if start < 1 or end > total_pages:
        raise PageSelectionError(kind=ErrorKind.OUT_OF_BOUNDS, token=token)
    return start, end


def _parse_single(token: str, total_pages: int) -> int:
    """Parse and validate a single page token."""
    page = _to_int(token)
    if page is None:
        raise PageSelectionError(kind=ErrorKind.INVALID_NUMBER, token=token)
    if not 1 <= page <= total_pages:
        raise PageSelectionError(kind=ErrorKind.OUT_OF_BOUNDS, token=token)
    return page


def _to_int(value: str) -> int | None:
    """Return the integer spelled by the leading digits of `value`, or None when there are none.

    Anything after the leading digits is ignored, so `"1 2"` reads as 1.
    """
    match = _LEADING_DIGITS.match(value)
    if match is None:
        return None
    return int(match.group())
