"""Page-selection and size formatting helpers."""

from pagesplit.processing.page_selection import parse_page_selection
from pagesplit.processing.sizes import format_bytes

__all__ = [
    "format_bytes",
    "parse_page_selection",
]
