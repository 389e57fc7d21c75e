"""PageSplit package."""

from pagesplit.exceptions import (
    DependencyError,
    EmptyPdfError,
    FileTooLargeError,
    PackageError,
    PageSelectionError,
    PdfLoadError,
    SettingsError,
)
from pagesplit.logging import configure_logging, get_logger
from pagesplit.processing.page_selection import parse_page_selection
from pagesplit.settings import Settings, get_settings
from pagesplit.splitter import iter_page_outcomes, run_split

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("pagesplit")

__all__ = [
    "DependencyError",
    "EmptyPdfError",
    "FileTooLargeError",
    "PackageError",
    "PageSelectionError",
    "PdfLoadError",
    "Settings",
    "SettingsError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "iter_page_outcomes",
    "logger",
    "parse_page_selection",
    "run_split",
]
