"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass

from pagesplit.typing.enums import ErrorKind


class PackageError(Exception):
    """Root exception for the package."""

    kind: ErrorKind | None = None


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when optional runtime dependencies are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass(frozen=True)
class PageSelectionError(PackageError):
    """Raised when a page-selection string cannot be resolved.

    The `kind` is the symbolic error code callers localize; `token` is the
    offending comma-separated token when one is known.
    """

    kind: ErrorKind
    token: str | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        if self.token is None:
            return self.kind.value
        return f"{self.kind.value}: {self.token!r}"


@dataclass(frozen=True)
class PdfLoadError(PackageError):
    """Raised when source bytes cannot be opened as a PDF document."""

    message: str = "Failed to load PDF"
    exc: BaseException | None = None
    kind: ErrorKind = ErrorKind.PDF_LOAD_FAILURE

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class EmptyPdfError(PackageError):
    """Raised when a loaded PDF has no pages."""

    kind: ErrorKind = ErrorKind.PDF_EMPTY

    def __str__(self) -> str:
        """Return error message payload."""
        return "PDF contains no pages"


@dataclass(frozen=True)
class FileTooLargeError(PackageError):
    """Raised when source bytes exceed the configured size limit."""

    size_bytes: int
    max_bytes: int
    kind: ErrorKind = ErrorKind.FILE_TOO_LARGE

    def __str__(self) -> str:
        """Return error message payload."""
        return f"PDF is {self.size_bytes} bytes, limit is {self.max_bytes} bytes"
