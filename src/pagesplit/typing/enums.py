"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class ProcessStage(_EnumMixin):
    """Stage of a split job, as reported by progress snapshots."""

    QUEUED = "queued"
    ANALYZING = "analyzing"
    SPLITTING = "splitting"
    DONE = "done"


class PageStatus(_EnumMixin):
    """Status of a single extracted page."""

    PROCESSING = "processing"
    OK = "ok"
    ERROR = "error"


class ExtractionMode(_EnumMixin):
    """Whether every page or a user selection is extracted."""

    ALL = "all"
    SPECIFIC = "specific"


class ErrorKind(_EnumMixin):
    """Symbolic request-level error codes surfaced to callers."""

    EMPTY_SELECTION = "empty_selection"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_RANGE_FORMAT = "invalid_range_format"
    INVALID_RANGE_ORDER = "invalid_range_order"
    INVALID_NUMBER = "invalid_number"
    OUT_OF_BOUNDS = "out_of_bounds"
    PDF_LOAD_FAILURE = "pdf_load_failure"
    PDF_EMPTY = "pdf_empty"
    FILE_TOO_LARGE = "file_too_large"
