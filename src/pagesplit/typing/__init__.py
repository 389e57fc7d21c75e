"""Typing-centric domain modules."""

from pagesplit.typing.enums import ErrorKind, ExtractionMode, PageStatus, ProcessStage
from pagesplit.typing.models import JobStatus, PageOutcome, ProgressSnapshot, SplitRequest
from pagesplit.typing.protocol import PdfEngine

__all__ = [
    "ErrorKind",
    "ExtractionMode",
    "JobStatus",
    "PageOutcome",
    "PageStatus",
    "PdfEngine",
    "ProcessStage",
    "ProgressSnapshot",
    "SplitRequest",
]
