"""Core domain model exports."""

from pagesplit.typing.models.outcome import PageOutcome
from pagesplit.typing.models.progress import JobStatus, ProgressSnapshot
from pagesplit.typing.models.request import SplitRequest

__all__ = [
    "JobStatus",
    "PageOutcome",
    "ProgressSnapshot",
    "SplitRequest",
]
