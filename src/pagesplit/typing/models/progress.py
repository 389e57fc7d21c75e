"""Progress notification and job aggregation models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pagesplit.typing.enums import PageStatus, ProcessStage
from pagesplit.typing.models.outcome import PageOutcome


class ProgressSnapshot(BaseModel):
    """Progress notification emitted by the extraction pipeline."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stage: ProcessStage
    overall_progress: float = Field(ge=0.0, le=100.0)
    processed_pages: int = Field(ge=0)
    total_pages: int | None = Field(default=None, ge=0)


class JobStatus(BaseModel):
    """Caller-side view of a split job, folded from snapshots and outcomes."""

    model_config = ConfigDict(extra="forbid")

    stage: ProcessStage = ProcessStage.QUEUED
    overall_progress: float = 0.0
    processed_pages: int = 0
    total_pages: int = 0
    results: list[PageOutcome] = Field(default_factory=list)
    warning: str | None = None

    def apply(self, snapshot: ProgressSnapshot) -> None:
        """Fold a progress snapshot into the job status.

        Snapshots that do not announce a page total keep the previous one.

        Args:
            snapshot (ProgressSnapshot): Latest pipeline notification.
        """
        self.stage = snapshot.stage
        self.overall_progress = snapshot.overall_progress
        self.processed_pages = snapshot.processed_pages
        if snapshot.total_pages is not None:
            self.total_pages = snapshot.total_pages

    def record(self, outcome: PageOutcome) -> None:
        """Store a page outcome, keeping results ordered by page number.

        Args:
            outcome (PageOutcome): Outcome to store.
        """
        self.results.append(outcome)
        self.results.sort(key=lambda result: result.page_number)

    @property
    def ok_count(self) -> int:
        """Return the number of extracted pages."""
        return sum(1 for result in self.results if result.status == PageStatus.OK)

    @property
    def error_count(self) -> int:
        """Return the number of pages that failed."""
        return sum(1 for result in self.results if result.status == PageStatus.ERROR)
