"""Per-page extraction outcome model."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pagesplit.typing.enums import PageStatus


class PageOutcome(BaseModel):
    """Terminal result of extracting one page into its own document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    page_number: int = Field(ge=1)
    status: PageStatus
    final_size: int = Field(default=0, ge=0)
    artifact: bytes | None = Field(default=None, repr=False)

    @model_validator(mode="after")
    def _check_status_payload(self) -> Self:
        """Keep size and artifact consistent with the status.

        Raises:
            ValueError: If an ERROR outcome carries data, or an OK size mismatches its artifact.

        Returns:
            Self: Validated outcome.
        """
        if self.status == PageStatus.ERROR and (self.final_size or self.artifact is not None):
            raise ValueError("ERROR outcomes carry no artifact and a zero size")  # noqa: TRY003
        if self.artifact is not None and len(self.artifact) != self.final_size:
            raise ValueError("final_size must match the artifact length")  # noqa: TRY003
        return self

    @classmethod
    def ok(cls, page_number: int, artifact: bytes) -> PageOutcome:
        """Build a successful outcome from serialized page bytes.

        Args:
            page_number (int): 1-based page number in the source document.
            artifact (bytes): Serialized single-page PDF.

        Returns:
            PageOutcome: OK outcome.
        """
        return cls(page_number=page_number, status=PageStatus.OK, final_size=len(artifact), artifact=artifact)

    @classmethod
    def error(cls, page_number: int) -> PageOutcome:
        """Build a failed outcome.

        Args:
            page_number (int): 1-based page number in the source document.

        Returns:
            PageOutcome: ERROR outcome.
        """
        return cls(page_number=page_number, status=PageStatus.ERROR)

    @property
    def is_ok(self) -> bool:
        """Return whether the page was extracted."""
        return self.status == PageStatus.OK

    def without_artifact(self) -> PageOutcome:
        """Return a copy that keeps the size but drops the artifact bytes."""
        return self.model_copy(update={"artifact": None})
