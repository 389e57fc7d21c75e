"""Split request model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from pagesplit.typing.enums import ExtractionMode


class SplitRequest(BaseModel):
    """Split request settings."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_dir: Path | None = None
    pages: str | None = None
    report_path: Path | None = None

    @field_validator("input_path")
    @classmethod
    def _validate_input_path(cls, value: Path) -> Path:
        """Ensure input path exists and points to a file.

        Args:
            value (Path): Input path.

        Raises:
            TypeError: If the input path is not a `pathlib.Path`.
            ValueError: If the path does not exist or is not a file.

        Returns:
            Path: Validated input path.
        """
        if not isinstance(value, Path):
            raise TypeError("input_path must be a pathlib.Path instance")  # noqa: TRY003
        if not value.exists():
            raise ValueError("Input path does not exist")  # noqa: TRY003
        if not value.is_file():
            raise ValueError("Input path is not a file")  # noqa: TRY003
        return value

    @property
    def mode(self) -> ExtractionMode:
        """Return whether all pages or a selection are extracted."""
        return ExtractionMode.SPECIFIC if self.pages else ExtractionMode.ALL
