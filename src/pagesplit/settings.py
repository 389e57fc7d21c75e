"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagesplit.exceptions import SettingsError

logger = logging.getLogger(__name__)

_BYTES_PER_MB = 1024 * 1024


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = "pagesplit"
    app_env: str = Field(
        default="dev",
        validation_alias="APP_ENV",
        description="Application environment, e.g. 'dev', 'prod'.",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="File path for log output.",
    )

    output_dir: str = Field(
        default="results/pages",
        validation_alias="OUTPUT_DIR",
        description="Directory receiving one PDF per extracted page.",
    )
    max_file_size_mb: int = Field(
        default=500,
        ge=1,
        validation_alias="MAX_FILE_SIZE_MB",
        description="Source PDFs above this size are rejected.",
    )
    large_file_warning_mb: int = Field(
        default=100,
        ge=1,
        validation_alias="LARGE_FILE_WARNING_MB",
        description="Source PDFs above this size are processed with a warning.",
    )
    ignore_encryption: bool = Field(
        default=True,
        validation_alias="IGNORE_ENCRYPTION",
        description="Open encrypted PDFs with an empty user password instead of failing.",
    )

    @model_validator(mode="after")
    def _validate_size_thresholds(self) -> Settings:
        """Ensure the warning threshold does not exceed the hard limit.

        Raises:
            ValueError: If the warning threshold is above the hard limit.

        Returns:
            Settings: Validated settings.
        """
        if self.large_file_warning_mb > self.max_file_size_mb:
            raise ValueError("LARGE_FILE_WARNING_MB must not exceed MAX_FILE_SIZE_MB")  # noqa: TRY003
        return self

    @property
    def max_file_size_bytes(self) -> int:
        """Return the hard size limit in bytes."""
        return self.max_file_size_mb * _BYTES_PER_MB

    @property
    def large_file_warning_bytes(self) -> int:
        """Return the warning size threshold in bytes."""
        return self.large_file_warning_mb * _BYTES_PER_MB


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except Exception as exc:
        if _is_missing_settings_error(exc):
            ensure_env_file_exists()
            try:
                return Settings()
            except Exception as retry_exc:
                raise SettingsError(exc=retry_exc) from retry_exc
        raise SettingsError(exc=exc) from exc


def ensure_env_file_exists(
    *,
    env_path: Path = Path(".env"),
    template_path: Path = Path(".env.template"),
) -> None:
    """Create `.env` from template when missing.

    Args:
        env_path (Path): Target environment file path.
        template_path (Path): Template file path.
    """
    if env_path.exists() or not template_path.exists():
        return
    env_path.write_text(template_path.read_text(encoding="utf-8"), encoding="utf-8")
    logger.info(
        "Created environment file from template",
        extra={"env_path": str(env_path), "template_path": str(template_path)},
    )


def _is_missing_settings_error(exc: Exception) -> bool:
    """Return whether the settings failure is due to missing values.

    Args:
        exc (Exception): Caught settings initialization error.

    Returns:
        bool: True when the error represents missing settings values.
    """
    if not isinstance(exc, ValidationError):
        return False
    return any(error.get("type") == "missing" for error in exc.errors())
