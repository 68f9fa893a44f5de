# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

Frozen Pydantic models for the sections spox reads: logging, validation
thresholds and search defaults. Unknown keys are ignored so that a shared
project configuration can carry sections for other tools.
"""

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spox.config._loader import deep_merge, parse_env_vars
from spox.exceptions import ConfigValidationError


class LogLevel(StrEnum):
    """Log level threshold values, from most to least verbose."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class ValidationConfiguration(BaseModel):
    """Thresholds used by the validator."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    min_purpose_length: int = Field(
        default=50, ge=0, description="Purpose shorter than this draws a warning."
    )
    min_why_length: int = Field(
        default=50, ge=0, description="Proposal Why shorter than this draws a warning."
    )
    min_modified_description_length: int = Field(
        default=20,
        ge=0,
        description="MODIFIED entries with a shorter description look incomplete.",
    )
    strict: bool = Field(
        default=False, description="Treat warnings as failures in reports."
    )


class SearchConfiguration(BaseModel):
    """Defaults for indexing and querying."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    top_k: int = Field(default=10, ge=0, description="Maximum results returned.")
    min_score: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Results scoring below this are dropped."
    )
    snippet_length: int = Field(
        default=100, ge=4, description="Maximum snippet length, ellipsis included."
    )
    embedding_dimension: int = Field(
        default=384, gt=0, description="Vector size of the hashing embedding provider."
    )


class Config(BaseModel):
    """Root configuration container."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    validation: ValidationConfiguration = Field(default_factory=ValidationConfiguration)
    search: SearchConfiguration = Field(default_factory=SearchConfiguration)

    @classmethod
    def from_mapping(
        cls,
        data: dict[str, Any] | None = None,
        *,
        include_env: bool = True,
        environ: dict[str, str] | None = None,
    ) -> "Config":  # noqa: UP037
        """Build a configuration from a plain mapping.

        Args:
            data: Configuration values, typically parsed from a file by the
                caller. Missing sections and keys take their defaults.
            include_env: Whether ``SPOX_SECTION__KEY`` environment variables
                override values from ``data``.
            environ: Environment to read instead of ``os.environ``.

        Returns:
            The validated configuration.

        Raises:
            ConfigValidationError: If a value fails validation. The first
                failing key is reported.
        """
        merged = dict(data or {})
        if include_env:
            merged = deep_merge(merged, parse_env_vars(environ=environ))

        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error.get("loc", ()))
            ctx = error.get("ctx") or {}
            expected = str(ctx.get("expected", error.get("msg", "valid value")))
            msg = f"Invalid configuration value for '{key}'"
            raise ConfigValidationError(
                msg, key=key, value=error.get("input"), expected=expected
            ) from e
