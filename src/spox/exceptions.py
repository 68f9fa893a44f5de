"""spox exceptions."""

from pathlib import Path  # noqa: TC003
from typing import Any

from spox.enums import ConflictKind, DeltaOperation  # noqa: TC001


class SpoxError(Exception):
    """Base exception for spox errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(SpoxError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected


# =============================================================================
# Specification Exceptions
# =============================================================================


class SpecError(SpoxError):
    """Base exception for specification system errors."""


class SpecParseError(SpecError):
    """Raised when document content cannot be decoded for parsing.

    The grammar itself is permissive, so this is reserved for input that
    cannot be turned into text at all.

    Attributes:
        path: Path of the document, when the caller supplied one.
        content_type: The kind of document that failed ("spec", "delta", ...).
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        content_type: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and parse context.

        Args:
            message: Human-readable error message.
            path: Path of the document, when known.
            content_type: The kind of document that failed to parse.
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.path: str | Path | None = path
        self.content_type: str = content_type
        self.cause: Exception | None = cause


class MergeError(SpecError):
    """Base exception for archive merge failures."""


class MergeConflictError(MergeError, ValueError):
    """Raised when a delta cannot be applied to its base specification.

    Attributes:
        kind: The merge rule that was violated.
        requirement_name: The requirement the offending delta entry named.
        operation: The delta operation being applied.
        spec_id: The capability the delta targets.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ConflictKind,
        requirement_name: str,
        operation: DeltaOperation,
        spec_id: str,
    ) -> None:
        """Initialize with error message and conflict context.

        Args:
            message: Human-readable error message.
            kind: The merge rule that was violated.
            requirement_name: The requirement the offending delta entry named.
            operation: The delta operation being applied.
            spec_id: The capability the delta targets.
        """
        super().__init__(message)
        self.kind: ConflictKind = kind
        self.requirement_name: str = requirement_name
        self.operation: DeltaOperation = operation
        self.spec_id: str = spec_id


# =============================================================================
# Search Index Exceptions
# =============================================================================


class SearchIndexError(SpoxError):
    """Base exception for search index errors."""


class IndexUnavailableError(SearchIndexError):
    """Raised when no usable index has been built or loaded.

    Attributes:
        path: Path of the index blob, when one was expected on disk.
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and index location."""
        super().__init__(message)
        self.path: Path | None = path
        self.cause: Exception | None = cause


class StaleIndexError(SearchIndexError):
    """Raised when an index was built with a different embedding model.

    Attributes:
        index_model: Model name stored in the index.
        expected_model: Model name the caller is querying with.
    """

    def __init__(self, message: str, *, index_model: str, expected_model: str) -> None:
        """Initialize with error message and both model names."""
        super().__init__(message)
        self.index_model: str = index_model
        self.expected_model: str = expected_model


class EmbeddingError(SearchIndexError):
    """Raised when the embedding provider fails.

    The provider's own message is kept verbatim as this error's message.

    Attributes:
        text: The text that was being embedded.
        cause: The exception raised by the provider.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with the provider message and the offending text."""
        super().__init__(message)
        self.text: str = text
        self.cause: Exception | None = cause
