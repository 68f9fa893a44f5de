"""Logging utilities for spox.

Loggers are standalone structlog loggers that render JSON lines or plain text
to a file or stderr. Nothing here touches the global structlog configuration,
so applications embedding spox keep their own setup.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Final, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

    from spox.config import LoggingConfig

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR: Final = "SPOX_DEBUG"
LOG_LEVEL_ENV_VAR: Final = "SPOX_LOG_LEVEL"


def _level_number(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _get_log_level() -> int:
    """Resolve the threshold from the environment.

    ``SPOX_DEBUG`` wins when set to anything non-empty; otherwise
    ``SPOX_LOG_LEVEL`` is used, and unknown or missing names mean INFO.
    """
    if getenv(DEBUG_ENV_VAR):
        return logging.DEBUG
    return _level_number(getenv(LOG_LEVEL_ENV_VAR, "info"))


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Map a level name such as ``"warning"`` to its number.

    With ``respect_env``, a set ``SPOX_DEBUG`` forces DEBUG regardless of
    ``level``.
    """
    if respect_env and getenv(DEBUG_ENV_VAR):
        return logging.DEBUG
    return _level_number(level)


def _open_target(log_file_path: str) -> TextIO:
    if not log_file_path:
        return sys.stderr
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("a", encoding="utf-8")


def _processors(log_format: LogFormatType) -> list["Processor"]:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _create_logger(
    log_file_path: str,
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Build a standalone logger writing to ``log_file_path``.

    Args:
        log_file_path: File to append records to, created with its parent
            directories when missing. Empty means stderr.
        log_level: Threshold; resolved from the environment when omitted.
        log_format: ``"json"`` for one JSON object per line, ``"text"`` for
            console-style ``key=value`` output.
    """
    threshold = log_level if log_level is not None else _get_log_level()
    logger = structlog.wrap_logger(
        structlog.WriteLogger(_open_target(log_file_path)),
        processors=_processors(log_format),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
    )
    return cast("FilteringBoundLogger", logger)


def create_logger(
    level: str | None = None,
    *,
    log_format: LogFormatType = "json",
    log_file: str = "",
    component: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger for parsing, merging and search diagnostics.

    Level precedence, highest first: ``SPOX_DEBUG``, the ``level`` argument,
    ``SPOX_LOG_LEVEL``, then INFO.

    Args:
        level: Level name (debug, info, warning, error).
        log_format: ``"json"`` or ``"text"``.
        log_file: File to append to; empty writes to stderr.
        component: When given, bound to every record as ``component``.

    Returns:
        A FilteringBoundLogger instance.
    """
    threshold = None if level is None else _log_level_from_string(level, respect_env=True)
    logger = _create_logger(log_file, log_level=threshold, log_format=log_format)
    return logger.bind(component=component) if component else logger


def create_logger_from_config(
    config: "LoggingConfig",  # noqa: UP037
    *,
    component: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger from a ``logging`` configuration section."""
    return create_logger(
        config.level.value,
        log_format=cast("LogFormatType", config.format.value),
        log_file=config.file,
        component=component,
    )
