"""Utility functions for spox."""

from spox.utils._logging import LogFormatType, create_logger, create_logger_from_config

__all__ = ["LogFormatType", "create_logger", "create_logger_from_config"]
