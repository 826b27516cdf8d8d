"""Logging setup for report runs."""
import logging
import sys
from typing import TextIO

from trade_report.config.models import LoggingConfig

PACKAGE_LOGGER = "trade_report"


class JsonLineHandler(logging.StreamHandler):
    """Writes each (already JSON) log message as one line."""

    def __init__(self, stream: TextIO | None = None):
        super().__init__(stream or sys.stdout)
        self.setFormatter(logging.Formatter("%(message)s"))


def apply_log_level(config: LoggingConfig | str) -> logging.Logger:
    """Set the ``trade_report`` logger to the configured level."""
    if not isinstance(config, LoggingConfig):
        config = LoggingConfig(level=config)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)
    return logger


def configure_structured_logging(
    config: LoggingConfig | str = "INFO", stream: TextIO | None = None
) -> logging.Logger:
    """
    Route ``trade_report`` logs to a JSON-lines handler at the configured level.

    Calling again replaces the previous handler instead of adding another.

    Args:
        config: Logging section of the report config, or a level name
        stream: Output stream (stdout when None)

    Returns:
        The package logger
    """
    logger = apply_log_level(config)
    for handler in list(logger.handlers):
        if isinstance(handler, JsonLineHandler):
            logger.removeHandler(handler)

    logger.addHandler(JsonLineHandler(stream))

    # pandas emits its own plain-text warnings
    logging.getLogger("pandas").setLevel(logging.WARNING)
    return logger
