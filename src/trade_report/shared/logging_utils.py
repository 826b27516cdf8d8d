"""
Structured logging for report runs.

Every entry is one JSON object with timestamp, level, message, the correlation
id of the current report run and the keyword context. The correlation id and
any fields bound with ``run()`` live in context variables, so every module's
logger tags its entries with the same run.
"""
import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_run_fields: ContextVar[dict[str, Any]] = ContextVar("run_fields", default={})


class StructuredLogger:
    """Structured logger with correlation ID support."""

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    @property
    def correlation_id(self) -> Optional[str]:
        return _correlation_id.get()

    def set_correlation_id(self, correlation_id: str):
        """Set correlation ID for the current report run."""
        _correlation_id.set(correlation_id)

    def clear_correlation_id(self):
        """Clear correlation ID and run fields."""
        _correlation_id.set(None)
        _run_fields.set({})

    def generate_correlation_id(self) -> str:
        """Generate new correlation ID."""
        return f"RPT_{uuid.uuid4().hex[:12]}"

    @contextmanager
    def run(self, correlation_id: str | None = None, **fields: Any) -> Iterator[str]:
        """
        Scope one report run.

        Sets a correlation id (generated when not given) and fields merged into
        every entry's context; both are cleared on exit.

        Yields:
            The run's correlation id
        """
        correlation_id = correlation_id or self.generate_correlation_id()
        id_token = _correlation_id.set(correlation_id)
        fields_token = _run_fields.set(dict(fields))
        try:
            yield correlation_id
        finally:
            _run_fields.reset(fields_token)
            _correlation_id.reset(id_token)

    def _format_message(self, level: str, message: str, **kwargs: Any) -> dict:
        """Format log message with structured data."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level,
            "message": message,
            "correlation_id": _correlation_id.get() or "none",
        }

        context = {**_run_fields.get(), **kwargs}
        if context:
            log_entry["context"] = context

        return log_entry

    def _log(self, level: int, message: str, **kwargs: Any):
        if not self.logger.isEnabledFor(level):
            return
        entry = self._format_message(logging.getLevelName(level), message, **kwargs)
        self.logger.log(level, json.dumps(entry, default=str))

    def debug(self, message: str, **kwargs: Any):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any):
        self._log(logging.ERROR, message, **kwargs)


def get_structured_logger(name: str) -> StructuredLogger:
    """Get or create structured logger."""
    return StructuredLogger(name)
