"""Stdout logging configuration driven by ``LoggingSettings``.

Records carry the bound logging context. When a record is logged with a
structured ``Error`` as its exception, the JSON output embeds the error's
``to_dict()`` form under ``error`` so API-facing fields survive the log line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from packages.errkit_shared.config import ErrkitSettings, LoggingSettings
from packages.errkit_shared.errors import Error

from . import fields
from .context import bind_context, get_context


class ContextFilter(logging.Filter):
    """Attach the bound logging context to each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


def _structured_error(record: logging.LogRecord) -> Error | None:
    if record.exc_info and isinstance(record.exc_info[1], Error):
        return record.exc_info[1]
    return None


class JsonFormatter(logging.Formatter):
    """One JSON object per line: core fields, context, then error payload."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **_record_context(record),
        }
        error = _structured_error(record)
        if error is not None:
            payload[fields.ERROR] = error.to_dict()
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable line with context appended as sorted ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = dict(_record_context(record))
        error = _structured_error(record)
        if error is not None:
            context.setdefault(fields.MESSAGE_ID, error.message_id)
        if not context:
            return line
        pairs = " ".join(f"{key}={context[key]}" for key in sorted(context))
        return f"{line} {pairs}"


def configure_logging(
    settings: LoggingSettings | ErrkitSettings | None = None,
) -> logging.Handler:
    """Install one stdout handler on the root logger and return it.

    Accepts the ``logging`` section or the full settings tree; model defaults
    apply when omitted. Previous root handlers are replaced, so repeated calls
    never duplicate output.
    """
    if isinstance(settings, ErrkitSettings):
        settings = settings.logging
    resolved = settings if settings is not None else LoggingSettings()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(resolved.level)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if resolved.json_output else PlainFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolved.level)
    root.addHandler(handler)

    bind_context(
        **{fields.SERVICE: resolved.service, fields.ENVIRONMENT: resolved.environment}
    )
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
