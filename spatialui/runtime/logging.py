"""Logging setup for spatialui hosts.

Session code attaches ``category``, ``preset``, ``revision`` and ``style_id``
through ``extra=``. Both formatters surface those fields so a session can be
followed across startup, style injection and rebuilds.
"""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from spatialui.diagnostics.json_codec import dumps_text
from spatialui.runtime.config import LogConfig, get_config

SESSION_FIELDS: tuple[str, ...] = ("category", "preset", "revision", "style_id")

_QUEUE_LISTENER: QueueListener | None = None

_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json

    @classmethod
    def from_section(cls, section: LogConfig) -> LoggingConfig:
        return cls(
            level_name=section.level_name,
            console_format=section.console_format,
            file_path=section.file_path,
        )


def session_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the session context attached to ``record``, in display order."""
    return {name: getattr(record, name) for name in SESSION_FIELDS if hasattr(record, name)}


class SessionTextFormatter(logging.Formatter):
    """Plain-text lines with session context appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = session_fields(record)
        if not context:
            return line
        rendered = " ".join(f"{name}={value}" for name, value in context.items())
        return f"{line} [{rendered}]"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; session context sits at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(session_fields(record))
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and key not in SESSION_FIELDS
        }
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers; file output is written from a background listener."""
    global _QUEUE_LISTENER

    shutdown_logging()
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_logging(section: LogConfig | None = None) -> bool:
    """Configure logging from config unless the host already did.

    Returns True when handlers were installed.
    """
    if logging.getLogger().handlers:
        return False
    configure_logging(LoggingConfig.from_section(section if section is not None else get_config().logging))
    return True


def shutdown_logging() -> None:
    """Stop the background file listener, flushing queued records."""
    global _QUEUE_LISTENER
    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    _QUEUE_LISTENER = None


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return SessionTextFormatter()


__all__ = [
    "SESSION_FIELDS",
    "JsonFormatter",
    "LoggingConfig",
    "SessionTextFormatter",
    "configure_logging",
    "session_fields",
    "setup_logging",
    "shutdown_logging",
]
