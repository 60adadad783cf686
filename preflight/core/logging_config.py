"""Centralized structured logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from preflight.core.config import Config
from preflight.core.exceptions import ConfigurationError

_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; anything passed via ``extra=`` is kept."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name, value in vars(record).items():
            if name not in _RESERVED_ATTRS and not name.startswith("_"):
                payload[name] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(config: Config) -> None:
    """Configure process-wide logging once.

    Records go to stderr so the human-readable report on stdout stays clean.
    Raises ConfigurationError, leaving the root logger untouched, when
    LOG_FILE cannot be opened.
    """
    root = logging.getLogger()
    if any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers):
        return

    formatter = JsonFormatter()
    handlers: list[logging.Handler] = []

    if config.LOG_FILE:
        try:
            file_handler = logging.FileHandler(config.LOG_FILE)
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot open LOG_FILE {config.LOG_FILE}: {exc.strerror or exc}",
                "Point LOG_FILE at a writable location or remove it.",
            ) from exc
        handlers.append(file_handler)

    handlers.insert(0, logging.StreamHandler(sys.stderr))

    root.setLevel(getattr(logging, config.LOG_LEVEL, logging.ERROR))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Connection chatter from the drivers is not useful in a one-shot check.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
