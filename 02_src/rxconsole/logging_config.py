"""JSON log lines for the RX console, to stdout and 04_logs/rx_console.log."""

import json
import logging
import logging.config
import logging.handlers
import os
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_LOG_PATH

# httpx logs each request at INFO, i.e. two lines per poll
QUIET_LOGGERS = ("httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # scheduler and export attach extra={"context": {...}}
        context = getattr(record, "context", None)
        if context is not None:
            entry["context"] = context
        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(log_level: str | None = None, log_file: str | None = None) -> None:
    """Route every logger through JSONFormatter.

    LOG_LEVEL and LOG_FILE fill in whichever argument is omitted.
    """
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    path = Path(log_file or os.getenv("LOG_FILE") or DEFAULT_LOG_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JSONFormatter}},
            "handlers": {
                "file": {
                    "class": "logging.handlers.RotatingFileHandler",
                    "filename": str(path),
                    "maxBytes": 5 * 1024 * 1024,
                    "backupCount": 3,
                    "formatter": "json",
                    "encoding": "utf-8",
                },
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
            "root": {"level": level, "handlers": ["file", "console"]},
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
