"""Structured logging configuration for the holiday planner."""
import logging
import json
import sys
from datetime import datetime, timezone

# Fields callers attach through `extra=` that belong in the JSON record
PLANNER_FIELDS = ("country", "year", "source", "user_type")

TEXT_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

NOISY_LOGGERS = ("uvicorn.access", "httpcore", "httpx", "openai")


class PlannerJSONFormatter(logging.Formatter):
    """One JSON object per line, with holiday lookup context when present."""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update({
            field: getattr(record, field)
            for field in PLANNER_FIELDS
            if getattr(record, field, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", json_output: bool = True):
    """Route every planner logger to stdout, as JSON unless LOG_FORMAT=text."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(PlannerJSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    root.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
