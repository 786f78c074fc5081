"""Structured logging configuration for the checkroll toolkit."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

# Parent of every module logger in the package, however the package was imported.
PACKAGE_LOGGER = __name__.rsplit(".core.", 1)[0]


class JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Record context passed through ``extra=`` (the job type, day type and
    amount of the row being generated, or the size of a batch) is copied onto
    the line so a failed batch can be traced back to its input.
    """

    context_fields = ("job_type_id", "day_type", "amount", "record_count")

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
        }
        entry.update({key: getattr(record, key) for key in self.context_fields if hasattr(record, key)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure the package logger (the root logger belongs to the caller)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))

    logger.handlers = [handler]
