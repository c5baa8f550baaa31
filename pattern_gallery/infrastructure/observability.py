"""Structured Logging: JSON formatter and setup for gallery diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (pattern, capability, variant, error_code, error envelope) surfaced when present
    - Logs go to stderr; stdout carries demo narration only
    - setup_logging installs at most one gallery handler, however often it is called
"""

import logging
import json
import sys
from datetime import datetime, timezone

EXTRA_FIELDS = ("pattern", "capability", "variant", "error_code", "error")


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _GalleryHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces rather than stacks handlers."""


def setup_logging(level: str = "WARNING", fmt: str = "text") -> None:
    """Configure root logging for a demo run."""
    handler = _GalleryHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _GalleryHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
