"""Structured Logging: tests for JSONFormatter and setup_logging.

Tests cover:
    - JSON output contains base fields and surfaced extras
    - Exceptions are serialized
    - setup_logging sets the level and never stacks handlers
"""

import json
import sys
import logging

from pattern_gallery.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "pattern_gallery.core.slot", logging.DEBUG, __file__, 1,
        "Bound AscendingSort as Strategy", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "DEBUG"
    assert log["logger"] == "pattern_gallery.core.slot"
    assert log["message"] == "Bound AscendingSort as Strategy"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(capability="Strategy", variant="AscendingSort", other="x"),
    ))
    assert log["capability"] == "Strategy"
    assert log["variant"] == "AscendingSort"
    assert "other" not in log


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info(),
        )
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]


def test_setup_logging_sets_level():
    setup_logging("debug", "json")
    assert logging.root.level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_warning():
    setup_logging("chatty", "text")
    assert logging.root.level == logging.WARNING


def test_setup_logging_is_idempotent():
    before = len(logging.root.handlers)
    setup_logging("info", "text")
    setup_logging("info", "json")
    setup_logging("info", "text")
    assert len(logging.root.handlers) == before + 1
