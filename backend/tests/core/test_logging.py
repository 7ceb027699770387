"""
Tests for reelsmith.core.logging
"""

import json
import logging

import pytest

from reelsmith.core import LogTimer, clear_context, get_logger, set_project_id, set_request_id
from reelsmith.core.logging import DevelopmentFormatter, StructuredFormatter


def make_record(msg="hello", **extra):
    record = logging.LogRecord("reelsmith.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def reset_context():
    yield
    clear_context()


class TestStructuredFormatter:

    def test_basic_fields(self):
        data = json.loads(StructuredFormatter().format(make_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "reelsmith.test"
        assert data["message"] == "hello"

    def test_context_ids_included(self):
        set_request_id("req-1")
        set_project_id("proj-1")
        data = json.loads(StructuredFormatter().format(make_record()))
        assert data["request_id"] == "req-1"
        assert data["project_id"] == "proj-1"

    def test_extra_fields_and_redaction(self):
        record = make_record(segment_count=2, api_key="secret-value")
        data = json.loads(StructuredFormatter().format(record))
        assert data["extra"]["segment_count"] == 2
        assert data["extra"]["api_key"] == "***REDACTED***"


class TestDevelopmentFormatter:

    def test_includes_project_context(self):
        set_project_id("abcdef1234")
        line = DevelopmentFormatter().format(make_record("working"))
        assert "project:abcdef12" in line
        assert "working" in line


class TestLoggerAdapter:

    def test_adapter_adds_context_to_extra(self, caplog):
        set_project_id("proj-9")
        logger = get_logger("reelsmith.test.adapter", component="unit")
        with caplog.at_level(logging.INFO, logger="reelsmith.test.adapter"):
            logger.info("message")
        record = caplog.records[-1]
        assert record.project_id == "proj-9"
        assert record.component == "unit"


class TestLogTimer:

    def test_logs_start_and_completion(self, caplog):
        logger = get_logger("reelsmith.test.timer")
        with caplog.at_level(logging.INFO, logger="reelsmith.test.timer"):
            with LogTimer(logger, "planning") as timer:
                pass
        messages = [r.getMessage() for r in caplog.records]
        assert "Starting: planning" in messages
        assert "Completed: planning" in messages
        assert timer.duration is not None

    def test_logs_failure_and_reraises(self, caplog):
        logger = get_logger("reelsmith.test.timer")
        with caplog.at_level(logging.INFO, logger="reelsmith.test.timer"):
            with pytest.raises(RuntimeError):
                with LogTimer(logger, "planning"):
                    raise RuntimeError("boom")
        failed = [r for r in caplog.records if r.getMessage() == "Failed: planning"]
        assert failed and failed[0].levelno == logging.ERROR
