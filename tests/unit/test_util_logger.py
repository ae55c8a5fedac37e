"""
util_logger tests: JSON formatting, context dimensions, level control.
"""

import json
import logging
import sys

import pytest

from util_logger import (
    ComponentType,
    JSONFormatter,
    LogContext,
    LoggerFactory,
    LogLevel,
    log_exceptions,
)


@pytest.fixture(autouse=True)
def restore_log_level():
    yield
    LoggerFactory.set_level("INFO")


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("service.Test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogLevel:

    def test_from_string_case_insensitive(self):
        assert LogLevel.from_string("warning") is LogLevel.WARNING

    def test_to_python_level(self):
        assert LogLevel.DEBUG.to_python_level() == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(KeyError):
            LogLevel.from_string("LOUD")


class TestLogContext:

    def test_drops_empty_fields(self):
        assert LogContext(run_id="abc").to_dict() == {"run_id": "abc"}

    def test_run_and_input_fields_only(self):
        context = LogContext(run_id="abc", input_path="/in/a.kmz")
        assert context.to_dict() == {"run_id": "abc", "input_path": "/in/a.kmz"}


class TestJSONFormatter:

    def test_basic_fields(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "service.Test"
        assert "timestamp" in payload

    def test_custom_dimensions(self):
        payload = json.loads(JSONFormatter().format(_record(custom_dimensions={"run_id": "r1"})))
        assert payload["customDimensions"] == {"run_id": "r1"}

    def test_exception_block(self):
        try:
            raise ValueError("bad archive")
        except ValueError:
            record = _record(exc_info=sys.exc_info())
        payload = json.loads(JSONFormatter().format(record))
        assert payload["exception"]["type"] == "ValueError"
        assert payload["exception"]["message"] == "bad archive"


class TestLoggerFactory:

    def test_logger_name_and_single_handler(self):
        first = LoggerFactory.create_logger(ComponentType.SERVICE, "HandlerCheck")
        second = LoggerFactory.create_logger(ComponentType.SERVICE, "HandlerCheck")
        assert first is second
        assert first.name == "service.HandlerCheck"
        json_handlers = [h for h in first.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1

    def test_context_in_custom_dimensions(self, caplog):
        logger = LoggerFactory.create_with_context(ComponentType.CONTROLLER, "CtxCheck", run_id="run-42")
        with caplog.at_level(logging.INFO, logger="controller.CtxCheck"):
            logger.info("started", extra={"custom_dimensions": {"total": 3}})

        record = caplog.records[-1]
        assert record.custom_dimensions["run_id"] == "run-42"
        assert record.custom_dimensions["component_type"] == "controller"
        assert record.custom_dimensions["total"] == 3

    def test_caller_location_preserved(self, caplog):
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LocationCheck")
        with caplog.at_level(logging.INFO, logger="service.LocationCheck"):
            logger.info("where")
        assert caplog.records[-1].funcName == "test_caller_location_preserved"

    def test_set_level_updates_existing_loggers(self):
        logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "LevelCheck")
        LoggerFactory.set_level("debug")
        assert logger.level == logging.DEBUG
        assert LoggerFactory.create_logger(ComponentType.ADAPTER, "LevelCheckNew").level == logging.DEBUG


class TestLogExceptions:

    def test_logs_and_reraises(self, caplog):
        @log_exceptions(ComponentType.SERVICE, "DecoratorCheck")
        def explode():
            raise RuntimeError("kaboom")

        with caplog.at_level(logging.ERROR, logger="service.DecoratorCheck"):
            with pytest.raises(RuntimeError):
                explode()

        record = caplog.records[-1]
        assert record.getMessage() == "Exception in explode"
        assert record.custom_dimensions["exception_type"] == "RuntimeError"

    def test_passes_return_value(self):
        @log_exceptions()
        def fine():
            return 7

        assert fine() == 7
