"""Tests for logging setup and the structured formatter."""

import logging
import sys

import pytest

from linecalc_pkg import logging_config
from linecalc_pkg.evaluator import calculate
from linecalc_pkg.logging_config import StructuredFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("linecalc")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "linecalc.engine", logging.DEBUG, __file__, 1, msg, (), None
    )
    record.__dict__.update(extra)
    return record


class TestStructuredFormatter:
    def test_plain_message(self):
        text = StructuredFormatter().format(_record())
        assert text.endswith("[DEBUG] linecalc.engine: hello")

    def test_extra_fields_appended(self):
        text = StructuredFormatter().format(_record(line="y == 3", code="X"))
        assert text.endswith("hello code='X' line='y == 3'")

    def test_exception_traceback(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        text = StructuredFormatter().format(record)
        assert "Traceback" in text
        assert "ValueError: boom" in text


class TestSetupLogging:
    def test_default_level_from_environment(self, monkeypatch):
        monkeypatch.setattr(logging_config, "LOG_LEVEL", "DEBUG")
        assert setup_logging().level == logging.DEBUG

    def test_explicit_level(self):
        assert setup_logging("error").level == logging.ERROR

    def test_unknown_level_falls_back(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_repeated_setup_does_not_duplicate(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "linecalc.log"
        setup_logging("DEBUG", log_file=str(path))
        calculate("房租 = foo")
        for handler in logging.getLogger("linecalc").handlers:
            handler.flush()
        content = path.read_text(encoding="utf-8")
        assert "linecalc.evaluator: Line failed" in content
        assert "code='UNDEFINED_SYMBOL'" in content


class TestGetLogger:
    def test_child_of_package_logger(self):
        assert get_logger("engine").name == "linecalc.engine"
        assert get_logger("engine").parent is logging.getLogger("linecalc")

