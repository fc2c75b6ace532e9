"""Unit tests for CLI logging setup."""

import logging

import pytest

from shortcode2html.logging_utils import (
    PACKAGE_LOGGER_NAME,
    build_formatter,
    configure_logging,
    resolve_log_level,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER_NAME)
    root_level, package_level = root.level, package.level
    yield root
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(root_level)
    package.setLevel(package_level)


@pytest.mark.unit
class TestResolveLogLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("loud", logging.INFO)],
    )
    def test_levels(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    def test_plain_formatter(self):
        record = logging.LogRecord("shortcode2html.parsers", logging.WARNING, __file__, 1, "odd tag", None, None)
        assert build_formatter().format(record) == "WARNING: odd tag"

    def test_trace_formatter_names_logger(self):
        record = logging.LogRecord("shortcode2html.parsers", logging.WARNING, __file__, 1, "odd tag", None, None)
        assert "[shortcode2html.parsers] odd tag" in build_formatter(trace_mode=True).format(record)

    def test_replaces_root_handlers(self, restore_logging):
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(restore_logging.handlers) == 1
        assert restore_logging.level == logging.DEBUG
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.DEBUG

    def test_log_file(self, restore_logging, tmp_path):
        log_file = tmp_path / "run.log"
        configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("shortcode2html.test").info("rendered page")
        for handler in restore_logging.handlers:
            handler.flush()
        assert "rendered page" in log_file.read_text(encoding="utf-8")

    def test_unopenable_log_file_is_not_fatal(self, restore_logging, tmp_path):
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))
        assert len(restore_logging.handlers) == 1
