"""Unit tests for logging configuration."""

import io
import logging

import pytest

from clashview import Stylesheet, configure_logging, format_markup
from clashview.constants import LEGACY_MONOSPACE_WARNING

pytestmark = pytest.mark.unit


@pytest.fixture
def restore_loggers():
    package = logging.getLogger("clashview")
    root = logging.getLogger()
    saved = (package.handlers[:], package.level, package.propagate, root.handlers[:], root.level)
    yield package
    for handler in package.handlers:
        if handler not in saved[0]:
            handler.close()
    package.handlers[:] = saved[0]
    package.setLevel(saved[1])
    package.propagate = saved[2]
    root.handlers[:] = saved[3]
    root.setLevel(saved[4])


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_package_logger(self, restore_loggers):
        """Test the clashview logger is returned and stops propagating."""
        logger = configure_logging("debug")
        assert logger.name == "clashview"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_unknown_level_defaults_to_info(self, restore_loggers):
        """Test unknown names fall back to INFO."""
        assert configure_logging("chatty").level == logging.INFO

    def test_root_logger_untouched(self, restore_loggers):
        """Test the application's root handlers and level are left alone."""
        root = logging.getLogger()
        sentinel = logging.NullHandler()
        root.addHandler(sentinel)
        root_level = root.level
        configure_logging(logging.DEBUG)
        assert sentinel in root.handlers
        assert root.level == root_level

    def test_repeated_calls_replace_own_handlers(self, restore_loggers):
        """Test reconfiguring does not stack handlers and keeps foreign ones."""
        foreign = logging.NullHandler()
        restore_loggers.addHandler(foreign)
        configure_logging(logging.INFO)
        logger = configure_logging(logging.INFO)
        assert foreign in logger.handlers
        assert len(logger.handlers) == 2

    def test_legacy_monospace_warning_reaches_stream(self, restore_loggers):
        """Test the obsolete-syntax warning is written to the installed stream."""
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)
        format_markup("see ```x = 1``` here", Stylesheet.plain())
        assert stream.getvalue() == f"WARNING: {LEGACY_MONOSPACE_WARNING}\n"

    def test_level_filters_warning(self, restore_loggers):
        """Test records below the configured level are dropped."""
        stream = io.StringIO()
        configure_logging(logging.ERROR, stream=stream)
        format_markup("```x```", Stylesheet.plain())
        assert stream.getvalue() == ""

    def test_log_file(self, restore_loggers, tmp_path):
        """Test a file handler is added and receives the legacy warning."""
        log_file = tmp_path / "clashview.log"
        logger = configure_logging(logging.WARNING, log_file=str(log_file), stream=io.StringIO())
        format_markup("```x```", Stylesheet.plain())
        for handler in logger.handlers:
            handler.flush()
        assert len(logger.handlers) == 2
        assert LEGACY_MONOSPACE_WARNING in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, restore_loggers, tmp_path):
        """Test a log file that cannot be opened is reported on the stream."""
        stream = io.StringIO()
        logger = configure_logging(logging.WARNING, log_file=str(tmp_path / "missing" / "x.log"), stream=stream)
        assert len(logger.handlers) == 1
        assert "Could not create log file" in stream.getvalue()

    def test_trace_mode_format(self, restore_loggers):
        """Test trace mode includes logger names."""
        stream = io.StringIO()
        configure_logging(logging.WARNING, trace_mode=True, stream=stream)
        format_markup("```x```", Stylesheet.plain())
        assert "[clashview.markup.formatter]" in stream.getvalue()
