"""Unit tests for `roster.logging`."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from roster.logging import (
    ConsoleFormatter,
    LogSettings,
    configure_logging,
    console_handler,
    flight_recorder,
    verbosity,
)


def make_record(name: str) -> logging.LogRecord:
    """Build a bare LogRecord for logger `name`."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 9, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_verbosity(verbose, quiet, expected):
    """-v/-q counts move the console level one step each, within bounds."""
    assert verbosity(verbose, quiet) == expected


def test_formatter_tags_library_records():
    """Database library records carry their package name."""
    formatter = ConsoleFormatter()
    assert formatter.format(make_record("sqlalchemy.engine.Engine")) == "[sqlalchemy] msg"
    assert formatter.format(make_record("alembic.runtime.migration")) == "[alembic] msg"


def test_formatter_leaves_roster_records_bare():
    """Project records are printed as-is."""
    assert ConsoleFormatter().format(make_record("roster.bootstrap.bootstrap")) == "msg"


def test_formatter_debug_shows_logger_name():
    """Debug mode names every logger in full."""
    formatter = ConsoleFormatter(debug=True)
    assert formatter.format(make_record("roster.bootstrap")) == "roster.bootstrap: msg"


def test_console_handler_levels():
    """Debug mode forces DEBUG regardless of the requested level."""
    normal = console_handler(LogSettings(console_level=logging.WARNING))
    debug = console_handler(LogSettings(console_level=logging.WARNING, debug=True))
    assert isinstance(normal, RichHandler)
    assert normal.level == logging.WARNING
    assert debug.level == logging.DEBUG


def test_flight_recorder_writes_on_warning(tmp_path):
    """Buffered records reach the file once a WARNING arrives."""
    path = tmp_path / "fr.log"
    handler = flight_recorder(path, capacity=10, flush_on_exit=False)
    assert isinstance(handler, MemoryHandler)
    logger = logging.getLogger("roster.test.flight_recorder")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    try:
        logger.debug("quiet detail")
        assert not path.exists()
        logger.warning("something odd")
    finally:
        logger.removeHandler(handler)
        handler.close()
        handler.target.close()  # type: ignore[union-attr]

    content = path.read_text(encoding="utf-8")
    assert "quiet detail" in content
    assert "something odd" in content


def test_configure_logging_installs_handlers_and_levels(tmp_path):
    """The root logger gets both handlers and per-logger levels are applied."""
    settings = LogSettings(
        recorder_path=tmp_path / "latest.log",
        logger_levels={"roster.test.quiet": logging.ERROR},
    )
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        handlers = configure_logging(settings)
        assert root.handlers == handlers
        assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
        assert logging.getLogger("roster.test.quiet").level == logging.ERROR
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:], level = saved
        root.setLevel(level)
        logging.getLogger("roster.test.quiet").setLevel(logging.NOTSET)


def test_configure_logging_without_recorder():
    """No recorder path means a console handler only."""
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        handlers = configure_logging(LogSettings())
        assert [type(h) for h in handlers] == [RichHandler]
    finally:
        root.handlers[:], level = saved
        root.setLevel(level)
