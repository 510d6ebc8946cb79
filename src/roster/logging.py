"""Logging setup for the roster CLI.

All records go through the root logger. The console gets a Rich handler on
stderr at the verbosity picked with ``-v``/``-q``. The flight recorder keeps
the most recent records at DEBUG granularity in memory and writes them out
when something at WARNING or above is logged, so a lookup that fails on a
broken backend leaves its query trace in the log file.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

from roster import __version__
from roster.config import DB_URL_ENVVAR

if TYPE_CHECKING:
    from logging import Handler, Logger

PROJECT_LOGGER = "roster"

RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


@dataclass(frozen=True)
class LogSettings:
    """Logging options resolved from one CLI invocation.

    ``recorder_path`` of ``None`` turns the flight recorder off.
    """

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    recorder_path: Path | None = None
    recorder_capacity: int = 2000
    flush_on_exit: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)


def verbosity(verbose: int, quiet: int) -> int:
    """Console level for the given ``-v``/``-q`` counts, starting from WARNING."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ConsoleFormatter(logging.Formatter):
    """Tag records from database libraries with their package name.

    ``sqlalchemy.engine.Engine`` records show up as ``[sqlalchemy] ...``;
    roster's own records are left bare. In debug mode every record carries
    its full logger name instead.
    """

    def __init__(self, debug: bool = False):
        super().__init__("%(message)s")
        self.debug = debug

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if self.debug:
            return f"{record.name}: {message}"
        package = record.name.partition(".")[0]
        if package == PROJECT_LOGGER:
            return message
        return f"[{package}] {message}"


def console_handler(settings: LogSettings) -> RichHandler:
    """Rich handler on stderr; debug mode lowers it to DEBUG and shows paths."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=settings.debug,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    handler.setFormatter(ConsoleFormatter(debug=settings.debug))
    return handler


def flight_recorder(path: Path, capacity: int, flush_on_exit: bool) -> MemoryHandler:
    """Buffer up to ``capacity`` records and write them to ``path`` on WARNING.

    The file is opened lazily and truncated on first write, so it always holds
    the last run that had something to report.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_exit,
    )


def configure_logging(settings: LogSettings) -> list[Handler]:
    """Install the console handler and flight recorder on the root logger.

    The root logger passes everything at DEBUG; each handler applies its own
    floor, and ``settings.logger_levels`` raises or lowers single loggers.
    Returns the installed handlers.
    """
    handlers: list[Handler] = [console_handler(settings)]
    if settings.recorder_path is not None:
        handlers.append(
            flight_recorder(
                settings.recorder_path,
                settings.recorder_capacity,
                settings.flush_on_exit,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)

    return handlers


def log_startup(logger: Logger, settings: LogSettings) -> None:
    """One INFO line for the console, environment details at DEBUG."""
    logger.info(
        "roster %s: console=%s, flight recorder=%s",
        __version__,
        logging.getLevelName(settings.console_level),
        settings.recorder_path or "off",
    )
    logger.debug(
        "Python %s on %s (pid %s)",
        sys.version.split()[0],
        platform.platform(),
        os.getpid(),
    )
    logger.debug(
        "SQLAlchemy %s, Alembic %s", sqlalchemy.__version__, alembic.__version__
    )
    logger.debug(
        "%s is %s", DB_URL_ENVVAR, "set" if os.environ.get(DB_URL_ENVVAR) else "unset"
    )
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()},
    )
