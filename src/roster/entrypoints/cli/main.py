"""ROSTER CLI entry point.

Defines the top-level ``roster`` command (via Click-Extra), sets up logging
for every subcommand, and registers:

- ``roster lookup`` - print one student's name.
- ``roster db upgrade`` - create or migrate the ``student`` table.

Examples
    $ roster --version
    $ roster db upgrade --force
    $ roster lookup 101
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from roster import __version__
from roster.logging import LogSettings, configure_logging, log_startup, verbosity

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .lookup import lookup as lookup_command

logger = logging.getLogger(__name__)


HELP = """ROSTER command-line interface.

    Looks up student records stored in a SQL database (PostgreSQL in
    production, SQLite for local experiments). The database URL is read
    from ROSTER_DB_URL.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (file paths and timestamps in console logs).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.",
    default=Path(user_log_dir("roster", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ROSTER_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="ROSTER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING/ERROR occurs, or on exit if "
        "--force-flush is set. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="ROSTER_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO) or "
        "via ROSTER_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def roster(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROSTER command-line interface."""
    settings = LogSettings(
        console_level=verbosity(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        recorder_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_exit=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(logger, settings)

    ctx.call_on_close(logging.shutdown)


roster.add_command(lookup_command)
roster.add_command(db_group)
