"""``roster lookup``: print one student's name.

Connects using ``ROSTER_DB_URL``, looks up a single student id and prints
the result on stdout. A failed lookup is reported on stdout and still exits
0; only a failure to connect aborts the command. Backend failures other
than a missing record are also logged as warnings, which writes the flight
recorder to disk.
"""

from __future__ import annotations

import logging

import click

from roster import config
from roster.bootstrap import BackendUnavailableError, open_record_store
from roster.interfaces.record_store import RecordNotFoundError, RecordStoreError
from roster.service_layer import get_name_by_id

from .db import MISSING_DB_URL_MSG
from .helpers import success

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "student_id",
    type=int,
    default=config.DEFAULT_STUDENT_ID,
    required=False,
)
def lookup(student_id: int) -> None:
    """Print the name of the student with STUDENT_ID (default 101).

    A negative STUDENT_ID looks like an option, so pass it after "--":

    \b
        roster lookup -- -5
    """
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e

    try:
        with open_record_store(url) as store:
            success("Connected to database!")
            try:
                name = get_name_by_id(store, student_id)
            except RecordNotFoundError as e:
                logger.info("No student with id %s", student_id)
                click.echo(f"Failed to get student name for ID {student_id}: {e}")
            except RecordStoreError as e:
                # flushes the flight recorder, query trace included
                logger.warning("Lookup of student %s failed: %s", student_id, e)
                click.echo(f"Failed to get student name for ID {student_id}: {e}")
            else:
                click.echo(f"Student name for ID {student_id}: {name}")
    except BackendUnavailableError as e:
        raise click.ClickException(f"Failed to connect to the database: {e}") from e
