"""Open a connection to the student database and expose it as a RecordStore."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy.exc import ArgumentError, OperationalError

from roster.adapters.db.engine import make_engine
from roster.adapters.record_store import SqlAlchemyRecordStore

if TYPE_CHECKING:
    from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)


class BackendUnavailableError(Exception):
    """Raised when the initial database connection cannot be established."""


@contextmanager
def open_record_store(url: str | URL) -> Iterator[SqlAlchemyRecordStore]:
    """Connect to the database and yield a record store bound to that connection.

    The connection is opened eagerly so that an unreachable backend fails
    here rather than on the first lookup. It is closed, and the engine
    disposed, when the context exits.

    Args:
        url: SQLAlchemy database URL.

    Yields:
        SqlAlchemyRecordStore: A store reading through the open connection.

    Raises:
        BackendUnavailableError: If the URL is invalid or the database is
            unreachable.
    """
    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise BackendUnavailableError(f"invalid database URL: {e}") from e

    try:
        try:
            connection = engine.connect()
        except OperationalError as e:
            raise BackendUnavailableError(f"cannot connect to database: {e}") from e
        logger.info("Connected to %s database", engine.dialect.name)
        try:
            yield SqlAlchemyRecordStore(connection)
        finally:
            connection.close()
    finally:
        engine.dispose()
