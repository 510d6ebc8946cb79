"""Engine factory for the student database.

roster opens one connection per command, so what matters is failing fast
when the backend is gone and not blocking behind a writer:

- **PostgreSQL**: libpq ``connect_timeout`` and an ``application_name`` so
  sessions are recognisable in ``pg_stat_activity``.
- **SQLite**: a busy timeout of the same length, and WAL journaling so a
  lookup can read while ``roster db upgrade`` writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

CONNECT_TIMEOUT = 5  # seconds
APPLICATION_NAME = "roster"


def backend_name(url: str | URL) -> str:
    """Backend part of a URL, without the driver (``"postgresql"``, ``"sqlite"``)."""
    return make_url(str(url)).get_backend_name()


def is_sqlite(url: str | URL) -> bool:
    """Return True if the URL points at SQLite, whatever the driver."""
    return backend_name(url) == "sqlite"


def connect_args(backend: str) -> dict[str, Any]:
    """DBAPI ``connect()`` keyword arguments for a backend."""
    if backend == "postgresql":
        return {"connect_timeout": CONNECT_TIMEOUT, "application_name": APPLICATION_NAME}
    if backend == "sqlite":
        return {"timeout": CONNECT_TIMEOUT}
    return {}


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for ``url`` with the per-backend settings above.

    Raises:
        sqlalchemy.exc.ArgumentError: If ``url`` cannot be parsed.
    """
    backend = backend_name(url)
    engine = create_engine(url, echo=echo, connect_args=connect_args(backend))
    if backend == "sqlite":
        event.listen(engine, "connect", _use_wal)
    return engine


def _use_wal(dbapi_conn: SQLiteConnection, _conn_record: object) -> None:
    # in-memory databases answer "memory" and keep their journal
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()
