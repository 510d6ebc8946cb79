"""Alembic environment for the student database.

The URL comes from the programmatic config built by
``roster.config.build_alembic_config`` and falls back to ``ROSTER_DB_URL``.
Online runs reuse roster's engine settings; ``--sql`` runs render the DDL
for the target dialect without connecting.
"""

from alembic import context

import roster.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from roster.adapters.db.engine import is_sqlite, make_engine
from roster.adapters.db.metadata import metadata
from roster.config import ALEMBIC_URL_KEY, get_db_url

# pylint: disable=no-member

OPTIONS = {"target_metadata": metadata, "compare_type": True}


def database_url() -> str:
    """Configured URL, else ``ROSTER_DB_URL`` (DatabaseUrlNotSetError if unset)."""
    return context.config.get_main_option(ALEMBIC_URL_KEY) or get_db_url()


def run_offline(url: str) -> None:
    """Emit the migration SQL instead of executing it."""
    context.configure(url=url, literal_binds=True, **OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


def run_online(url: str) -> None:
    """Apply migrations over a live connection."""
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection, render_as_batch=is_sqlite(url), **OPTIONS
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_offline(database_url())
else:
    run_online(database_url())
