"""Implementation of RecordStore using SQLAlchemy Core."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import ColumnElement

from roster.adapters.db.schema import student
from roster.interfaces.record_store import (
    FETCH_OK,
    FetchResult,
    RecordNotFoundError,
    RecordStore,
    RecordStoreError,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql import Select

    from roster.domain import Student

logger = logging.getLogger(__name__)


class SqlAlchemyRecordStore(RecordStore):
    """RecordStore over an open SQLAlchemy connection.

    The connection is owned by the caller; this class never opens, commits
    or closes it. A failed query rolls back the transaction it autobegan so
    the connection stays usable for the next fetch. Criteria are either
    ``int`` primary keys or SQLAlchemy boolean expressions over the
    ``student`` table (e.g. ``student.c.city == "Kolkata"``).
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def fetch_first(self, destination: Student, *criteria: object) -> FetchResult:
        try:
            stmt = self._build_select(criteria)
        except RecordStoreError as e:
            return FetchResult(error=e)

        try:
            row = self.connection.execute(stmt).mappings().first()
        except (SQLAlchemyError, OverflowError) as e:
            # the sqlite3 driver raises a bare OverflowError for ints beyond 64 bits
            logger.debug("fetch_first failed for criteria %r", criteria, exc_info=True)
            self._rollback()
            error = RecordStoreError(f"query failed: {e}")
            error.__cause__ = e
            return FetchResult(error=error)

        if row is None:
            return FetchResult(error=RecordNotFoundError(criteria))

        destination.load(row)
        return FETCH_OK

    def _rollback(self) -> None:
        if not self.connection.in_transaction():
            return
        try:
            self.connection.rollback()
        except SQLAlchemyError:
            # a dead connection cannot roll back; the query error is reported
            logger.debug("rollback after failed fetch also failed", exc_info=True)

    @staticmethod
    def _build_select(criteria: tuple[object, ...]) -> Select:
        stmt = select(student)
        for criterion in criteria:
            if isinstance(criterion, bool):
                raise RecordStoreError(f"unsupported criterion: {criterion!r}")
            if isinstance(criterion, int):
                stmt = stmt.where(student.c.id == criterion)
            elif isinstance(criterion, ColumnElement):
                stmt = stmt.where(criterion)
            else:
                raise RecordStoreError(f"unsupported criterion: {criterion!r}")
        # first match by primary key, as with an ORM "first()"
        return stmt.order_by(student.c.id).limit(1)
