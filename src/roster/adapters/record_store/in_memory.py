"""In-memory implementation of the RecordStore interface."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import asdict, replace

from roster.domain import Student
from roster.interfaces.record_store import (
    FETCH_OK,
    FetchResult,
    RecordNotFoundError,
    RecordStore,
    RecordStoreError,
)


class InMemoryRecordStore(RecordStore):
    """In-memory implementation of the RecordStore interface.

    Accepts ``int`` criteria (primary key) and plain predicates
    (``Callable[[Student], bool]``). Intended for tests and demos only.
    """

    def __init__(self, records: Iterable[Student] = ()) -> None:
        self._records: dict[int, Student] = {}
        for record in records:
            self.put(record)

    def put(self, record: Student) -> None:
        """Insert or replace a record, keyed by its id."""
        self._records[record.id] = replace(record)

    def fetch_first(self, destination: Student, *criteria: object) -> FetchResult:
        try:
            predicates = [self._to_predicate(c) for c in criteria]
        except RecordStoreError as e:
            return FetchResult(error=e)

        for key in sorted(self._records):
            record = self._records[key]
            if all(predicate(record) for predicate in predicates):
                destination.load(asdict(record))
                return FETCH_OK
        return FetchResult(error=RecordNotFoundError(criteria))

    @staticmethod
    def _to_predicate(criterion: object) -> Callable[[Student], bool]:
        if isinstance(criterion, bool):
            raise RecordStoreError(f"unsupported criterion: {criterion!r}")
        if isinstance(criterion, int):
            return lambda record: record.id == criterion
        if callable(criterion):
            return criterion
        raise RecordStoreError(f"unsupported criterion: {criterion!r}")
