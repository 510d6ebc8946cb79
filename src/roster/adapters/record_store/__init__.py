"""Concrete implementations of the RecordStore interface."""

from .in_memory import InMemoryRecordStore
from .sqlalchemy_store import SqlAlchemyRecordStore

__all__ = [
    "InMemoryRecordStore",
    "SqlAlchemyRecordStore",
]
