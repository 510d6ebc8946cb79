"""Record store interface and related errors."""

from .errors import RecordNotFoundError, RecordStoreError
from .record_store import FETCH_OK, FetchResult, RecordStore

__all__ = [
    "FETCH_OK",
    "FetchResult",
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
]
