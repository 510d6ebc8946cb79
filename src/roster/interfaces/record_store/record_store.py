"""Interface for fetching a single student record.

The lookup service never touches a database connection directly; it asks a
`RecordStore` to fill in a `Student` it owns. Production code backs this with
SQLAlchemy, tests back it with an in-memory store or a mock.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import RecordStoreError

if TYPE_CHECKING:
    from roster.domain import Student

# pylint: disable=too-few-public-methods


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of `RecordStore.fetch_first`.

    Attributes:
        error: The failure, or ``None`` if the destination was populated.
    """

    error: RecordStoreError | None = None

    @property
    def ok(self) -> bool:
        """True when the fetch succeeded."""
        return self.error is None


#: Shared success token. Carries no state and holds no connection.
FETCH_OK = FetchResult()


class RecordStore(abc.ABC):
    """Contract for fetching the first record that matches some criteria."""

    @abc.abstractmethod
    def fetch_first(self, destination: Student, *criteria: object) -> FetchResult:
        """Populate `destination` with the first record matching `criteria`.

        An ``int`` criterion means primary-key equality. Implementations may
        accept further criterion types. When several records match, the one
        with the lowest primary key wins.

        Args:
            destination: Caller-owned record, filled in place on success.
            *criteria: Filter criteria; all must hold.

        Returns:
            FetchResult: `FETCH_OK` on success. On failure a result whose
            ``error`` is a `RecordStoreError`; `destination` is then left in
            an unspecified state.
        """
