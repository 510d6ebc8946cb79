"""Errors reported by a RecordStore."""


class RecordStoreError(Exception):
    """Any failure to fetch a record: missing row, lost connection, bad query.

    Callers are not expected to tell these cases apart.
    """


class RecordNotFoundError(RecordStoreError):
    """Raised when no record matches the given criteria.

    Attributes:
        criteria (tuple[object, ...]): The criteria that matched nothing.
    """

    def __init__(self, criteria: tuple[object, ...]):
        shown = ", ".join(repr(c) for c in criteria) or "<none>"
        super().__init__(f"record not found for criteria: {shown}")
        self.criteria = criteria
