"""Student name lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roster.domain import Student

if TYPE_CHECKING:
    from roster.interfaces.record_store import RecordStore


def get_name_by_id(store: RecordStore, student_id: int) -> str:
    """Return the name of the student with the given id.

    The store is asked exactly once, with `student_id` passed through as
    given. No range checks are done here.

    Args:
        store: Where to look the student up.
        student_id: Primary key of the student.

    Returns:
        str: The student's name.

    Raises:
        RecordStoreError: The error reported by the store, re-raised as-is.
    """
    student = Student()
    result = store.fetch_first(student, student_id)
    if result.error is not None:
        raise result.error
    return student.name
