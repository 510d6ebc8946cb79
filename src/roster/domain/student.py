"""The student record read by lookups."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

NAME_MAX_LENGTH = 100


@dataclass
class Student:
    """A row of the ``student`` table.

    Instances are mutable on purpose: a lookup hands an empty one to the
    record store, which fills it in place.
    """

    id: int = 0
    name: str = ""
    age: int = 0
    dob: str = ""
    course: str = ""
    city: str = ""

    def load(self, values: Mapping[str, Any]) -> None:
        """Overwrite fields in place from a column-name -> value mapping.

        Keys that are not fields are ignored; fields missing from `values`
        keep their current value.

        Args:
            values: Column values, e.g. a SQLAlchemy ``RowMapping``.
        """
        for field in fields(self):
            if field.name in values:
                setattr(self, field.name, values[field.name])
