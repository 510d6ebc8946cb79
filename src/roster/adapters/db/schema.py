"""Student table schema.

One row per student. The primary key is assigned by whoever writes the
table; ROSTER itself only reads it.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, String, Table, Text

from roster.domain import NAME_MAX_LENGTH

from .metadata import metadata

__all__ = ["student"]

student = Table(
    "student",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(NAME_MAX_LENGTH), nullable=False, server_default=""),
    Column("age", Integer, nullable=False, server_default="0"),
    Column("dob", Text, nullable=False, server_default="", comment="Date of birth."),
    Column("course", Text, nullable=False, server_default=""),
    Column("city", Text, nullable=False, server_default=""),
    comment="Student records looked up by id.",
)
