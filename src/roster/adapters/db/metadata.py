"""Shared SQLAlchemy `MetaData` for roster's tables.

Constraint names are derived from the table name (``pk_student``) so that
the migration and the metadata agree and autogenerate stays quiet.
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
    }
)
