"""Alembic migration scripts for ROSTER (located via `roster.config`)."""
