"""ROSTER test suite.

Folder taxonomy
- unit/         : Fast checks of a single module; databases are mocked or in-memory SQLite.
- contract/     : Behavior every RecordStore implementation must share.
- integration/  : Real SQLite files, Alembic migrations and the bootstrap wiring.
- e2e/          : The ``roster`` CLI driven through Click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

Each test is marked after its top-level folder (see ``conftest.py``).
"""
