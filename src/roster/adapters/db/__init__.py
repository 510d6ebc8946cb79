"""Database plumbing: engines, metadata, table definitions and migrations."""
