"""The ``roster`` command-line interface."""
