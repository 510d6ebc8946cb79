"""Allow ``python -m roster``."""

from roster.entrypoints.cli.main import roster

roster()  # pylint: disable=no-value-for-parameter
