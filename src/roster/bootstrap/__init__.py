"""Bootstrap (composition root) for ROSTER.

Wires concrete adapters for the entrypoints: builds the engine, opens the
connection and hands out record stores bound to it.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `roster.adapters`, `roster.service_layer`,
  `roster.interfaces`, `roster.domain`, and `roster.config`.
- Inner layers must not import `roster.bootstrap`.
"""

from .bootstrap import BackendUnavailableError, open_record_store

__all__ = ["BackendUnavailableError", "open_record_store"]
