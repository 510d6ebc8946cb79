"""Service layer for ROSTER.

Application use cases, written against `roster.interfaces` only.

Dependency rule: may import `roster.domain` and `roster.interfaces`; must not
import `roster.adapters`.
"""

from .lookup import get_name_by_id

__all__ = ["get_name_by_id"]
