"""Adapters (infrastructure) for ROSTER.

Provide concrete implementations of the interfaces in `roster.interfaces`
(record stores), plus persistence mapping and related wiring (engines,
metadata, migrations).

Dependency rule: may import `roster.domain` and `roster.interfaces`; neither
may import this package.
"""
