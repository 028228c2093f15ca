"""Services Layer — application services orchestrating repositories and core.

Invariants:
    - Services depend on core Protocols, never on infrastructure classes
    - No retries, no caching: each call is one query and one reduction

Design Decisions:
    - Repository injected through the constructor (routes build it per request)
"""
