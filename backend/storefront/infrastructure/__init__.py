"""Infrastructure Layer — database access, storage adapters, and cross-cutting concerns.

Invariants:
    - Engine-native types (AsyncSession, AsyncScalarResult) never leave this layer
      except wrapped in core types
    - All SQLAlchemy failures mapped to DatabaseError at the session boundary

Design Decisions:
    - Storage adapters kept apart from the session manager: one concern per file
"""
