"""Core Layer — domain types, errors, and the Products collection wrapper.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Core never opens a connection; it only consumes what the shell hands it

Design Decisions:
    - Functional core separated from imperative shell
"""
