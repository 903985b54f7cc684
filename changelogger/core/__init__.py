"""Core Layer — domain records, error hierarchy and persistence contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - No IO: only types, errors and Protocols

Design Decisions:
    - Functional core separated from imperative shell
"""
