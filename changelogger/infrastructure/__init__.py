"""Infrastructure Layer — database pool and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond error types

Design Decisions:
    - Thin wrappers over SQLAlchemy and logging (single responsibility)
"""
