"""Database Layer — declarative base and standalone session factory.

Invariants:
    - All ORM models inherit from db.base.Base
    - Sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local tests
"""
