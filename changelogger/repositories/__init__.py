"""Repositories — SQL implementations of the core/ persistence protocols.

Invariants:
    - One statement per operation, committed immediately for writes
    - Rows mapped to core/ domain records, never ORM instances leaked upward

Design Decisions:
    - Shell side of core/repository_protocols.py: the service only sees the Protocol
"""
