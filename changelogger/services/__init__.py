"""Services Layer — use-case orchestration between API and repositories.

Invariants:
    - One service method per use case, one repository call per method
    - Services depend on core/ Protocols, never on concrete repositories

Design Decisions:
    - Services are the seam for future business rules (validation, versioning)
"""
