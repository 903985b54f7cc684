"""Domain Types — plain records for the single Project entity.

Invariants:
    - ProjectId wraps the opaque string identifier — assigned once by persistence, never by clients
    - Project and ProjectDetail share fields today but are distinct types
    - ProjectCreateOrUpdate carries the only mutable field (title)
    - Field order of Project/ProjectDetail matches the `projects` column order (id, title)

Design Decisions:
    - NewType over wrapper class for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses over Pydantic: records carry no validation, schemas/ owns the wire contract
      (ADR: DDD boundary — domain records never know about JSON field names)
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", str)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Project:
    """List-view shape of a project."""
    id: ProjectId
    title: str


@dataclass(frozen=True)
class ProjectDetail:
    """Detail-view shape. Reserved for revision history."""
    id: ProjectId
    title: str


@dataclass(frozen=True)
class ProjectCreateOrUpdate:
    """Input shape for create and update."""
    title: str
