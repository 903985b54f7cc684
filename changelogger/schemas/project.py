"""Project Schemas — wire contract for the /projects endpoints.

Invariants:
    - ProjectWrite.title: 1-255 chars, not blank, must be a JSON string; stored exactly as sent
    - ProjectWrite rejects unknown fields — the identifier is never taken from the body
    - ProjectResponse exposes the identifier as "uuid"

Design Decisions:
    - strict str: a numeric title is a client error, not silently coerced
    - from_domain classmethods keep route handlers free of field mapping
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from changelogger.core.domain_types import (
    Project, ProjectDetail, ProjectCreateOrUpdate,
)


class ProjectWrite(BaseModel):
    """Body for POST /projects and PATCH /projects/{id}."""
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(min_length=1, max_length=255)

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title cannot be empty or whitespace")
        return v

    def to_domain(self) -> ProjectCreateOrUpdate:
        return ProjectCreateOrUpdate(title=self.title)


class ProjectResponse(BaseModel):
    """Project as returned to clients."""
    uuid: str
    title: str

    @classmethod
    def from_domain(cls, project: Project | ProjectDetail) -> "ProjectResponse":
        return cls(uuid=project.id, title=project.title)


class ErrorResponse(BaseModel):
    """Error envelope."""
    error: str
