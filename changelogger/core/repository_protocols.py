"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy; an in-memory
      test double satisfies the contract without subclassing
    - Async in Protocol: implementations do IO and must honour task cancellation
"""

from typing import Protocol

from changelogger.core.domain_types import (
    ProjectId, Project, ProjectDetail, ProjectCreateOrUpdate,
)


class ProjectRepository(Protocol):
    """Contract for project persistence — implemented by shell.

    get_by_id, update and delete raise ResourceNotFoundError when no row
    matches. Any other store failure propagates unchanged.
    """
    async def get_all(self) -> list[Project]: ...
    async def get_by_id(self, project_id: ProjectId) -> ProjectDetail: ...
    async def create(self, data: ProjectCreateOrUpdate) -> Project: ...
    async def update(
        self, project_id: ProjectId, data: ProjectCreateOrUpdate,
    ) -> Project: ...
    async def delete(self, project_id: ProjectId) -> None: ...
