"""In-memory ProjectRepository double for service and route tests.

Satisfies core.repository_protocols.ProjectRepository structurally. Ids are
sequential strings ("1", "2", ...). Set `fail_with` to make every call raise,
or `delay` to make every call sleep first.
"""

import asyncio

from changelogger.core.domain_types import (
    ProjectId, Project, ProjectDetail, ProjectCreateOrUpdate,
)
from changelogger.core.errors import ResourceNotFoundError


class FakeProjectRepository:

    def __init__(self):
        self.rows: dict[str, str] = {}
        self.calls: list[str] = []
        self.fail_with: BaseException | None = None
        self.delay: float = 0.0
        self.cancelled = False
        self._next_id = 1

    async def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.delay:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        if self.fail_with is not None:
            raise self.fail_with

    async def get_all(self) -> list[Project]:
        await self._enter("get_all")
        return [Project(ProjectId(i), t) for i, t in self.rows.items()]

    async def get_by_id(self, project_id: ProjectId) -> ProjectDetail:
        await self._enter("get_by_id")
        if project_id not in self.rows:
            raise ResourceNotFoundError("Project", project_id)
        return ProjectDetail(project_id, self.rows[project_id])

    async def create(self, data: ProjectCreateOrUpdate) -> Project:
        await self._enter("create")
        project_id = ProjectId(str(self._next_id))
        self._next_id += 1
        self.rows[project_id] = data.title
        return Project(project_id, data.title)

    async def update(
        self, project_id: ProjectId, data: ProjectCreateOrUpdate,
    ) -> Project:
        await self._enter("update")
        if project_id not in self.rows:
            raise ResourceNotFoundError("Project", project_id)
        self.rows[project_id] = data.title
        return Project(project_id, data.title)

    async def delete(self, project_id: ProjectId) -> None:
        await self._enter("delete")
        if project_id not in self.rows:
            raise ResourceNotFoundError("Project", project_id)
        del self.rows[project_id]
