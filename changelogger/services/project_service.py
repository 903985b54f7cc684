"""Project Service — one use case per method, one repository call per use case.

Invariants:
    - Every failure is logged once, then re-raised as the same exception object
    - No validation or transaction coordination here — input arrives already bound
    - Depends on the ProjectRepository Protocol, never on a concrete store

Design Decisions:
    - Optional timeout wraps the repository call in asyncio.wait_for: expiry cancels the
      in-flight statement instead of leaking it, and surfaces as OperationTimeoutError (504)
    - Not-found logged at INFO: expected client behaviour, not a server fault
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from changelogger.core.domain_types import (
    ProjectId, Project, ProjectDetail, ProjectCreateOrUpdate,
)
from changelogger.core.errors import OperationTimeoutError, ResourceNotFoundError
from changelogger.core.repository_protocols import ProjectRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProjectService:
    """Mediates between the HTTP layer and a ProjectRepository."""

    def __init__(
        self, repo: ProjectRepository, timeout_seconds: float | None = None,
    ):
        self.repo = repo
        self.timeout_seconds = timeout_seconds

    async def list_projects(self) -> list[Project]:
        return await self._run("list", None, self.repo.get_all())

    async def get_project(self, project_id: ProjectId) -> ProjectDetail:
        return await self._run(
            "get", project_id, self.repo.get_by_id(project_id),
        )

    async def create_project(self, data: ProjectCreateOrUpdate) -> Project:
        return await self._run("create", None, self.repo.create(data))

    async def update_project(
        self, project_id: ProjectId, data: ProjectCreateOrUpdate,
    ) -> Project:
        return await self._run(
            "update", project_id, self.repo.update(project_id, data),
        )

    async def delete_project(self, project_id: ProjectId) -> None:
        await self._run("delete", project_id, self.repo.delete(project_id))

    async def _run(
        self, operation: str, project_id: str | None, call: Awaitable[T],
    ) -> T:
        extra = {"operation": operation, "project_id": project_id}
        try:
            if self.timeout_seconds is None:
                return await call
            try:
                return await asyncio.wait_for(call, self.timeout_seconds)
            except asyncio.TimeoutError:
                raise OperationTimeoutError(
                    operation, self.timeout_seconds,
                ) from None
        except ResourceNotFoundError as e:
            logger.info(f"[ProjectService] {operation}: {e.message}", extra=extra)
            raise
        except Exception as e:
            logger.error(
                f"[ProjectService] failed to {operation} project(s): {e}",
                extra=extra,
            )
            raise
