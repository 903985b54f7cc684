"""Dependency Providers — wire AsyncSession → repository → service per request.

Invariants:
    - One repository and one service instance per request, sharing the request's session
    - Service timeout comes from the Settings the app was built with (app.state.settings)
    - Tests substitute get_project_repository via app.dependency_overrides
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from changelogger.core.repository_protocols import ProjectRepository
from changelogger.infrastructure.database import get_db
from changelogger.repositories.project import SqlProjectRepository
from changelogger.services.project_service import ProjectService


async def get_project_repository(
    db: AsyncSession = Depends(get_db),
) -> ProjectRepository:
    return SqlProjectRepository(db)


async def get_project_service(
    request: Request,
    repo: ProjectRepository = Depends(get_project_repository),
) -> ProjectService:
    settings = request.app.state.settings
    return ProjectService(
        repo, timeout_seconds=settings.operation_timeout_seconds,
    )
