"""Projects Routes — CRUD over /projects.

Invariants:
    - Identifier always taken from the path, never from the body
    - Body decode/validation failures → 400 before the service is called
    - Not-found → 404 "Project with id <id> not found"; store failures → 500
      (both via global error handlers)
    - DELETE returns 204 with an empty body

Design Decisions:
    - Routes only convert between schemas and domain records; status mapping for failures
      lives in api/error_handlers.py
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from changelogger.api.dependencies import get_project_service
from changelogger.core.domain_types import ProjectId
from changelogger.schemas.project import ErrorResponse, ProjectResponse, ProjectWrite
from changelogger.services.project_service import ProjectService

logger = logging.getLogger(__name__)

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def build_projects_router() -> APIRouter:
    """Create the /projects router."""
    router = APIRouter(prefix="/projects", tags=["projects"], responses=_ERRORS)

    @router.get("", response_model=list[ProjectResponse])
    async def list_projects(
        svc: ProjectService = Depends(get_project_service),
    ):
        """Return all projects."""
        projects = await svc.list_projects()
        return [ProjectResponse.from_domain(p) for p in projects]

    @router.get("/{project_id}", response_model=ProjectResponse)
    async def get_project(
        project_id: str, svc: ProjectService = Depends(get_project_service),
    ):
        """Return one project by id."""
        project = await svc.get_project(ProjectId(project_id))
        return ProjectResponse.from_domain(project)

    @router.post(
        "", response_model=ProjectResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_project(
        body: ProjectWrite, svc: ProjectService = Depends(get_project_service),
    ):
        """Create a project with the given title."""
        project = await svc.create_project(body.to_domain())
        return ProjectResponse.from_domain(project)

    @router.patch("/{project_id}", response_model=ProjectResponse)
    async def update_project(
        project_id: str,
        body: ProjectWrite,
        svc: ProjectService = Depends(get_project_service),
    ):
        """Replace the title of a project."""
        project = await svc.update_project(ProjectId(project_id), body.to_domain())
        return ProjectResponse.from_domain(project)

    @router.delete(
        "/{project_id}", status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    async def delete_project(
        project_id: str, svc: ProjectService = Depends(get_project_service),
    ):
        """Delete a project by id."""
        await svc.delete_project(ProjectId(project_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
