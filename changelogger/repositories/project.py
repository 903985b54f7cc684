"""Project Repository — SQL statements for the `projects` table.

Invariants:
    - get_all returns [] (never None) on an empty table
    - Rows mapped positionally (id, title) into domain records
    - get_by_id/update/delete raise ResourceNotFoundError when no row matches
    - SQLAlchemyError propagates unchanged — no retries, no translation

Design Decisions:
    - INSERT/UPDATE ... RETURNING: identifier and title echoed by the store in one round trip
    - delete checks rowcount: a missing row is not-found, not a silent success
    - synchronize_session=False: statements never touch identity-map objects (none are loaded)
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from changelogger.core.domain_types import (
    ProjectId, Project, ProjectDetail, ProjectCreateOrUpdate,
)
from changelogger.core.errors import ResourceNotFoundError
from changelogger.models.project import Project as ProjectModel

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "Project"


class SqlProjectRepository:
    """ProjectRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> list[Project]:
        result = await self.db.execute(
            select(ProjectModel.id, ProjectModel.title),
        )
        return [Project(*row) for row in result.all()]

    async def get_by_id(self, project_id: ProjectId) -> ProjectDetail:
        result = await self.db.execute(
            select(ProjectModel.id, ProjectModel.title)
            .where(ProjectModel.id == project_id)
        )
        row = result.one_or_none()
        if row is None:
            raise ResourceNotFoundError(RESOURCE_TYPE, project_id)
        return ProjectDetail(*row)

    async def create(self, data: ProjectCreateOrUpdate) -> Project:
        result = await self.db.execute(
            insert(ProjectModel)
            .values(title=data.title)
            .returning(ProjectModel.id, ProjectModel.title)
        )
        row = result.one()
        await self.db.commit()
        logger.debug("Project created", extra={"project_id": row[0]})
        return Project(*row)

    async def update(
        self, project_id: ProjectId, data: ProjectCreateOrUpdate,
    ) -> Project:
        result = await self.db.execute(
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(title=data.title)
            .returning(ProjectModel.id, ProjectModel.title)
            .execution_options(synchronize_session=False)
        )
        row = result.one_or_none()
        if row is None:
            await self.db.rollback()
            raise ResourceNotFoundError(RESOURCE_TYPE, project_id)
        await self.db.commit()
        return Project(*row)

    async def delete(self, project_id: ProjectId) -> None:
        result = await self.db.execute(
            delete(ProjectModel)
            .where(ProjectModel.id == project_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise ResourceNotFoundError(RESOURCE_TYPE, project_id)
        await self.db.commit()
