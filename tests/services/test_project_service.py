"""ProjectService — one repository call per use case, log-and-reraise on failure.

Tests cover:
    - Each method delegates to exactly one repository method
    - Failures re-raised as the same object after one log line
    - Not-found logged at INFO, store failures at ERROR
    - Timeout cancels the repository call and raises OperationTimeoutError
"""

import logging

import pytest
from sqlalchemy.exc import OperationalError

from changelogger.core.domain_types import (
    Project, ProjectDetail, ProjectCreateOrUpdate,
)
from changelogger.core.errors import OperationTimeoutError, ResourceNotFoundError
from changelogger.services.project_service import ProjectService
from tests.fakes import FakeProjectRepository

SERVICE_LOGGER = "changelogger.services.project_service"


@pytest.fixture
def repo():
    return FakeProjectRepository()


@pytest.fixture
def svc(repo):
    return ProjectService(repo)


async def test_create_then_get_round_trip(svc, repo):
    created = await svc.create_project(ProjectCreateOrUpdate(title="Alpha"))
    fetched = await svc.get_project(created.id)
    assert fetched == ProjectDetail(created.id, "Alpha")
    assert repo.calls == ["create", "get_by_id"]


async def test_list_calls_get_all_once(svc, repo):
    await svc.create_project(ProjectCreateOrUpdate(title="A"))
    await svc.create_project(ProjectCreateOrUpdate(title="B"))
    repo.calls.clear()
    projects = await svc.list_projects()
    assert [p.title for p in projects] == ["A", "B"]
    assert repo.calls == ["get_all"]


async def test_update_and_delete_delegate(svc, repo):
    created = await svc.create_project(ProjectCreateOrUpdate(title="A"))
    updated = await svc.update_project(created.id, ProjectCreateOrUpdate(title="B"))
    assert updated == Project(created.id, "B")
    assert await svc.delete_project(created.id) is None
    assert repo.calls == ["create", "update", "delete"]
    assert repo.rows == {}


async def test_store_failure_logged_and_reraised_unchanged(svc, repo, caplog):
    boom = OperationalError("SELECT", {}, Exception("connection refused"))
    repo.fail_with = boom
    caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)

    with pytest.raises(OperationalError) as exc_info:
        await svc.list_projects()

    assert exc_info.value is boom
    records = [r for r in caplog.records if r.name == SERVICE_LOGGER]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].operation == "list"
    assert "connection refused" in records[0].getMessage()


async def test_not_found_logged_at_info(svc, caplog):
    caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)

    with pytest.raises(ResourceNotFoundError):
        await svc.get_project("missing")

    records = [r for r in caplog.records if r.name == SERVICE_LOGGER]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert records[0].project_id == "missing"


async def test_success_logs_nothing(svc, caplog):
    caplog.set_level(logging.DEBUG, logger=SERVICE_LOGGER)
    await svc.create_project(ProjectCreateOrUpdate(title="A"))
    assert not [r for r in caplog.records if r.name == SERVICE_LOGGER]


async def test_timeout_cancels_repository_call(repo):
    repo.delay = 1.0
    svc = ProjectService(repo, timeout_seconds=0.01)

    with pytest.raises(OperationTimeoutError) as exc_info:
        await svc.list_projects()

    assert exc_info.value.operation == "list"
    assert repo.cancelled is True


async def test_no_timeout_when_disabled(repo):
    repo.delay = 0.01
    svc = ProjectService(repo, timeout_seconds=None)
    assert await svc.list_projects() == []
