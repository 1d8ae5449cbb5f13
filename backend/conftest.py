import uuid
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from project_tracker.db.session import get_session
from project_tracker.exceptions import NotFoundError
from project_tracker.main import app
from project_tracker.models import Base, Project

DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession]:
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession) -> AsyncGenerator[AsyncClient]:
    async def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c
    app.dependency_overrides.clear()


def _make_project(**overrides: Any) -> Project:
    now = datetime.now(timezone.utc)
    fields = {
        "id": uuid.uuid4(),
        "name": "Project 1",
        "description": "Description 1",
        "status": "in progress",
        "start_date": datetime(2025, 1, 1, tzinfo=timezone.utc),
        "end_date": None,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Project(**fields)


class InMemoryProjectStore:
    """ProjectStore double that records which operations were called."""

    def __init__(self, projects: list[Project] | None = None):
        self.projects: dict[uuid.UUID, Project] = {p.id: p for p in projects or []}
        self.calls: list[str] = []
        self.created: list[dict[str, Any]] = []
        self.updated: list[tuple[uuid.UUID, dict[str, Any]]] = []

    def add(self, *projects: Project) -> None:
        for project in projects:
            self.projects[project.id] = project

    async def find_all(self) -> list[Project]:
        self.calls.append("find_all")
        return list(self.projects.values())

    async def find_by_id(self, project_id: uuid.UUID) -> Project | None:
        self.calls.append("find_by_id")
        return self.projects.get(project_id)

    async def create(self, fields: dict[str, Any]) -> Project:
        self.calls.append("create")
        self.created.append(fields)
        project = _make_project(**fields)
        self.projects[project.id] = project
        return project

    async def update(self, project_id: uuid.UUID, fields: dict[str, Any]) -> Project:
        self.calls.append("update")
        self.updated.append((project_id, fields))
        project = self.projects.get(project_id)
        if not project:
            raise NotFoundError("Project not found")
        for field, value in fields.items():
            setattr(project, field, value)
        project.updated_at = datetime.now(timezone.utc)
        return project

    async def delete(self, project_id: uuid.UUID) -> None:
        self.calls.append("delete")
        del self.projects[project_id]


class FakeSummarizer:
    def __init__(self, text: str = "Generated summary", error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def summarize(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text


@pytest.fixture
def make_project():
    return _make_project


@pytest.fixture
def store() -> InMemoryProjectStore:
    return InMemoryProjectStore()


@pytest.fixture
def summarizer() -> FakeSummarizer:
    return FakeSummarizer()
