"""Project persistence: the store protocol and its SQLAlchemy implementation."""

import uuid
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from project_tracker.exceptions import NotFoundError
from project_tracker.models.project import Project


@runtime_checkable
class ProjectStore(Protocol):
    """Persistence collaborator for projects. Assigns ids on create."""

    async def find_all(self) -> Sequence[Project]:
        ...

    async def find_by_id(self, project_id: uuid.UUID) -> Project | None:
        ...

    async def create(self, fields: dict[str, Any]) -> Project:
        ...

    async def update(self, project_id: uuid.UUID, fields: dict[str, Any]) -> Project:
        ...

    async def delete(self, project_id: uuid.UUID) -> None:
        ...


class SqlProjectStore:
    """ProjectStore over an AsyncSession.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> list[Project]:
        result = await self.session.execute(select(Project).order_by(Project.created_at))
        return list(result.scalars().all())

    async def find_by_id(self, project_id: uuid.UUID) -> Project | None:
        return await self.session.get(Project, project_id)

    async def create(self, fields: dict[str, Any]) -> Project:
        project = Project(**fields)
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project_id: uuid.UUID, fields: dict[str, Any]) -> Project:
        project = await self.session.get(Project, project_id)
        if not project:
            raise NotFoundError("Project not found")
        for field, value in fields.items():
            setattr(project, field, value)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project_id: uuid.UUID) -> None:
        project = await self.session.get(Project, project_id)
        if not project:
            raise NotFoundError("Project not found")
        await self.session.delete(project)
        await self.session.flush()
