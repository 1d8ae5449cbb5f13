import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from project_tracker.api.deps import get_project_store
from project_tracker.db.project_store import SqlProjectStore
from project_tracker.db.session import get_session
from project_tracker.schemas.errors import ERROR_RESPONSES
from project_tracker.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from project_tracker.services import project_service

router = APIRouter(prefix="/projects", tags=["projects"], responses=ERROR_RESPONSES)


@router.post("", response_model=ProjectRead, status_code=201)
async def create_project(
    data: ProjectCreate,
    store: SqlProjectStore = Depends(get_project_store),
    session: AsyncSession = Depends(get_session),
):
    project = await project_service.create_project(store, data)
    await session.commit()
    return project


@router.get("", response_model=list[ProjectRead])
async def list_projects(store: SqlProjectStore = Depends(get_project_store)):
    return await project_service.list_projects(store)


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(
    project_id: uuid.UUID, store: SqlProjectStore = Depends(get_project_store)
):
    return await project_service.get_project(store, project_id)


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: uuid.UUID,
    data: ProjectUpdate,
    store: SqlProjectStore = Depends(get_project_store),
    session: AsyncSession = Depends(get_session),
):
    project = await project_service.update_project(store, project_id, data)
    await session.commit()
    return project


@router.delete("/{project_id}", response_model=ProjectRead)
async def delete_project(
    project_id: uuid.UUID,
    store: SqlProjectStore = Depends(get_project_store),
    session: AsyncSession = Depends(get_session),
):
    project = await project_service.delete_project(store, project_id)
    await session.commit()
    return project
