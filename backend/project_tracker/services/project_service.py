import uuid

from project_tracker.db.project_store import ProjectStore
from project_tracker.exceptions import NotFoundError, ValidationError
from project_tracker.models.base import normalize_status
from project_tracker.models.project import Project
from project_tracker.schemas.project import ProjectCreate, ProjectUpdate
from project_tracker.services.status_date_rule import validate_end_date


async def list_projects(store: ProjectStore) -> list[Project]:
    return list(await store.find_all())


async def get_project(store: ProjectStore, project_id: uuid.UUID) -> Project:
    project = await store.find_by_id(project_id)
    if not project:
        raise NotFoundError("Project not found")
    return project


async def create_project(store: ProjectStore, data: ProjectCreate) -> Project:
    status = normalize_status(data.status)
    end_date = validate_end_date(status, data.end_date)
    return await store.create(
        {
            "name": data.name,
            "description": data.description or "",
            "status": status,
            "start_date": data.start_date,
            "end_date": end_date,
        }
    )


async def update_project(
    store: ProjectStore, project_id: uuid.UUID, data: ProjectUpdate
) -> Project:
    fields = data.model_dump(exclude_unset=True)

    if data.status is not None:
        fields["status"] = normalize_status(data.status)
        fields["end_date"] = validate_end_date(fields["status"], data.end_date)
    elif "end_date" in fields:
        raise ValidationError("Status is required when updating end date")

    # Existence is left to the store.
    return await store.update(project_id, fields)


async def delete_project(store: ProjectStore, project_id: uuid.UUID) -> Project:
    project = await get_project(store, project_id)
    await store.delete(project_id)
    return project
