"""Project endpoints.

GET    /v3/projects         — list projects
GET    /v3/projects/{id}    — single project ("<clusterId>:<projectId>")
POST   /v3/projects         — create project (annotation + quota checks)
PUT    /v3/projects/{id}    — update project (quota checks)
DELETE /v3/projects/{id}    — delete project (system projects refused)

Every write goes through ProjectStore, which wraps the database-backed store.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from projectgate.database import get_db
from projectgate.repositories.project_repo import ProjectRepository
from projectgate.repositories.role_template_repo import RoleTemplateRepository
from projectgate.services.project_store import ProjectStore

router = APIRouter(prefix="/v3/projects", tags=["projects"])


def _store(session: AsyncSession = Depends(get_db)) -> ProjectStore:
    repo = ProjectRepository(session)
    return ProjectStore(
        store=repo,
        project_lister=repo,
        role_template_lister=RoleTemplateRepository(session),
    )


@router.get("")
async def list_projects(store: ProjectStore = Depends(_store)) -> list[dict[str, Any]]:
    return await store.list()


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    store: ProjectStore = Depends(_store),
) -> dict[str, Any]:
    return await store.by_id(project_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: dict[str, Any] = Body(...),
    store: ProjectStore = Depends(_store),
) -> dict[str, Any]:
    return await store.create(body)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    body: dict[str, Any] = Body(...),
    store: ProjectStore = Depends(_store),
) -> dict[str, Any]:
    return await store.update(project_id, body)


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    store: ProjectStore = Depends(_store),
) -> dict[str, Any]:
    return await store.delete(project_id)
