"""Repository for project records.

Implements both the generic Store (payload CRUD) and ProjectLister
(typed lookup by cluster and project id).
"""

import secrets
import string
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from projectgate.errors import MissingRequiredError, NotFoundError
from projectgate.models.project import Project
from projectgate.repositories.base import ProjectLister, Store

_NAME_ALPHABET = string.ascii_lowercase + string.digits
_NAME_LENGTH = 5

# payload key -> Project attribute, for keys a caller may set
_MUTABLE_FIELDS: dict[str, str] = {
    "name": "display_name",
    "description": "description",
    "labels": "labels",
    "annotations": "annotations",
    "resourceQuota": "resource_quota",
    "namespaceDefaultResourceQuota": "namespace_default_resource_quota",
}


def _generate_name() -> str:
    return "p-" + "".join(secrets.choice(_NAME_ALPHABET) for _ in range(_NAME_LENGTH))


def to_payload(project: Project) -> dict[str, Any]:
    return {
        "id": project.id,
        "clusterId": project.cluster_id,
        "name": project.display_name,
        "description": project.description,
        "labels": dict(project.labels or {}),
        "annotations": dict(project.annotations or {}),
        "resourceQuota": project.resource_quota,
        "namespaceDefaultResourceQuota": project.namespace_default_resource_quota,
        "created": project.created_at.isoformat() if project.created_at else None,
    }


class ProjectRepository(Store, ProjectLister):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        cluster_id = data.get("clusterId")
        if not cluster_id:
            raise MissingRequiredError("clusterId")

        name = _generate_name()
        project = Project(id=f"{cluster_id}:{name}", cluster_id=cluster_id, name=name)
        self._apply(project, data)
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return to_payload(project)

    async def update(self, id: str, data: dict[str, Any]) -> dict[str, Any]:
        project = await self._get_by_id_for_update(id)
        self._apply(project, data)
        project.updated_at = func.now()
        await self.session.flush()
        await self.session.refresh(project)
        return to_payload(project)

    async def delete(self, id: str) -> dict[str, Any]:
        project = await self._get_by_id_for_update(id)
        payload = to_payload(project)
        await self.session.delete(project)
        await self.session.flush()
        return payload

    async def by_id(self, id: str) -> dict[str, Any]:
        result = await self.session.execute(select(Project).where(Project.id == id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Project '{id}' not found")
        return to_payload(row)

    async def list(self) -> list[dict[str, Any]]:
        result = await self.session.execute(
            select(Project).order_by(Project.created_at, Project.id)
        )
        return [to_payload(p) for p in result.scalars().all()]

    async def get(self, cluster_id: str, project_id: str) -> Project:
        result = await self.session.execute(
            select(Project).where(
                Project.cluster_id == cluster_id,
                Project.name == project_id,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Project '{cluster_id}:{project_id}' not found")
        return row

    async def _get_by_id_for_update(self, id: str) -> Project:
        result = await self.session.execute(
            select(Project).where(Project.id == id).with_for_update()
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Project '{id}' not found")
        return row

    @staticmethod
    def _apply(project: Project, data: dict[str, Any]) -> None:
        for key, attr in _MUTABLE_FIELDS.items():
            if key not in data:
                continue
            value = data[key]
            if attr in ("labels", "annotations"):
                value = dict(value or {})
            setattr(project, attr, value)
