"""Project write interceptor.

ProjectStore decorates the underlying project Store and enforces three
policies before a write is persisted:

  create  -> attach the creator role-bindings annotation, check quotas
  update  -> check quotas
  delete  -> refuse to delete system projects

Quota check: resourceQuota and namespaceDefaultResourceQuota are declared
together or not at all, and the namespace default limit must fit inside the
project limit for every resource it names.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from projectgate.errors import (
    ConversionError,
    MaxLimitExceededError,
    MethodNotAllowedError,
    MissingRequiredError,
)
from projectgate.repositories.base import ProjectLister, RoleTemplateLister, Store
from projectgate.resourcequota.fit import is_quota_fit
from projectgate.schemas.project import NamespaceResourceQuota, ProjectResourceQuota

log = logging.getLogger(__name__)

CREATOR_ROLE_BINDINGS_ANNOTATION = "authz.management.cattle.io/creator-role-bindings"
SYSTEM_PROJECT_LABEL = "authz.management.cattle.io/system-project"
QUOTA_FIELD = "resourceQuota"
NAMESPACE_QUOTA_FIELD = "namespaceDefaultResourceQuota"


class ProjectStore(Store):
    def __init__(
        self,
        store: Store,
        project_lister: ProjectLister,
        role_template_lister: RoleTemplateLister,
    ) -> None:
        self._store = store
        self._project_lister = project_lister
        self._role_template_lister = role_template_lister

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        annotation = await self.create_project_annotation()

        self.validate_resource_quota(data, "")

        annotations = data.get("annotations")
        if not isinstance(annotations, dict):
            annotations = {}
            data["annotations"] = annotations
        annotations[CREATOR_ROLE_BINDINGS_ANNOTATION] = annotation

        return await self._store.create(data)

    async def update(self, id: str, data: dict[str, Any]) -> dict[str, Any]:
        self.validate_resource_quota(data, id)
        return await self._store.update(id, data)

    async def delete(self, id: str) -> dict[str, Any]:
        parts = id.split(":")
        project = await self._project_lister.get(parts[0], parts[-1])
        if (project.labels or {}).get(SYSTEM_PROJECT_LABEL) == "true":
            log.info("Refusing to delete system project %s", id)
            raise MethodNotAllowedError("System Project cannot be deleted")
        return await self._store.delete(id)

    async def by_id(self, id: str) -> dict[str, Any]:
        return await self._store.by_id(id)

    async def list(self) -> list[dict[str, Any]]:
        return await self._store.list()

    async def create_project_annotation(self) -> str:
        """JSON list of role templates whose creator gets a binding in new projects."""
        role_templates = await self._role_template_lister.list_all()

        anno: dict[str, list[str]] = {}
        for role in role_templates:
            if role.project_creator_default and not role.locked:
                anno.setdefault("required", []).append(role.name)

        return json.dumps(anno, separators=(",", ":"))

    def validate_resource_quota(self, data: dict[str, Any], id: str) -> None:
        quota = data.get(QUOTA_FIELD)
        ns_quota = data.get(NAMESPACE_QUOTA_FIELD)

        if (quota is None) != (ns_quota is None):
            if quota is not None:
                raise MissingRequiredError(NAMESPACE_QUOTA_FIELD)
            raise MissingRequiredError(QUOTA_FIELD)
        if quota is None:
            return

        project_limit = _limit_set(quota, ProjectResourceQuota, QUOTA_FIELD)
        ns_limit = _limit_set(ns_quota, NamespaceResourceQuota, NAMESPACE_QUOTA_FIELD)

        result = is_quota_fit(ns_limit, [], project_limit)
        if result.fits:
            return

        log.warning(
            "Namespace default quota exceeds project quota for %s: %s",
            id or "<new project>",
            result.message,
        )
        raise MaxLimitExceededError(
            f"exceeds {QUOTA_FIELD} on fields: {result.message}",
            field=NAMESPACE_QUOTA_FIELD,
        )


def _limit_set(
    obj: Any,
    model: type[ProjectResourceQuota] | type[NamespaceResourceQuota],
    field: str,
) -> dict[str, str]:
    try:
        quota = model.model_validate(obj)
    except PydanticValidationError as exc:
        raise ConversionError(f"{field} is not a valid resource quota", field=field) from exc
    if quota.limit is None:
        return {}
    return quota.limit.to_limit_set()
