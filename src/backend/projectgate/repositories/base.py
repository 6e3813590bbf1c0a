"""Collaborator interfaces wrapped by the project write interceptor.

Store is the generic object store for project payloads (plain dicts with the
API's camelCase keys). The listers are read-only lookups used by policy
checks. Tests substitute AsyncMock implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol

from projectgate.models.project import Project


class RoleTemplateLike(Protocol):
    name: str
    project_creator_default: bool
    locked: bool


class Store(ABC):
    @abstractmethod
    async def create(self, data: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def update(self, id: str, data: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def delete(self, id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def by_id(self, id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def list(self) -> list[dict[str, Any]]: ...


class ProjectLister(ABC):
    @abstractmethod
    async def get(self, cluster_id: str, project_id: str) -> Project: ...


class RoleTemplateLister(ABC):
    @abstractmethod
    async def list_all(self) -> list[RoleTemplateLike]: ...
