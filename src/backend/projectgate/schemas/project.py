"""Pydantic schemas for project quota blocks.

Project payloads travel through the store as plain dicts; these models give
the two quota blocks their expected shape when they need to be checked.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel


class ResourceQuotaLimit(RootModel[dict[str, str | int | float | None]]):
    """Resource name -> quantity. Open-ended: any resource name is accepted."""

    def to_limit_set(self) -> dict[str, str]:
        return {
            name: value if isinstance(value, str) else str(value)
            for name, value in self.root.items()
            if value is not None and value != ""
        }


class ProjectResourceQuota(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    limit: ResourceQuotaLimit | None = None
    used_limit: ResourceQuotaLimit | None = Field(default=None, alias="usedLimit")


class NamespaceResourceQuota(BaseModel):
    limit: ResourceQuotaLimit | None = None
