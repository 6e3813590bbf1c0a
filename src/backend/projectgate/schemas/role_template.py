"""Pydantic request/response schemas for the role templates API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateRoleTemplateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    display_name: str | None = Field(default=None, alias="displayName")
    project_creator_default: bool = Field(default=False, alias="projectCreatorDefault")
    locked: bool = False


class RoleTemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    display_name: str | None = Field(default=None, serialization_alias="displayName")
    project_creator_default: bool = Field(serialization_alias="projectCreatorDefault")
    locked: bool
