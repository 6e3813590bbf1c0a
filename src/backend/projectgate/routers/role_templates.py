"""Role template endpoints.

GET  /v3/roletemplates  — list role templates in creation order
POST /v3/roletemplates  — create a role template
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from projectgate.database import get_db
from projectgate.errors import ConflictError
from projectgate.repositories.role_template_repo import RoleTemplateRepository
from projectgate.schemas.role_template import CreateRoleTemplateRequest, RoleTemplateResponse

router = APIRouter(prefix="/v3/roletemplates", tags=["roletemplates"])


def _repo(session: AsyncSession = Depends(get_db)) -> RoleTemplateRepository:
    return RoleTemplateRepository(session)


@router.get("", response_model=list[RoleTemplateResponse])
async def list_role_templates(
    repo: RoleTemplateRepository = Depends(_repo),
) -> list[RoleTemplateResponse]:
    return [RoleTemplateResponse.model_validate(rt) for rt in await repo.list_all()]


@router.post("", response_model=RoleTemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_role_template(
    body: CreateRoleTemplateRequest,
    repo: RoleTemplateRepository = Depends(_repo),
) -> RoleTemplateResponse:
    if await repo.get_by_name(body.name) is not None:
        raise ConflictError(f"Role template '{body.name}' already exists")
    role_template = await repo.create(
        name=body.name,
        display_name=body.display_name,
        project_creator_default=body.project_creator_default,
        locked=body.locked,
    )
    return RoleTemplateResponse.model_validate(role_template)
