"""Repository for role templates."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from projectgate.errors import ConflictError
from projectgate.models.role_template import RoleTemplate
from projectgate.repositories.base import RoleTemplateLister


class RoleTemplateRepository(RoleTemplateLister):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[RoleTemplate]:
        result = await self.session.execute(
            select(RoleTemplate).order_by(RoleTemplate.created_at, RoleTemplate.name)
        )
        return list(result.scalars().all())

    async def create(
        self,
        name: str,
        display_name: str | None,
        project_creator_default: bool,
        locked: bool,
    ) -> RoleTemplate:
        role_template = RoleTemplate(
            name=name,
            display_name=display_name,
            project_creator_default=project_creator_default,
            locked=locked,
        )
        self.session.add(role_template)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Role template '{name}' already exists") from exc
        await self.session.refresh(role_template)
        return role_template

    async def get_by_name(self, name: str) -> RoleTemplate | None:
        result = await self.session.execute(
            select(RoleTemplate).where(RoleTemplate.name == name)
        )
        return result.scalar_one_or_none()
