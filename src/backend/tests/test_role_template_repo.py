"""Tests for RoleTemplateRepository write behaviour.

The AsyncSession is mocked; no real DB required.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from projectgate.errors import ConflictError
from projectgate.models.role_template import RoleTemplate
from projectgate.repositories.role_template_repo import RoleTemplateRepository


def _make_session(flush_error: Exception | None = None) -> MagicMock:
    session = MagicMock()
    session.add = MagicMock()
    session.flush = AsyncMock(side_effect=flush_error)
    session.refresh = AsyncMock()
    return session


class TestCreateRoleTemplate:
    async def test_create_adds_and_returns_row(self):
        session = _make_session()
        repo = RoleTemplateRepository(session)

        row = await repo.create(
            name="project-owner",
            display_name="Project Owner",
            project_creator_default=True,
            locked=False,
        )

        assert isinstance(row, RoleTemplate)
        assert row.name == "project-owner"
        assert row.project_creator_default is True
        session.add.assert_called_once_with(row)
        session.refresh.assert_awaited_once_with(row)

    async def test_unique_violation_on_flush_becomes_conflict(self):
        duplicate = IntegrityError(
            "INSERT INTO role_templates ...", {}, Exception("duplicate key value")
        )
        session = _make_session(flush_error=duplicate)
        repo = RoleTemplateRepository(session)

        with pytest.raises(ConflictError) as exc_info:
            await repo.create(
                name="project-owner",
                display_name=None,
                project_creator_default=True,
                locked=False,
            )

        assert exc_info.value.status_code == 409
        assert exc_info.value.__cause__ is duplicate
        session.refresh.assert_not_awaited()
