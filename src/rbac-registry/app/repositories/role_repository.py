"""Role data access repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.database import RoleModel


class RoleRepository:
    """Repository for roles."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, name: str, service_op_ids: list[str]) -> RoleModel:
        role = RoleModel(name=name, service_op_ids=list(service_op_ids))
        self.session.add(role)
        await self.session.commit()
        await self.session.refresh(role)
        return role

    async def get_by_id(self, role_id: str) -> RoleModel | None:
        result = await self.session.execute(select(RoleModel).where(RoleModel.id == role_id))
        return result.scalar_one_or_none()

    async def list(self, offset: int, limit: int) -> list[RoleModel]:
        """List one page of roles ordered by name."""
        query = (
            select(RoleModel)
            .order_by(RoleModel.name, RoleModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def replace(
        self,
        role: RoleModel,
        name: str | None = None,
        service_op_ids: list[str] | None = None,
    ) -> RoleModel:
        if name is not None:
            role.name = name
        if service_op_ids is not None:
            role.service_op_ids = list(service_op_ids)

        await self.session.commit()
        await self.session.refresh(role)
        return role

    async def delete(self, role: RoleModel) -> None:
        await self.session.delete(role)
        await self.session.commit()
