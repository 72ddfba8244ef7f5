"""Service data access repository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.database import ServiceModel


class ServiceRepository:
    """Repository for service documents.

    Each call reads or replaces one service row; nothing here spans more
    than one entity.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, name: str, operations: list[dict[str, Any]]) -> ServiceModel:
        """Persist a new service."""
        service = ServiceModel(name=name, operations=operations)
        self.session.add(service)
        await self.session.commit()
        await self.session.refresh(service)
        return service

    async def get_by_id(self, service_id: str) -> ServiceModel | None:
        """Get service by ID."""
        result = await self.session.execute(
            select(ServiceModel).where(ServiceModel.id == service_id)
        )
        return result.scalar_one_or_none()

    async def list(self, offset: int, limit: int) -> list[ServiceModel]:
        """List one page of services ordered by name."""
        query = (
            select(ServiceModel)
            .order_by(ServiceModel.name, ServiceModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_all_services(self) -> list[ServiceModel]:
        """Full collection scan, used for reference validation."""
        result = await self.session.execute(select(ServiceModel))
        return list(result.scalars().all())

    async def replace(
        self,
        service: ServiceModel,
        name: str | None = None,
        operations: list[dict[str, Any]] | None = None,
    ) -> ServiceModel:
        """Write back a service with a new name and/or operation list.

        ``operations`` must be a new list; the JSON column is only flagged
        dirty on assignment.
        """
        if name is not None:
            service.name = name
        if operations is not None:
            service.operations = operations

        await self.session.commit()
        await self.session.refresh(service)
        return service

    async def delete(self, service: ServiceModel) -> None:
        """Delete a service together with its nested operations."""
        await self.session.delete(service)
        await self.session.commit()
