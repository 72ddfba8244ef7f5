"""Checks that operation identifiers referenced by a role exist.

The check reads the services as they are at call time. Nothing holds them
in place afterwards: a service deleted between this check and the write of
the role, or at any later point, leaves the role pointing at operations
that no longer exist. Reads never re-check these references.
"""

from __future__ import annotations

from typing import Sequence

from shared.observability import get_logger

from ..repositories.service_repository import ServiceRepository

logger = get_logger(__name__)


class ReferenceValidator:
    """Validates operation identifiers against all registered services."""

    def __init__(self, repository: ServiceRepository):
        self.repository = repository

    async def validate_references(self, operation_ids: Sequence[str]) -> bool:
        """Return True when every identifier names an operation of some service.

        Identifiers are checked in order and the check stops at the first
        one that matches nothing. An empty sequence is valid.
        """
        if not operation_ids:
            return True

        services = await self.repository.get_all_services()

        for operation_id in operation_ids:
            found = any(
                operation["_id"] == operation_id
                for service in services
                for operation in service.operations
            )
            if not found:
                logger.warning(
                    "Unknown service operation referenced",
                    operation_id=operation_id,
                )
                return False

        return True
