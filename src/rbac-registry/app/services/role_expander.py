"""Expansion of role identifiers into the operation identifiers they grant."""

from __future__ import annotations

from typing import Sequence

from shared.observability import get_logger

from ..repositories.role_repository import RoleRepository
from .exceptions import RoleNotFoundError

logger = get_logger(__name__)


class RoleExpander:
    """Flattens roles into operation identifiers."""

    def __init__(self, repository: RoleRepository):
        self.repository = repository

    async def expand_roles(self, role_ids: Sequence[str]) -> list[str]:
        """Concatenate the operation lists of the given roles.

        Input order and each role's stored order are kept. Duplicates are
        kept too: two roles granting the same operation yield it twice.
        Operation identifiers are returned as stored, even if the owning
        service has since been deleted.

        Raises:
            RoleNotFoundError: any identifier does not resolve to a role
        """
        logger.info("Translating roleIds to service operation Ids", role_ids=list(role_ids))

        operation_ids: list[str] = []
        for role_id in role_ids:
            role = await self.repository.get_by_id(role_id)
            if role is None:
                raise RoleNotFoundError(f"Role with ID {role_id} could not be found.")
            operation_ids.extend(role.service_op_ids)

        return operation_ids
