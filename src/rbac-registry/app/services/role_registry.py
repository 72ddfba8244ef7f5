"""Role registry: named bundles of operation identifiers."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from shared.database import RoleModel
from shared.models import DeleteResponse, PagedResponse
from shared.observability import get_logger

from ..repositories.role_repository import RoleRepository
from ..repositories.service_repository import ServiceRepository
from ..schemas.role import (
    ROLE_NAME_MAX_LENGTH,
    ROLE_NAME_MIN_LENGTH,
    RoleCreateRequest,
    RoleResponse,
    RoleUpdateRequest,
)
from .audit import AuditClient, HttpMethod
from .exceptions import ReferenceValidationError, RoleNotFoundError
from .pager import MAX_PAGE_SIZE, build_page, check_page_request, page_offset
from .reference_validator import ReferenceValidator
from .role_expander import RoleExpander
from .validation import check_name_length

logger = get_logger(__name__)


class RoleRegistry:
    """Create, read, update, delete and expand roles.

    Operation references are checked when a role is written. The check and
    the write are separate store calls, so a service removed in between
    leaves the role with a dangling reference.
    """

    def __init__(self, session: AsyncSession, audit: AuditClient):
        self.repository = RoleRepository(session)
        self.validator = ReferenceValidator(ServiceRepository(session))
        self.expander = RoleExpander(self.repository)
        self.audit = audit

    async def create(self, request: RoleCreateRequest) -> RoleResponse:
        """Create a role after checking its name, then its references."""
        logger.info("New role create", name=request.name, service_op_ids=request.service_op_ids)

        check_name_length("name", request.name, ROLE_NAME_MIN_LENGTH, ROLE_NAME_MAX_LENGTH)
        await self._check_references(request.service_op_ids)

        role = await self.repository.create(request.name, request.service_op_ids)
        logger.info("Role created", role_id=role.id, name=role.name)

        response = self._to_response(role)
        await self.audit.send(HttpMethod.POST, response.model_dump_json(by_alias=True))
        return response

    async def get(self, role_id: str) -> RoleResponse:
        """Get role by ID."""
        return self._to_response(await self._get_or_raise(role_id))

    async def list(
        self,
        page_number: int,
        page_size: int,
        base_url: str,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> PagedResponse[RoleResponse]:
        """List one page of roles ordered by name."""
        check_page_request(page_number, page_size, max_page_size)
        logger.debug("Listing roles", page_number=page_number, page_size=page_size)

        roles = await self.repository.list(page_offset(page_number, page_size), page_size)
        return build_page([self._to_response(r) for r in roles], base_url, page_number, page_size)

    async def update(self, role_id: str, request: RoleUpdateRequest) -> RoleResponse:
        """Update a role's name and/or operation list.

        A new operation list is re-validated before anything is written.
        Omitting the list leaves the stored one untouched and unchecked.
        """
        logger.info("Updating role", role_id=role_id)

        role = await self._get_or_raise(role_id)

        if request.name is not None:
            check_name_length("name", request.name, ROLE_NAME_MIN_LENGTH, ROLE_NAME_MAX_LENGTH)

        if request.service_op_ids is not None:
            await self._check_references(request.service_op_ids)

        role = await self.repository.replace(
            role, name=request.name, service_op_ids=request.service_op_ids
        )
        logger.info("Role updated", role_id=role.id)

        response = self._to_response(role)
        await self.audit.send(HttpMethod.PUT, response.model_dump_json(by_alias=True))
        return response

    async def delete(self, role_id: str) -> DeleteResponse:
        """Delete a role. Nothing else is affected."""
        logger.info("Deleting role", role_id=role_id)

        role = await self._get_or_raise(role_id)
        await self.repository.delete(role)
        logger.info("Role deleted", role_id=role_id)

        response = DeleteResponse(id=role_id)
        await self.audit.send(HttpMethod.DELETE, response.model_dump_json(by_alias=True))
        return response

    async def expand(self, role_ids: Sequence[str]) -> list[str]:
        """Expand role identifiers into the operation identifiers they grant."""
        return await self.expander.expand_roles(role_ids)

    async def _check_references(self, service_op_ids: Sequence[str]) -> None:
        if not await self.validator.validate_references(service_op_ids):
            msg = "Service Operation ID validation failed"
            logger.warning(msg, service_op_ids=list(service_op_ids))
            raise ReferenceValidationError(msg)

    async def _get_or_raise(self, role_id: str) -> RoleModel:
        role = await self.repository.get_by_id(role_id)
        if role is None:
            msg = f"Role with ID {role_id} could not be found."
            logger.warning(msg)
            raise RoleNotFoundError(msg)
        return role

    @staticmethod
    def _to_response(role: RoleModel) -> RoleResponse:
        """Convert database model to response schema."""
        return RoleResponse(
            id=role.id,
            name=role.name,
            service_op_ids=list(role.service_op_ids or []),
        )
