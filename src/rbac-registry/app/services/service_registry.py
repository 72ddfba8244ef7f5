"""Service registry: services and the operations they own."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from shared.database import ServiceModel, new_identifier
from shared.models import DeleteResponse, PagedResponse
from shared.observability import get_logger

from ..repositories.service_repository import ServiceRepository
from ..schemas.service import (
    SERVICE_NAME_MAX_LENGTH,
    SERVICE_NAME_MIN_LENGTH,
    Operation,
    OperationInput,
    ServiceCreateRequest,
    ServiceOperationsAddRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)
from .audit import AuditClient, HttpMethod
from .exceptions import ServiceNotFoundError
from .pager import MAX_PAGE_SIZE, build_page, check_page_request, page_offset
from .validation import check_name_length, check_not_empty

logger = get_logger(__name__)


class ServiceRegistry:
    """Create, read, update and delete services.

    Operations have no lifecycle of their own; they are created, renamed
    and removed only through their service.
    """

    def __init__(self, session: AsyncSession, audit: AuditClient):
        self.repository = ServiceRepository(session)
        self.audit = audit

    async def create(self, request: ServiceCreateRequest) -> ServiceResponse:
        """Register a new service with an empty or populated operation list."""
        logger.info("New service create", name=request.name)

        check_name_length("name", request.name, SERVICE_NAME_MIN_LENGTH, SERVICE_NAME_MAX_LENGTH)
        operations = self._new_operations(request.operations)

        service = await self.repository.create(request.name, operations)
        logger.info("Service registered", service_id=service.id, name=service.name)

        response = self._to_response(service)
        await self.audit.send(HttpMethod.POST, response.model_dump_json(by_alias=True))
        return response

    async def get(self, service_id: str) -> ServiceResponse:
        """Get service by ID."""
        return self._to_response(await self._get_or_raise(service_id))

    async def list(
        self,
        page_number: int,
        page_size: int,
        base_url: str,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> PagedResponse[ServiceResponse]:
        """List one page of services ordered by name."""
        check_page_request(page_number, page_size, max_page_size)
        logger.debug("Listing services", page_number=page_number, page_size=page_size)

        services = await self.repository.list(page_offset(page_number, page_size), page_size)
        return build_page(
            [self._to_response(s) for s in services], base_url, page_number, page_size
        )

    async def add_operations(self, request: ServiceOperationsAddRequest) -> ServiceResponse:
        """Append operations to a service.

        New operations are not compared with existing ones; adding an
        operation name twice yields two operations.
        """
        logger.info("Add service operation", service_id=request.id)

        new_operations = self._new_operations(request.operations)
        service = await self._get_or_raise(request.id)
        operations = list(service.operations) + new_operations

        service = await self.repository.replace(service, operations=operations)
        logger.info("Service updated", service_id=service.id, added=len(request.operations))

        response = self._to_response(service)
        await self.audit.send(HttpMethod.POST, response.model_dump_json(by_alias=True))
        return response

    async def update(self, service_id: str, request: ServiceUpdateRequest) -> ServiceResponse:
        """Rename a service and rename operations matched by identifier.

        Incoming operations whose identifier matches no existing operation
        are ignored; update never adds or removes operations.
        """
        logger.info("Updating service", service_id=service_id)

        service = await self._get_or_raise(service_id)

        check_name_length("name", request.name, SERVICE_NAME_MIN_LENGTH, SERVICE_NAME_MAX_LENGTH)
        for op in request.operations:
            check_not_empty("operations.name", op.name)

        operations = [dict(op) for op in service.operations]
        index_by_id = {op["_id"]: i for i, op in enumerate(operations)}
        for op in request.operations:
            idx = index_by_id.get(op.id)
            if idx is None:
                logger.debug("Ignoring unknown operation", service_id=service_id, operation_id=op.id)
                continue
            operations[idx]["name"] = op.name

        service = await self.repository.replace(service, name=request.name, operations=operations)
        logger.info("Service updated", service_id=service.id)

        response = self._to_response(service)
        await self.audit.send(HttpMethod.PUT, response.model_dump_json(by_alias=True))
        return response

    async def delete(self, service_id: str) -> DeleteResponse:
        """Delete a service and its operations.

        Roles that reference the deleted operations keep those references.
        """
        logger.info("Deleting service", service_id=service_id)

        service = await self._get_or_raise(service_id)
        await self.repository.delete(service)
        logger.info("Service deleted", service_id=service_id)

        response = DeleteResponse(id=service_id)
        await self.audit.send(HttpMethod.DELETE, response.model_dump_json(by_alias=True))
        return response

    async def _get_or_raise(self, service_id: str) -> ServiceModel:
        service = await self.repository.get_by_id(service_id)
        if service is None:
            msg = f"Service with ID {service_id} could not be found."
            logger.warning(msg)
            raise ServiceNotFoundError(msg)
        return service

    @staticmethod
    def _new_operations(operations: list[OperationInput]) -> list[dict[str, str]]:
        """Assign identifiers to incoming operations."""
        for op in operations:
            check_not_empty("operations.name", op.name)
        return [{"_id": new_identifier(), "name": op.name} for op in operations]

    @staticmethod
    def _to_response(service: ServiceModel) -> ServiceResponse:
        """Convert database model to response schema."""
        return ServiceResponse(
            id=service.id,
            name=service.name,
            operations=[Operation(id=op["_id"], name=op["name"]) for op in service.operations or []],
        )
