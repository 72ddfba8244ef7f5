"""Service and operation API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status

from shared.models import DeleteResponse, PagedResponse

from ..dependencies import get_audit_client, require_api_key
from ..schemas.service import (
    ServiceCreateRequest,
    ServiceOperationsAddRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)
from ..services.audit import AuditClient
from ..services.service_registry import ServiceRegistry

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post(
    "/services",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new service",
    description="Register a service together with its initial operations.",
)
async def create_service(
    request: Request,
    service_data: ServiceCreateRequest,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = ServiceRegistry(session, audit)
        return await registry.create(service_data)


@router.post(
    "/services/operation",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add operations to a service",
    description="Append operations to an existing service. Existing operations are kept.",
)
async def add_service_operations(
    request: Request,
    operations_data: ServiceOperationsAddRequest,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = ServiceRegistry(session, audit)
        return await registry.add_operations(operations_data)


@router.get(
    "/services",
    response_model=PagedResponse[ServiceResponse],
    response_model_exclude_none=True,
    summary="List services",
    description="List registered services one page at a time, ordered by name.",
)
async def list_services(
    request: Request,
    page_size: int | None = Query(None, alias="pageSize", description="Items per page"),
    page_number: int = Query(1, alias="pageNumber", description="Page number"),
    audit: AuditClient = Depends(get_audit_client),
):
    settings = request.app.state.settings

    async with request.app.state.session_factory() as session:
        registry = ServiceRegistry(session, audit)
        return await registry.list(
            page_number=page_number,
            page_size=settings.default_page_size if page_size is None else page_size,
            base_url=str(request.url),
            max_page_size=settings.max_page_size,
        )


@router.get(
    "/services/{service_id}",
    response_model=ServiceResponse,
    summary="Get service by ID",
)
async def get_service(
    request: Request,
    service_id: str,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = ServiceRegistry(session, audit)
        return await registry.get(service_id)


@router.put(
    "/services/{service_id}",
    response_model=ServiceResponse,
    summary="Update a service",
    description=(
        "Rename a service and rename operations matched by _id. "
        "Operations with an unknown _id are ignored."
    ),
)
async def update_service(
    request: Request,
    service_id: str,
    update_data: ServiceUpdateRequest,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = ServiceRegistry(session, audit)
        return await registry.update(service_id, update_data)


@router.delete(
    "/services/{service_id}",
    response_model=DeleteResponse,
    summary="Delete a service",
    description="Delete a service and its operations. Roles referencing them are not changed.",
)
async def delete_service(
    request: Request,
    service_id: str,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = ServiceRegistry(session, audit)
        return await registry.delete(service_id)
