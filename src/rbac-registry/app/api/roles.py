"""Role API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status

from shared.models import DeleteResponse, PagedResponse

from ..dependencies import get_audit_client, require_api_key
from ..schemas.role import RoleCreateRequest, RoleResponse, RoleUpdateRequest
from ..services.audit import AuditClient
from ..services.role_registry import RoleRegistry

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post(
    "/roles",
    response_model=RoleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a role",
    description="Create a role. Every serviceOpId must name an operation of a registered service.",
)
async def create_role(
    request: Request,
    role_data: RoleCreateRequest,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = RoleRegistry(session, audit)
        return await registry.create(role_data)


@router.get(
    "/roles",
    response_model=PagedResponse[RoleResponse],
    response_model_exclude_none=True,
    summary="List roles",
)
async def list_roles(
    request: Request,
    page_size: int | None = Query(None, alias="pageSize", description="Items per page"),
    page_number: int = Query(1, alias="pageNumber", description="Page number"),
    audit: AuditClient = Depends(get_audit_client),
):
    settings = request.app.state.settings

    async with request.app.state.session_factory() as session:
        registry = RoleRegistry(session, audit)
        return await registry.list(
            page_number=page_number,
            page_size=settings.default_page_size if page_size is None else page_size,
            base_url=str(request.url),
            max_page_size=settings.max_page_size,
        )


@router.get("/roles/{role_id}", response_model=RoleResponse, summary="Get role by ID")
async def get_role(
    request: Request,
    role_id: str,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = RoleRegistry(session, audit)
        return await registry.get(role_id)


@router.put(
    "/roles/{role_id}",
    response_model=RoleResponse,
    summary="Update a role",
    description="Update name and/or serviceOpIds. A new serviceOpIds list is validated first.",
)
async def update_role(
    request: Request,
    role_id: str,
    update_data: RoleUpdateRequest,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = RoleRegistry(session, audit)
        return await registry.update(role_id, update_data)


@router.delete("/roles/{role_id}", response_model=DeleteResponse, summary="Delete a role")
async def delete_role(
    request: Request,
    role_id: str,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = RoleRegistry(session, audit)
        return await registry.delete(role_id)
