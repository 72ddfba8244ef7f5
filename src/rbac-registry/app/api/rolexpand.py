"""Role expansion endpoint.

Called by consuming systems at login time to turn a user's roles into the
operation identifiers they may perform.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from ..dependencies import get_audit_client, require_api_key
from ..schemas.role import RoleExpandRequest
from ..services.audit import AuditClient
from ..services.role_registry import RoleRegistry

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post(
    "/rolexpand",
    response_model=list[str],
    status_code=status.HTTP_201_CREATED,
    summary="Expand roles into operation identifiers",
    description=(
        "Return the serviceOpIds of the given roles concatenated in request order. "
        "Duplicates are not removed."
    ),
)
async def expand_roles(
    request: Request,
    expand_data: RoleExpandRequest,
    audit: AuditClient = Depends(get_audit_client),
):
    async with request.app.state.session_factory() as session:
        registry = RoleRegistry(session, audit)
        return await registry.expand(expand_data.role_ids)
