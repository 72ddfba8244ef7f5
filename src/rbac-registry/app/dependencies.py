"""Request dependencies shared by the API routers."""

from __future__ import annotations

import secrets

from fastapi import Header, Request

from shared.observability import get_logger

from .services.audit import AuditClient
from .services.exceptions import ApiKeyInvalidError

logger = get_logger(__name__)


async def require_api_key(
    request: Request,
    x_api_key: str | None = Header(None, alias="x-api-key"),
) -> None:
    """Reject requests whose x-api-key header does not match RBAC_API_KEY.

    An unset RBAC_API_KEY refuses every request.
    """
    expected = request.app.state.settings.rbac_api_key
    if not expected or not x_api_key or not secrets.compare_digest(x_api_key, expected):
        logger.warning("Rejected request with invalid API key", path=request.url.path)
        raise ApiKeyInvalidError("Access denied. RBAC API key is invalid.")


def get_audit_client(request: Request) -> AuditClient:
    return request.app.state.audit
