"""Request/Response schemas for the RBAC registry API."""

from .role import (
    ROLE_NAME_MAX_LENGTH,
    ROLE_NAME_MIN_LENGTH,
    RoleCreateRequest,
    RoleExpandRequest,
    RoleResponse,
    RoleUpdateRequest,
)
from .service import (
    SERVICE_NAME_MAX_LENGTH,
    SERVICE_NAME_MIN_LENGTH,
    Operation,
    OperationInput,
    OperationRename,
    ServiceCreateRequest,
    ServiceOperationsAddRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)

__all__ = [
    "Operation",
    "OperationInput",
    "OperationRename",
    "ServiceCreateRequest",
    "ServiceOperationsAddRequest",
    "ServiceUpdateRequest",
    "ServiceResponse",
    "SERVICE_NAME_MIN_LENGTH",
    "SERVICE_NAME_MAX_LENGTH",
    "RoleCreateRequest",
    "RoleUpdateRequest",
    "RoleResponse",
    "RoleExpandRequest",
    "ROLE_NAME_MIN_LENGTH",
    "ROLE_NAME_MAX_LENGTH",
]
