"""Business logic services."""

from .audit import AuditClient, HttpMethod
from .exceptions import (
    ApiKeyInvalidError,
    AuditUnavailableError,
    NotFoundError,
    PayloadTooLargeError,
    ReferenceValidationError,
    RegistryError,
    RoleNotFoundError,
    ServiceNotFoundError,
    ValidationError,
)
from .pager import paginate
from .reference_validator import ReferenceValidator
from .role_expander import RoleExpander
from .role_registry import RoleRegistry
from .service_registry import ServiceRegistry

__all__ = [
    "ApiKeyInvalidError",
    "AuditClient",
    "AuditUnavailableError",
    "HttpMethod",
    "NotFoundError",
    "PayloadTooLargeError",
    "ReferenceValidationError",
    "ReferenceValidator",
    "RegistryError",
    "RoleExpander",
    "RoleNotFoundError",
    "RoleRegistry",
    "ServiceNotFoundError",
    "ServiceRegistry",
    "ValidationError",
    "paginate",
]
