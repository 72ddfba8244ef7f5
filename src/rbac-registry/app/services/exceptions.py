"""Registry error taxonomy.

Every registry operation either returns a value or raises exactly one of
these. The API layer renders them all with the same body shape.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for errors surfaced to API callers."""

    error_code = "INTERNAL_ERROR"
    status_code = 500


class ValidationError(RegistryError):
    """Raised when input violates shape or bounds."""

    error_code = "VALIDATION_FAILED"
    status_code = 400


class ReferenceValidationError(ValidationError):
    """Raised when a role references an operation no service owns."""

    error_code = "REFERENCE_VALIDATION_FAILED"


class NotFoundError(RegistryError):
    """Raised when an identifier does not resolve."""

    error_code = "NOT_FOUND"
    status_code = 404


class ServiceNotFoundError(NotFoundError):
    """Raised when a service is not found."""

    error_code = "SERVICE_NOT_FOUND"


class RoleNotFoundError(NotFoundError):
    """Raised when a role is not found."""

    error_code = "ROLE_NOT_FOUND"


class PayloadTooLargeError(RegistryError):
    """Raised when a page larger than the allowed maximum is requested."""

    error_code = "PAYLOAD_TOO_LARGE"
    status_code = 413


class AuditUnavailableError(RegistryError):
    """Raised when auditing is enabled but the audit service cannot be reached.

    The mutation that triggered the audit call has already been committed.
    """

    error_code = "AUDIT_UNAVAILABLE"
    status_code = 424


class ApiKeyInvalidError(RegistryError):
    """Raised when the x-api-key header is missing or wrong."""

    error_code = "API_KEY_INVALID"
    status_code = 401
