"""Service and operation request/response schemas."""

from __future__ import annotations

from pydantic import Field

from shared.models import RegistryBaseModel

SERVICE_NAME_MIN_LENGTH = 4
SERVICE_NAME_MAX_LENGTH = 30


class OperationInput(RegistryBaseModel):
    """New operation; its identifier is assigned on creation."""

    name: str = Field(..., description="Operation display name", examples=["read-invoices"])


class OperationRename(RegistryBaseModel):
    """Existing operation to rename, matched by identifier."""

    id: str = Field(..., alias="_id", description="Identifier of an existing operation")
    name: str = Field(..., description="New display name")


class Operation(RegistryBaseModel):
    """Operation owned by a service."""

    id: str = Field(..., alias="_id")
    name: str


class ServiceCreateRequest(RegistryBaseModel):
    """Request to register a new service."""

    name: str = Field(..., description="Service name (4-30 characters)", examples=["Billing"])
    operations: list[OperationInput] = Field(
        default_factory=list, description="Initial operations of the service"
    )


class ServiceOperationsAddRequest(RegistryBaseModel):
    """Request to append operations to an existing service."""

    id: str = Field(..., alias="_id", description="Identifier of the service to extend")
    operations: list[OperationInput] = Field(default_factory=list)


class ServiceUpdateRequest(RegistryBaseModel):
    """Request to rename a service and, optionally, some of its operations.

    Operations whose identifier does not match an existing operation are
    ignored; this request never adds operations.
    """

    name: str = Field(..., description="Service name (4-30 characters)")
    operations: list[OperationRename] = Field(default_factory=list)


class ServiceResponse(RegistryBaseModel):
    """Service response model."""

    id: str = Field(..., alias="_id")
    name: str
    operations: list[Operation]
