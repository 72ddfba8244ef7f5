"""Role request/response schemas."""

from __future__ import annotations

from pydantic import Field

from shared.models import RegistryBaseModel

ROLE_NAME_MIN_LENGTH = 4
ROLE_NAME_MAX_LENGTH = 40


class RoleCreateRequest(RegistryBaseModel):
    """Request to create a role."""

    name: str = Field(..., description="Role name (4-40 characters)", examples=["Power Users"])
    service_op_ids: list[str] = Field(
        default_factory=list,
        alias="serviceOpIds",
        description="Operation identifiers this role is allowed to perform",
    )


class RoleUpdateRequest(RegistryBaseModel):
    """Request to update a role. Omitted fields keep their stored value."""

    name: str | None = Field(None, description="Role name (4-40 characters)")
    service_op_ids: list[str] | None = Field(None, alias="serviceOpIds")


class RoleResponse(RegistryBaseModel):
    """Role response model."""

    id: str = Field(..., alias="_id")
    name: str
    service_op_ids: list[str] = Field(..., alias="serviceOpIds")


class RoleExpandRequest(RegistryBaseModel):
    """Request to expand roles into the operation identifiers they grant."""

    role_ids: list[str] = Field(..., alias="roleIds")
