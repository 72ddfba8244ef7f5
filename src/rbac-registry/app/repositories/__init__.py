"""Data access repositories."""

from .role_repository import RoleRepository
from .service_repository import ServiceRepository

__all__ = ["RoleRepository", "ServiceRepository"]
