"""API routers for the RBAC registry."""

from . import health, roles, rolexpand, services

__all__ = ["health", "roles", "rolexpand", "services"]
