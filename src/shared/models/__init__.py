"""Shared data models for the RBAC registry.

All models follow these conventions:
- IDs: opaque strings (UUID v4 text when generated here)
- Attribute names: lowercase snake_case, with camelCase wire aliases
"""

# Base
from .base import RegistryBaseModel

# Common types
from .common import (
    DeleteResponse,
    ErrorResponse,
    PagedLinks,
    PagedResponse,
)

__all__ = [
    "RegistryBaseModel",
    "DeleteResponse",
    "ErrorResponse",
    "PagedLinks",
    "PagedResponse",
]
