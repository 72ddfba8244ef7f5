"""Database configuration and models."""

from .base import Base, create_engine, create_session_factory
from .models import RoleModel, ServiceModel, new_identifier

__all__ = [
    # Base
    "Base",
    "create_engine",
    "create_session_factory",
    # Tables
    "ServiceModel",
    "RoleModel",
    "new_identifier",
]
