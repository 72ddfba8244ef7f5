"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- Service-specific settings classes
- Cached settings access via get_settings()
"""

from .settings import (
    AuditSettings,
    DatabaseSettings,
    Environment,
    LogFormat,
    LogLevel,
    RbacRegistrySettings,
    Settings,
    get_settings,
)

__all__ = [
    # Main settings
    "Settings",
    "get_settings",
    # Enums
    "Environment",
    "LogLevel",
    "LogFormat",
    # Component settings
    "DatabaseSettings",
    "AuditSettings",
    # Service-specific settings
    "RbacRegistrySettings",
]
