"""RBAC Registry Shared Package.

This package contains the components shared by the registry service:
- models: Pydantic data models
- database: SQLAlchemy ORM models
- config: Configuration management
- observability: Structured logging
"""

__version__ = "0.1.0"
