"""SQLAlchemy ORM models.

Services keep their operations as a nested JSON document; roles keep the
operation identifiers they grant as a JSON list. There is no foreign key
between the two tables.
"""

from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from .base import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


def new_identifier() -> str:
    """Generate an opaque identifier for services, operations and roles."""
    return str(uuid4())


class ServiceModel(Base):
    """Registered service with its nested operations.

    ``operations`` holds ``{"_id": str, "name": str}`` entries in insertion order.
    """

    __tablename__ = "services"
    __table_args__ = (Index("idx_services_name", "name"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_identifier)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    operations: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONDocument, nullable=False, default=list
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class RoleModel(Base):
    """Named bundle of operation identifiers."""

    __tablename__ = "roles"
    __table_args__ = (Index("idx_roles_name", "name"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_identifier)
    name: Mapped[str] = mapped_column(String(40), nullable=False)
    service_op_ids: Mapped[list[str]] = mapped_column(JSONDocument, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
