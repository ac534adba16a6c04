"""Mixins and helpers for SQLAlchemy models."""

import secrets

from sqlalchemy import Column, DateTime, String, func

OBJECT_ID_LENGTH = 24


def new_object_id() -> str:
    """Generate a 24-character hexadecimal identifier."""
    return secrets.token_hex(OBJECT_ID_LENGTH // 2)


class ObjectIdMixin:
    """Mixin for a string primary key shaped like a document-store ObjectId."""

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
