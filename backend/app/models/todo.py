"""
Todo API — Todo SQLAlchemy Model
=================================

What:  ORM model representing the `todo` table.
How:   Inherits from the shared DeclarativeBase; the gateway is its only user.

Table Design:
    - id: UUID primary key generated by the store (gen_random_uuid()),
      never supplied by clients
    - title: UNIQUE; uniqueness is enforced here, by the store, and surfaced
      to the service as a constraint violation
    - category / published: nullable columns with defaults ("" / false);
      the API never renders them as null
    - created_at: set once on insert by the store (CURRENT_TIMESTAMP)
    - updated_at: replaced by the gateway on every successful update

Column types are the dialect-neutral Uuid/DateTime so the same model maps
onto PostgreSQL in production and SQLite in the test suite.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Text, Uuid, false, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(Base):
    """
    A single todo/note entry.

    Query Patterns:
        - List: SELECT ... ORDER BY id LIMIT :limit OFFSET :offset
        - Get / update / delete: WHERE id = :uuid (primary key lookup)
    """

    __tablename__ = "todo"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )

    title: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    category: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default="",
    )

    published: Mapped[Optional[bool]] = mapped_column(
        Boolean,
        nullable=True,
        server_default=false(),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, title='{self.title}', published={self.published})>"
