"""SQLAlchemy model for the roles table."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nova_users.core.config import get_settings
from nova_users.infrastructure.persistence.database import Base


class RoleModel(Base):
    """SQLAlchemy model for the roles table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Display name.
        slug: URL-safe identifier, unique across all roles.
        description: What the role is for.
        created_at: Timestamp when the role was created.
        updated_at: Timestamp when the role was last updated.
    """

    __tablename__ = get_settings().table_name("roles")

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(40),
        nullable=False,
        comment="Role display name",
    )
    slug: Mapped[str] = mapped_column(
        String(40),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique URL-safe identifier",
    )
    description: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    users: Mapped[list["UserModel"]] = relationship(  # noqa: F821
        "UserModel",
        back_populates="role",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, slug={self.slug})>"
