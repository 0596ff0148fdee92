"""SQLAlchemy model for the users table.

Only the columns needed to relate users to their role live here; user
management belongs to another module.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nova_users.core.config import get_settings
from nova_users.infrastructure.persistence.database import Base

_settings = get_settings()


class UserModel(Base):
    """SQLAlchemy model for the users table.

    Attributes:
        id: Auto-incrementing primary key.
        username: Unique login name.
        email: User's email address.
        role_id: Foreign key to the roles table, cleared when the role is deleted.
        created_at: Timestamp when the user was created.
    """

    __tablename__ = _settings.table_name("users")

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    role_id: Mapped[int | None] = mapped_column(
        ForeignKey(f"{_settings.table_name('roles')}.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    role: Mapped["RoleModel | None"] = relationship(  # noqa: F821
        "RoleModel",
        back_populates="users",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
