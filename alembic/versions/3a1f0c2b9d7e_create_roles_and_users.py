"""create_roles_and_users

Revision ID: 3a1f0c2b9d7e
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

from nova_users.core.config import get_settings

# revision identifiers, used by Alembic.
revision: str = "3a1f0c2b9d7e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

settings = get_settings()
ROLES_TABLE = settings.table_name("roles")
USERS_TABLE = settings.table_name("users")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        ROLES_TABLE,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=40), nullable=False, comment="Role display name"),
        sa.Column(
            "slug",
            sa.String(length=40),
            nullable=False,
            comment="Unique URL-safe identifier",
        ),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f(f"ix_{ROLES_TABLE}_slug"), ROLES_TABLE, ["slug"], unique=True)

    op.create_table(
        USERS_TABLE,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["role_id"], [f"{ROLES_TABLE}.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index(op.f(f"ix_{USERS_TABLE}_role_id"), USERS_TABLE, ["role_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f(f"ix_{USERS_TABLE}_role_id"), table_name=USERS_TABLE)
    op.drop_table(USERS_TABLE)
    op.drop_index(op.f(f"ix_{ROLES_TABLE}_slug"), table_name=ROLES_TABLE)
    op.drop_table(ROLES_TABLE)
