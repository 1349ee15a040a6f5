"""create users and wallets tables

Revision ID: 3f9c2a7b1d04
Revises: 
Create Date: 2026-10-17 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c2a7b1d04"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("phone_number", sa.String(length=32), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_users_phone_number", "users", ["phone_number"], unique=True)

    op.create_table(
        "wallets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("account_number", sa.String(length=64), nullable=False),
        sa.Column("account_scheme", sa.String(length=20), nullable=False),
        sa.Column("owner", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("name", name="uq_wallets_name"),
        sa.UniqueConstraint("account_number", name="uq_wallets_account_number"),
    )
    op.create_index("ix_wallets_owner", "wallets", ["owner"])
    op.create_index("ix_wallets_created_at", "wallets", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_wallets_created_at", table_name="wallets")
    op.drop_index("ix_wallets_owner", table_name="wallets")
    op.drop_table("wallets")
    op.drop_index("ix_users_phone_number", table_name="users")
    op.drop_table("users")
