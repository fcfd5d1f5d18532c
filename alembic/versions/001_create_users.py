"""Create users table.

Revision ID: 001_create_users
Revises: None
Create Date: 2026-10-19

email is indexed but not unique: uniqueness is enforced by the service at
creation time only, and updates may reuse an existing email.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("birth_date", sa.Date, nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("phone_number", sa.String(50), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"])
    op.create_index("ix_users_birth_date", "users", ["birth_date"])


def downgrade() -> None:
    op.drop_index("ix_users_birth_date", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
