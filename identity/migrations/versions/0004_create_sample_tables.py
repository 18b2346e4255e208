"""Create sample_users, sample_roles and sample_user_roles tables

Revision ID: 0004_create_sample_tables
Revises: 0003_create_user_roles
Create Date: 2026-01-07

"""
from alembic import op
import sqlalchemy as sa

revision: str = "0004_create_sample_tables"
down_revision: str | None = "0003_create_user_roles"
branch_labels: str | None = None
depends_on: str | None = None


def _audit_columns():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(100)),
        sa.Column("updated_by", sa.String(100)),
    ]


def upgrade() -> None:
    # ------------------------------
    # sample_users
    # ------------------------------
    op.create_table(
        "sample_users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100)),
        sa.Column("last_name", sa.String(100)),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("account_locked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("account_expired", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("credentials_expired", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_audit_columns(),
    )

    # ------------------------------
    # sample_roles
    # ------------------------------
    op.create_table(
        "sample_roles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
        sa.Column("description", sa.String(255)),
        *_audit_columns(),
    )

    # ------------------------------
    # sample_user_roles
    # ------------------------------
    op.create_table(
        "sample_user_roles",
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("sample_users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("role_id", sa.Integer(), sa.ForeignKey("sample_roles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("assigned_by", sa.String(100)),
        sa.PrimaryKeyConstraint("user_id", "role_id"),
    )


def downgrade() -> None:
    op.drop_table("sample_user_roles")
    op.drop_table("sample_roles")
    op.drop_table("sample_users")
