"""Seed base roles and the prod admin user

Revision ID: 0301_seed_prod_base
Revises: 0005_seed_sample_master_roles
Create Date: 2026-01-07

"""
from alembic import op

from identity.migrations import seed

revision: str = "0301_seed_prod_base"
down_revision: str | None = "0005_seed_sample_master_roles"
branch_labels: tuple[str, ...] | None = ("prod",)
depends_on: str | None = None


def upgrade() -> None:
    seed.ensure_base_data(op.get_bind(), admin_email="admin@company.com")


def downgrade() -> None:
    seed.delete_base_data(op.get_bind())
