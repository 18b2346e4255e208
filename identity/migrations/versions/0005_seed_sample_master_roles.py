"""Standard sample roles for all environments

Revision ID: 0005_seed_sample_master_roles
Revises: 0004_create_sample_tables
Create Date: 2026-01-07

"""
from alembic import op

from identity.migrations import seed

revision: str = "0005_seed_sample_master_roles"
down_revision: str | None = "0004_create_sample_tables"
branch_labels: str | None = None
depends_on: str | None = None

MASTER_ROLES = [
    ("ROLE_ADMIN", "Administrator with full access"),
    ("ROLE_USER", "Standard user with limited access"),
    ("ROLE_MANAGER", "Manager with team management permissions"),
    ("ROLE_DEVELOPER", "Developer with extended permissions for testing"),
]


def upgrade() -> None:
    seed.ensure_roles(op.get_bind(), seed.sample_roles, MASTER_ROLES)


def downgrade() -> None:
    seed.delete_roles(op.get_bind(), seed.sample_roles, [name for name, _ in MASTER_ROLES])
