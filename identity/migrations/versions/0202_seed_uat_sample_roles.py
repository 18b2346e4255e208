"""Default sample roles for UAT

Revision ID: 0202_seed_uat_sample_roles
Revises: 0201_seed_uat_base
Create Date: 2026-01-07

"""
from alembic import op

from identity.migrations import seed

revision: str = "0202_seed_uat_sample_roles"
down_revision: str | None = "0201_seed_uat_base"
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    seed.ensure_roles(op.get_bind(), seed.sample_roles, [
        ("ROLE_ADMIN", "Administrator with full access"),
        ("ROLE_USER", "Standard user with limited access"),
        ("ROLE_TESTER", "QA tester with testing permissions"),
    ])


def downgrade() -> None:
    seed.delete_roles(op.get_bind(), seed.sample_roles, ["ROLE_TESTER"])
