"""Default sample roles for development

Revision ID: 0102_seed_dev_sample_roles
Revises: 0101_seed_dev_base
Create Date: 2026-01-07

"""
from alembic import op

from identity.migrations import seed

revision: str = "0102_seed_dev_sample_roles"
down_revision: str | None = "0101_seed_dev_base"
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    seed.ensure_roles(op.get_bind(), seed.sample_roles, [
        ("ROLE_ADMIN", "Administrator with full access"),
        ("ROLE_USER", "Standard user with limited access"),
        ("ROLE_DEVELOPER", "Developer with extended permissions for testing"),
    ])


def downgrade() -> None:
    # 모든 역할이 0005(공통 샘플 역할)에도 속하므로 지울 행이 없습니다.
    pass
