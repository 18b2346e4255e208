"""Sample users for development

Revision ID: 0103_seed_dev_sample_users
Revises: 0102_seed_dev_sample_roles
Create Date: 2026-01-07

"""
from alembic import op

from identity.logger import get_logger
from identity.migrations import seed

revision: str = "0103_seed_dev_sample_users"
down_revision: str | None = "0102_seed_dev_sample_roles"
branch_labels: str | None = None
depends_on: str | None = None

log = get_logger(__name__)

DEV_USERS = [
    {"username": "dev_admin", "email": "admin@dev.local", "first_name": "Dev", "last_name": "Admin"},
    {"username": "dev_user", "email": "user@dev.local", "first_name": "Dev", "last_name": "User"},
    {"username": "test_user", "email": "test@dev.local", "first_name": "Test", "last_name": "User"},
]


def upgrade() -> None:
    bind = op.get_bind()
    # dev_admin이 이미 있으면 아무것도 삽입하지 않고 적용된 것으로만 기록합니다. (MARK_RAN)
    if seed.row_exists(bind, seed.sample_users, "username", "dev_admin"):
        log.info("revision_marked_ran", revision=revision, reason="dev_admin exists")
        return

    seed.ensure_users(bind, seed.sample_users, DEV_USERS)
    seed.ensure_assignments(bind, seed.sample_user_roles, seed.sample_users, seed.sample_roles, [
        ("dev_admin", "ROLE_ADMIN"),
        ("dev_user", "ROLE_USER"),
        ("test_user", "ROLE_USER"),
    ])


def downgrade() -> None:
    seed.delete_users(op.get_bind(), seed.sample_user_roles, seed.sample_users, [u["username"] for u in DEV_USERS])
