"""Sample users for UAT

Revision ID: 0203_seed_uat_sample_users
Revises: 0202_seed_uat_sample_roles
Create Date: 2026-01-07

"""
from alembic import op

from identity.logger import get_logger
from identity.migrations import seed

revision: str = "0203_seed_uat_sample_users"
down_revision: str | None = "0202_seed_uat_sample_roles"
branch_labels: str | None = None
depends_on: str | None = None

log = get_logger(__name__)

UAT_USERS = [
    {"username": "uat_admin", "email": "admin@uat.ecm.local", "first_name": "UAT", "last_name": "Admin"},
    {"username": "uat_tester", "email": "tester@uat.ecm.local", "first_name": "UAT", "last_name": "Tester"},
]


def upgrade() -> None:
    bind = op.get_bind()
    if seed.row_exists(bind, seed.sample_users, "username", "uat_admin"):
        log.info("revision_marked_ran", revision=revision, reason="uat_admin exists")
        return

    seed.ensure_users(bind, seed.sample_users, UAT_USERS)
    seed.ensure_assignments(bind, seed.sample_user_roles, seed.sample_users, seed.sample_roles, [
        ("uat_admin", "ROLE_ADMIN"),
        ("uat_tester", "ROLE_TESTER"),
    ])


def downgrade() -> None:
    seed.delete_users(op.get_bind(), seed.sample_user_roles, seed.sample_users, [u["username"] for u in UAT_USERS])
