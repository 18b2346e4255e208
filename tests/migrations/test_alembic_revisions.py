# tests/migrations/test_alembic_revisions.py
import pytest
from alembic import command
from alembic.script import ScriptDirectory
from sqlalchemy import inspect

from identity.database import models
from identity.database.db_init import alembic_config, current_revisions, rollback_db

DEV_HEAD = "0103_seed_dev_sample_users"
UAT_HEAD = "0203_seed_uat_sample_users"
PROD_HEAD = "0302_seed_prod_sample_roles"
SHARED_HEAD = "0005_seed_sample_master_roles"

# ===================================================================
#  Helper
# ===================================================================

def _names(session_factory, model=models.RoleEntity):
    with session_factory() as db:
        return sorted(name for (name,) in db.query(model.name).all())

def _sample_usernames(session_factory):
    with session_factory() as db:
        return sorted(name for (name,) in db.query(models.SampleUser.username).all())

# ===================================================================
#  리비전 그래프 테스트
# ===================================================================
def test_each_environment_is_a_labelled_branch():
    """공통 스키마 뒤로 dev/uat/prod 브랜치가 갈라지는지 테스트합니다."""
    script = ScriptDirectory.from_config(alembic_config("sqlite://"))

    assert set(script.get_heads()) == {DEV_HEAD, UAT_HEAD, PROD_HEAD}
    assert script.get_revision("dev@head").revision == DEV_HEAD
    assert script.get_revision("uat@head").revision == UAT_HEAD
    assert script.get_revision("prod@head").revision == PROD_HEAD
    assert script.get_revision("0101_seed_dev_base").down_revision == SHARED_HEAD

# ===================================================================
#  업그레이드(upgrade) 테스트
# ===================================================================
class TestUpgrade:
    def test_dev_creates_schema_and_seeds(self, migrate, session_factory, engine):
        """dev 컨텍스트 적용 시 스키마와 기본/샘플 데이터가 생성되는지 테스트합니다."""
        # === Act ===
        revisions = migrate("dev")

        # === Assert ===
        assert revisions == {DEV_HEAD}
        tables = set(inspect(engine).get_table_names())
        assert {"roles", "users", "user_roles", "sample_users", "sample_roles",
                "sample_user_roles", "alembic_version"} <= tables
        assert _names(session_factory) == ["ADMIN", "USER"]
        assert _names(session_factory, models.SampleRole) == [
            "ROLE_ADMIN", "ROLE_DEVELOPER", "ROLE_MANAGER", "ROLE_USER",
        ]
        assert _sample_usernames(session_factory) == ["dev_admin", "dev_user", "test_user"]

    def test_seeded_admin_holds_admin_role(self, migrate, session_factory):
        migrate("dev")

        with session_factory() as db:
            admin = db.query(models.UserEntity).filter(models.UserEntity.username == "admin").one()
            assert admin.email == "admin@dev.local"
            assert admin.enabled is True
            assert admin.account_locked is False
            assert [a.role.name for a in admin.role_assignments] == ["ADMIN"]

    def test_seeded_ids_are_time_ordered(self, migrate, session_factory):
        migrate("dev")

        with session_factory() as db:
            assert all(role.id.version == 7 for role in db.query(models.RoleEntity).all())

    def test_upgrade_twice_is_a_noop(self, migrate, session_factory):
        """두 번 적용해도 리비전과 데이터가 그대로인지 테스트합니다."""
        migrate("dev")

        assert migrate("dev") == {DEV_HEAD}
        assert _names(session_factory) == ["ADMIN", "USER"]

    def test_rerunning_seed_revisions_does_not_duplicate_rows(self, migrate, database_url, session_factory):
        """버전 기록을 공통 스키마로 되돌린 뒤 시드 리비전을 다시 실행해도 중복 행이 생기지 않습니다."""
        # === Arrange ===
        migrate("dev")
        command.stamp(alembic_config(database_url), SHARED_HEAD, purge=True)

        # === Act ===
        migrate("dev")

        # === Assert ===
        assert _names(session_factory) == ["ADMIN", "USER"]
        assert _sample_usernames(session_factory) == ["dev_admin", "dev_user", "test_user"]
        with session_factory() as db:
            assert db.query(models.UserRoleEntity).count() == 1
            assert db.query(models.SampleUserRole).count() == 3

    def test_prod_skips_dev_and_uat_data(self, migrate, session_factory):
        # === Act ===
        assert migrate("prod") == {PROD_HEAD}

        # === Assert ===
        assert "ROLE_TESTER" not in _names(session_factory, models.SampleRole)
        assert _sample_usernames(session_factory) == []
        with session_factory() as db:
            admin = db.query(models.UserEntity).filter(models.UserEntity.username == "admin").one()
            assert admin.email == "admin@company.com"

    def test_uat_adds_tester_role_and_users(self, migrate, session_factory):
        migrate("uat")

        assert "ROLE_TESTER" in _names(session_factory, models.SampleRole)
        assert _sample_usernames(session_factory) == ["uat_admin", "uat_tester"]
        with session_factory() as db:
            tester = db.query(models.SampleUser).filter(models.SampleUser.username == "uat_tester").one()
            assert [a.role.name for a in tester.role_associations] == ["ROLE_TESTER"]

    def test_all_branches(self, database_url, session_factory):
        """모든 환경 브랜치를 적용해도 공유되는 기본 역할은 한 번만 생성됩니다."""
        command.upgrade(alembic_config(database_url), "heads")

        assert current_revisions(database_url) == {DEV_HEAD, UAT_HEAD, PROD_HEAD}
        assert _names(session_factory) == ["ADMIN", "USER"]
        assert _sample_usernames(session_factory) == ["dev_admin", "dev_user", "test_user", "uat_admin", "uat_tester"]

    def test_second_environment_on_same_database(self, migrate):
        migrate("prod")

        assert migrate("dev") == {PROD_HEAD, DEV_HEAD}

    def test_existing_sample_user_marks_revision_ran(self, migrate, session_factory):
        """dev_admin이 이미 있으면 샘플 사용자 리비전은 아무것도 넣지 않고 적용된 것으로만 기록됩니다."""
        # === Arrange ===
        # 시나리오: 스키마가 준비된 상태에서 누군가 dev_admin을 직접 넣어 둠
        migrate("prod")
        with session_factory() as db:
            db.add(models.SampleUser(username="dev_admin", email="manual@dev.local", password_hash="!"))
            db.commit()

        # === Act ===
        revisions = migrate("dev")

        # === Assert ===
        assert DEV_HEAD in revisions
        assert _sample_usernames(session_factory) == ["dev_admin"]
        with session_factory() as db:
            assert db.query(models.SampleUserRole).count() == 0

# ===================================================================
#  롤백(downgrade) 테스트
# ===================================================================
class TestRollback:
    def test_rollback_reverts_latest_revisions(self, migrate, database_url, session_factory):
        # === Arrange ===
        migrate("dev")

        # === Act ===
        revisions = rollback_db(2, context="dev", database_url=database_url)

        # === Assert ===
        assert revisions == {"0101_seed_dev_base"}
        assert _sample_usernames(session_factory) == []
        # dev 샘플 역할 리비전의 downgrade는 공통 샘플 역할을 지우지 않음
        assert "ROLE_DEVELOPER" in _names(session_factory, models.SampleRole)

    def test_rollback_then_upgrade_restores_data(self, migrate, database_url, session_factory):
        migrate("dev")
        rollback_db(1, context="dev", database_url=database_url)

        assert migrate("dev") == {DEV_HEAD}
        assert _sample_usernames(session_factory) == ["dev_admin", "dev_user", "test_user"]

    @pytest.mark.parametrize("steps", [0, -1])
    def test_rollback_rejects_non_positive_steps(self, migrate, database_url, session_factory, steps):
        """되돌릴 개수가 1보다 작으면 아무것도 되돌리지 않고 ValueError가 발생합니다."""
        # === Arrange ===
        migrate("dev")

        # === Act & Assert ===
        with pytest.raises(ValueError):
            rollback_db(steps, context="dev", database_url=database_url)
        assert current_revisions(database_url) == {DEV_HEAD}
        assert _names(session_factory) == ["ADMIN", "USER"]
