# tests/test_end_to_end.py
import pytest
from alembic import command

from identity.container import build_container
from identity.database.db_init import alembic_config
from identity.repositories.sqlalchemy import SqlalchemyRoleRepository
from identity.services.exceptions import RoleAlreadyExistsError, RoleNotFoundError, UserNotFoundError


@pytest.fixture
def container(migrate, db_session):
    """dev 리비전이 적용된 DB 위에 서비스들을 조립합니다."""
    migrate("dev")
    return build_container(db_session)


@pytest.fixture
def empty_container(database_url, db_session):
    """스키마만 있고 기본 역할(ADMIN/USER)은 없는 DB 위에 서비스들을 조립합니다."""
    command.upgrade(alembic_config(database_url), "0005_seed_sample_master_roles")
    return build_container(db_session)

# ===================================================================
#  역할 생성/조회
# ===================================================================
def test_seeded_roles_and_created_role(container):
    """ADMIN/USER 시드 이후 MANAGER를 만들면 조회와 이름 변환에 나타나는지 테스트합니다."""
    # === Act ===
    manager = container.role_service.create_role("MANAGER", "Team manager")
    roles = container.role_service.get_all_roles()

    # === Assert ===
    assert len(roles) == 3
    assert [r.name for r in roles] == ["ADMIN", "USER", "MANAGER"]
    assert roles[-1] == manager
    assert manager.id is not None
    assert manager.created_at is not None and manager.updated_at is not None
    assert manager.created_by == "system"
    assert container.role_lookup.find_role_id_by_name("MANAGER") == manager.id
    assert container.role_lookup.find_role_names_by_ids({manager.id}) == {"MANAGER"}


def test_many_created_roles_are_all_listed_in_order(container):
    """여러 역할을 만들면 모두 고유한 id로, 만든 순서대로 조회되는지 테스트합니다."""
    # === Arrange ===
    names = [f"TEAM_{i}" for i in range(10)]

    # === Act ===
    created = [container.role_service.create_role(name, f"{name} members") for name in names]
    roles = container.role_service.get_all_roles()

    # === Assert ===
    assert [r.name for r in roles][2:] == names
    assert len({r.id for r in roles}) == len(roles) == 12
    assert [r.id for r in roles][2:] == [r.id for r in created]


def test_role_id_is_absent_until_created(empty_container):
    """역할을 만들기 전에는 이름으로 찾을 수 없고, 만든 뒤에는 그 id를 돌려주는지 테스트합니다."""
    # === Arrange ===
    assert empty_container.role_service.get_all_roles() == []
    assert empty_container.role_lookup.find_role_id_by_name("ADMIN") is None

    # === Act ===
    admin = empty_container.role_service.create_role("ADMIN", "Administrator")

    # === Assert ===
    assert empty_container.role_lookup.find_role_id_by_name("ADMIN") == admin.id
    assert empty_container.role_lookup.find_role_id_by_name("admin") is None


def test_duplicate_role_is_rejected(container):
    with pytest.raises(RoleAlreadyExistsError):
        container.role_service.create_role("ADMIN", "again")

    assert [r.name for r in container.role_service.get_all_roles()].count("ADMIN") == 1


def test_unique_constraint_backs_up_existence_check(container, monkeypatch):
    """존재 확인을 통과하더라도 저장소 유일성 제약이 중복을 막고 같은 예외로 보고되는지 테스트합니다."""
    # 시나리오: 다른 트랜잭션이 확인과 저장 사이에 같은 이름을 먼저 저장한 상황
    monkeypatch.setattr(SqlalchemyRoleRepository, "exists_by_name", lambda self, name: False)

    with pytest.raises(RoleAlreadyExistsError):
        container.role_service.create_role("ADMIN", "racing insert")

    assert [r.name for r in container.role_service.get_all_roles()].count("ADMIN") == 1

# ===================================================================
#  사용자와 역할 연결
# ===================================================================
def test_seeded_admin_role_names(container):
    admin = container.user_service.get_user_by_username("admin")

    assert container.user_service.get_user_role_names(admin.id) == {"ADMIN"}


def test_add_and_remove_role_persist(container):
    """역할 부여/회수가 커밋되어 다시 조회해도 반영되어 있는지 테스트합니다."""
    # === Arrange ===
    admin = container.user_service.get_user_by_username("admin")

    # === Act & Assert ===
    container.user_service.add_role_to_user(admin.id, "USER")
    assert container.user_service.get_user_role_names(admin.id) == {"ADMIN", "USER"}

    container.user_service.remove_role_from_user(admin.id, "ADMIN")
    assert container.user_service.get_user_role_names(admin.id) == {"USER"}


def test_unknown_role_leaves_user_unchanged(container):
    admin = container.user_service.get_user_by_username("admin")

    with pytest.raises(RoleNotFoundError):
        container.user_service.add_role_to_user(admin.id, "GHOST")

    assert container.user_service.get_user_role_names(admin.id) == {"ADMIN"}


def test_update_user_persists_given_fields(container):
    admin = container.user_service.get_user_by_username("admin")

    container.user_service.update_user(admin.id, first_name="Site", account_locked=True)

    reloaded = container.user_service.get_user_by_id(admin.id)
    assert reloaded.first_name == "Site"
    assert reloaded.account_locked is True
    assert reloaded.enabled is True
    assert reloaded.role_ids == admin.role_ids


def test_delete_user_keeps_roles(container):
    """사용자를 삭제하면 역할 연결만 사라지고 역할은 남는지 테스트합니다."""
    admin = container.user_service.get_user_by_username("admin")

    container.user_service.delete_user(admin.id)

    assert container.user_service.get_user_by_id(admin.id) is None
    assert {r.name for r in container.role_service.get_all_roles()} == {"ADMIN", "USER"}
    with pytest.raises(UserNotFoundError):
        container.user_service.delete_user(admin.id)
