# tests/domain/test_domain.py
import uuid
from datetime import datetime, timezone

import pytest

from identity.database import models
from identity.domain import Role, User
from identity.mappers import role_mapper, user_mapper

# ===================================================================
#  도메인 객체 테스트
# ===================================================================
class TestRole:
    def test_fields_default_to_none(self):
        """지정하지 않은 필드는 None으로 채워지는지 테스트합니다."""
        role = Role(name="ADMIN")

        assert role.id is None
        assert role.description is None
        assert role.created_by is None

    def test_equality_uses_id_only(self):
        """id가 같으면 다른 필드가 달라도 같은 역할로 취급하는지 테스트합니다."""
        role_id = uuid.uuid4()

        assert Role(id=role_id, name="ADMIN") == Role(id=role_id, name="RENAMED")
        assert Role(id=uuid.uuid4(), name="ADMIN") != Role(id=uuid.uuid4(), name="ADMIN")
        assert len({Role(id=role_id, name="a"), Role(id=role_id, name="b")}) == 1

    def test_repr_lists_fields(self):
        role = Role(name="ADMIN", description="Administrator")

        assert "ADMIN" in repr(role)
        assert "Administrator" in repr(role)


class TestUser:
    def test_equality_uses_id_only(self):
        user_id = uuid.uuid4()

        assert User(id=user_id, username="a") == User(id=user_id, username="b")
        assert User(id=user_id) != Role(id=user_id)

    def test_has_no_password_hash(self):
        """도메인 User는 비밀번호 해시 필드를 갖지 않습니다."""
        assert not hasattr(User(), "password_hash")

# ===================================================================
#  매퍼(Mapper) 테스트
# ===================================================================
class TestRoleMapper:
    def test_to_domain_copies_all_fields(self):
        # === Arrange ===
        now = datetime.now(timezone.utc)
        entity = models.RoleEntity(
            id=uuid.uuid4(), name="ADMIN", description="Administrator",
            created_at=now, updated_at=now, created_by="system", updated_by="system",
        )

        # === Act ===
        role = role_mapper.to_domain(entity)

        # === Assert ===
        assert role.id == entity.id
        assert role.name == "ADMIN"
        assert role.description == "Administrator"
        assert role.created_at == now
        assert role.updated_by == "system"

    def test_to_domain_none_returns_none(self):
        assert role_mapper.to_domain(None) is None

    def test_to_entity_rejects_none(self):
        with pytest.raises(ValueError):
            role_mapper.to_entity(None)

    def test_to_entity_leaves_unset_fields_for_defaults(self):
        """값이 없는 필드는 엔티티에 설정하지 않아 컬럼 기본값이 적용되게 합니다."""
        entity = role_mapper.to_entity(Role(name="USER", created_by="system"))

        assert entity.name == "USER"
        assert entity.created_by == "system"
        assert entity.id is None
        assert entity.created_at is None


class TestUserMapper:
    def test_to_domain_collects_role_ids_and_hides_password(self):
        # === Arrange ===
        user_id, role_a, role_b = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        entity = models.UserEntity(
            id=user_id, username="admin", email="admin@dev.local", password_hash="secret",
            enabled=True, account_locked=False, account_expired=False, credentials_expired=False,
        )
        entity.role_assignments = [
            models.UserRoleEntity(user_id=user_id, role_id=role_a),
            models.UserRoleEntity(user_id=user_id, role_id=role_b),
        ]

        # === Act ===
        user = user_mapper.to_domain(entity)

        # === Assert ===
        assert user.id == user_id
        assert user.username == "admin"
        assert user.enabled is True
        assert user.account_locked is False
        assert user.role_ids == {role_a, role_b}
        assert "secret" not in repr(user)

    def test_to_entity_builds_assignments_only_with_id(self):
        role_id = uuid.uuid4()

        without_id = user_mapper.to_entity(User(username="a", role_ids={role_id}))
        with_id = user_mapper.to_entity(User(id=uuid.uuid4(), username="b", role_ids={role_id}))

        assert without_id.role_assignments == []
        assert [a.role_id for a in with_id.role_assignments] == [role_id]

    def test_to_entity_none_returns_none(self):
        assert user_mapper.to_entity(None) is None
