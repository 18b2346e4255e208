import uuid
from typing import List, Optional, Set

from identity.database import models
from identity.domain import SYSTEM_ACTOR, User
from identity.logger import get_logger
from identity.mappers import user_mapper
from identity.repositories.interfaces import IUserRepository
from identity.services.exceptions import RoleNotFoundError, UserNotFoundError
from identity.shared import RoleLookup

log = get_logger(__name__)


class UserService:
    """사용자 조회·수정·삭제와 사용자-역할 연결 관리를 제공합니다. 사용자 생성과 비밀번호는 다루지 않습니다."""

    def __init__(self, user_repo: IUserRepository, role_lookup: RoleLookup):
        """
        UserService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            role_lookup: 역할 이름과 id를 변환하는 조회 계약. 역할 리포지토리에 직접 의존하지 않습니다.
        """
        self.user_repo = user_repo
        self.role_lookup = role_lookup

    def get_all_users(self) -> List[User]:
        """모든 사용자의 목록을 조회합니다. (비밀번호 해시 제외)"""
        return [user_mapper.to_domain(entity) for entity in self.user_repo.find_all()]

    def get_user_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return user_mapper.to_domain(self.user_repo.find_by_id(user_id))

    def get_user_by_username(self, username: str) -> Optional[User]:
        return user_mapper.to_domain(self.user_repo.find_by_username(username))

    def get_user_by_email(self, email: str) -> Optional[User]:
        return user_mapper.to_domain(self.user_repo.find_by_email(email))

    def update_user(
        self,
        user_id: uuid.UUID,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        enabled: Optional[bool] = None,
        account_locked: Optional[bool] = None,
    ) -> User:
        """
        사용자 정보를 수정합니다. None으로 전달된 필드는 바꾸지 않습니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        changes = {
            "first_name": first_name,
            "last_name": last_name,
            "enabled": enabled,
            "account_locked": account_locked,
        }
        changes = {field: value for field, value in changes.items() if value is not None}

        with self.user_repo.transaction():
            user = self.user_repo.find_by_id(user_id)
            if not user:
                raise UserNotFoundError(f"User not found: {user_id}")

            for field, value in changes.items():
                setattr(user, field, value)
            user.updated_by = SYSTEM_ACTOR

            updated = user_mapper.to_domain(self.user_repo.save(user))

        log.info("user_updated", user_id=str(user_id), fields=sorted(changes))
        return updated

    def delete_user(self, user_id: uuid.UUID) -> None:
        """
        사용자를 삭제합니다. 사용자의 역할 연결도 함께 삭제됩니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        with self.user_repo.transaction():
            user = self.user_repo.find_by_id(user_id)
            if not user:
                raise UserNotFoundError(f"User not found: {user_id}")
            self.user_repo.delete(user)

        log.info("user_deleted", user_id=str(user_id))

    def get_user_role_names(self, user_id: uuid.UUID) -> Set[str]:
        """
        사용자가 가진 역할들의 이름을 조회합니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User not found: {user_id}")
        return self.role_lookup.find_role_names_by_ids(
            {assignment.role_id for assignment in user.role_assignments}
        )

    def add_role_to_user(self, user_id: uuid.UUID, role_name: str) -> User:
        """
        사용자에게 역할을 부여합니다. 이미 가진 역할이면 아무것도 바꾸지 않습니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
            RoleNotFoundError: 해당 이름의 역할을 찾을 수 없을 때.
        """
        with self.user_repo.transaction():
            user, role_id = self._find_user_and_role(user_id, role_name)

            if all(assignment.role_id != role_id for assignment in user.role_assignments):
                user.role_assignments.append(models.UserRoleEntity(user_id=user.id, role_id=role_id))
                user.updated_by = SYSTEM_ACTOR
                log.info("user_role_added", user_id=str(user.id), role=role_name)

            updated = user_mapper.to_domain(self.user_repo.save(user))
        return updated

    def remove_role_from_user(self, user_id: uuid.UUID, role_name: str) -> User:
        """
        사용자의 역할을 회수합니다. 가지고 있지 않은 역할이면 아무것도 바꾸지 않습니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
            RoleNotFoundError: 해당 이름의 역할을 찾을 수 없을 때.
        """
        with self.user_repo.transaction():
            user, role_id = self._find_user_and_role(user_id, role_name)

            remaining = [a for a in user.role_assignments if a.role_id != role_id]
            if len(remaining) != len(user.role_assignments):
                user.role_assignments = remaining
                user.updated_by = SYSTEM_ACTOR
                log.info("user_role_removed", user_id=str(user.id), role=role_name)

            updated = user_mapper.to_domain(self.user_repo.save(user))
        return updated

    def _find_user_and_role(self, user_id: uuid.UUID, role_name: str):
        user = self.user_repo.find_by_id(user_id)
        if not user: raise UserNotFoundError(f"User not found: {user_id}")

        role_id = self.role_lookup.find_role_id_by_name(role_name)
        if role_id is None: raise RoleNotFoundError(f"Role not found: {role_name}")

        return user, role_id
