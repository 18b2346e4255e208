import uuid
from abc import ABC, abstractmethod
from typing import ContextManager, Iterable, List, Optional

from identity.database import models


class IRoleRepository(ABC):
    @abstractmethod
    def transaction(self) -> ContextManager:
        """
        하나의 트랜잭션 경계를 엽니다.
        블록이 정상 종료되면 commit, 예외가 발생하면 rollback 합니다.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[models.RoleEntity]:
        """모든 역할을 저장소 순서(생성 순)대로 조회합니다."""
        pass

    @abstractmethod
    def find_all_by_id(self, role_ids: Iterable[uuid.UUID]) -> List[models.RoleEntity]:
        """주어진 id 중 존재하는 역할만 조회합니다. 없는 id는 무시합니다."""
        pass

    @abstractmethod
    def find_by_id(self, role_id: uuid.UUID) -> Optional[models.RoleEntity]:
        """고유 ID로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.RoleEntity]:
        """이름으로 특정 역할을 조회합니다. (대소문자 구분)"""
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """해당 이름의 역할이 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def save(self, role_model: models.RoleEntity) -> models.RoleEntity:
        """
        역할을 저장하고 flush하여 생성된 id와 타임스탬프가 채워진 엔티티를 반환합니다.
        commit은 하지 않습니다.

        Raises:
            sqlalchemy.exc.IntegrityError: 이름 유일성 제약을 위반했을 때.
        """
        pass

    @abstractmethod
    def delete(self, role: models.RoleEntity) -> bool:
        """특정 역할을 삭제합니다."""
        pass
