import uuid
from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional

from identity.database import models


class IUserRepository(ABC):
    @abstractmethod
    def transaction(self) -> ContextManager:
        """하나의 트랜잭션 경계를 엽니다."""
        pass

    @abstractmethod
    def find_all(self) -> List[models.UserEntity]:
        """모든 사용자의 목록을 조회합니다."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: uuid.UUID) -> Optional[models.UserEntity]:
        """고유 ID로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[models.UserEntity]:
        """사용자 이름으로 특정 사용자를 역할 연결과 함께 조회합니다."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[models.UserEntity]:
        """이메일로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """해당 사용자 이름이 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def save(self, user_model: models.UserEntity) -> models.UserEntity:
        """사용자를 저장하고 flush 합니다. commit은 하지 않습니다."""
        pass

    @abstractmethod
    def delete(self, user: models.UserEntity) -> bool:
        """특정 사용자를 삭제합니다. 역할 연결도 함께 삭제됩니다."""
        pass
