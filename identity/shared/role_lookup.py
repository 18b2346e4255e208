import uuid
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set


class RoleLookup(ABC):
    """
    역할 모듈 밖의 협력자가 리포지토리에 의존하지 않고
    역할 id와 역할 이름을 서로 변환할 수 있게 하는 조회 전용 계약입니다.
    """

    @abstractmethod
    def find_role_names_by_ids(self, role_ids: Optional[Iterable[uuid.UUID]]) -> Set[str]:
        """
        역할 id 집합에 해당하는 역할 이름 집합을 반환합니다.
        존재하지 않는 id는 조용히 제외되며, None이나 빈 입력은 빈 집합을 반환합니다.
        """
        pass

    @abstractmethod
    def find_role_id_by_name(self, role_name: str) -> Optional[uuid.UUID]:
        """이름이 정확히 일치하는 역할의 id를 반환합니다. 없으면 None을 반환합니다."""
        pass
