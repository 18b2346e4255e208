import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(eq=False)
class Role:
    """
    역할의 도메인 표현입니다. 저장소와 연결되지 않은 값 스냅샷이며,
    필요한 필드만 키워드 인자로 지정해 생성합니다. 생성 시 검증은 하지 않습니다.
    동등성(==)과 해시는 id만으로 판단합니다.
    """
    id: Optional[uuid.UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
