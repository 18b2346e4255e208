import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Set


@dataclass(eq=False)
class User:
    """
    사용자의 도메인 표현입니다. 비밀번호 해시는 포함하지 않습니다.
    role_ids는 보유한 역할의 id 집합이며, 역할 정보를 알 수 없으면 None입니다.
    동등성(==)과 해시는 id만으로 판단합니다.
    """
    id: Optional[uuid.UUID] = None
    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    enabled: Optional[bool] = None
    account_locked: Optional[bool] = None
    account_expired: Optional[bool] = None
    credentials_expired: Optional[bool] = None
    role_ids: Optional[Set[uuid.UUID]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
