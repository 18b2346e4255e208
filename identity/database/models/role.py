from sqlalchemy import Column, DateTime, String, Uuid
from uuid6 import uuid7

from ..database import Base, utcnow


class RoleEntity(Base):
    """
    사용자에게 부여할 수 있는 이름 있는 권한 묶음(Role)의 저장 표현입니다.
    (예: 'ADMIN', 'USER').
    name은 전체 역할에 대해 유일하며, 대소문자를 구분합니다.
    id는 시간 순서 UUID(v7)이므로 같은 시각에 생성된 행도 생성 순서대로 정렬됩니다.
    """
    __tablename__ = "roles"
    id = Column(Uuid, primary_key=True, default=uuid7)
    name = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(String(255))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    created_by = Column(String(100), default="system")
    updated_by = Column(String(100), default="system")
