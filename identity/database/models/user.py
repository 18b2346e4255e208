from sqlalchemy import Boolean, Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship
from uuid6 import uuid7

from ..database import Base, utcnow


class UserEntity(Base):
    """
    시스템 사용자의 저장 표현입니다.
    enabled / account_locked / account_expired / credentials_expired는
    하나의 상태 값이 아니라 서로 독립적인 상태 플래그입니다.
    password_hash는 이 엔티티에만 존재하며 도메인 객체로 전달되지 않습니다.
    """
    __tablename__ = "users"
    id = Column(Uuid, primary_key=True, default=uuid7)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    enabled = Column(Boolean, nullable=False, default=True)
    account_locked = Column(Boolean, nullable=False, default=False)
    account_expired = Column(Boolean, nullable=False, default=False)
    credentials_expired = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    created_by = Column(String(100), default="system")
    updated_by = Column(String(100), default="system")

    role_assignments = relationship("UserRoleEntity", back_populates="user", cascade="all, delete-orphan")
