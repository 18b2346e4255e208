from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base, utcnow


class SampleUser(Base):
    """
    개발/테스트 환경용 샘플 사용자 테이블입니다.
    운영 스키마(users)와 통합하지 않고 환경별 픽스처로만 사용합니다.
    """
    __tablename__ = "sample_users"
    id = Column(Integer, primary_key=True, autoincrement=True)
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

    role_associations = relationship("SampleUserRole", back_populates="user", cascade="all, delete-orphan")


class SampleRole(Base):
    """샘플 역할 테이블입니다. (예: 'ROLE_ADMIN', 'ROLE_TESTER')"""
    __tablename__ = "sample_roles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(String(255))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    created_by = Column(String(100), default="system")
    updated_by = Column(String(100), default="system")


class SampleUserRole(Base):
    """샘플 사용자와 샘플 역할을 연결하는 연관 테이블입니다."""
    __tablename__ = "sample_user_roles"
    user_id = Column(Integer, ForeignKey("sample_users.id", ondelete="CASCADE"), primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("sample_roles.id", ondelete="CASCADE"), primary_key=True, index=True)
    assigned_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    assigned_by = Column(String(100), default="system")

    user = relationship("SampleUser", back_populates="role_associations")
    role = relationship("SampleRole")
