from sqlalchemy import Column, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from ..database import Base


class UserRoleEntity(Base):
    """
    사용자(User)와 역할(Role) 사이의 다대다(many-to-many) 관계를 연결하는 연관 테이블입니다.
    어느 한쪽 행이 삭제되면 연결 행도 함께 삭제됩니다(ON DELETE CASCADE).
    """
    __tablename__ = "user_roles"
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)
    role_id = Column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True, index=True)

    user = relationship("UserEntity", back_populates="role_assignments")
    role = relationship("RoleEntity")
