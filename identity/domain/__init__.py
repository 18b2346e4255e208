from .role import Role
from .user import User

# 자동 시드나 서비스 내부 생성 시 created_by / updated_by에 기록되는 행위자
SYSTEM_ACTOR = "system"

__all__ = ["Role", "User", "SYSTEM_ACTOR"]
