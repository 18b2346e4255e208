from .role_service import RoleService
from .role_lookup_service import RoleLookupService
from .user_service import UserService

__all__ = ["RoleService", "RoleLookupService", "UserService"]
