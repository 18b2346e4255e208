from .role import RoleEntity
from .user import UserEntity
from .association import UserRoleEntity
from .sample import SampleUser, SampleRole, SampleUserRole

__all__ = [
    "RoleEntity",
    "UserEntity",
    "UserRoleEntity",
    "SampleUser",
    "SampleRole",
    "SampleUserRole",
]
