from .role import IRoleRepository
from .user import IUserRepository

__all__ = ["IRoleRepository", "IUserRepository"]
