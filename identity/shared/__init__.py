from .role_lookup import RoleLookup

__all__ = ["RoleLookup"]
