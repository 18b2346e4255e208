from . import role_mapper, user_mapper

__all__ = ["role_mapper", "user_mapper"]
