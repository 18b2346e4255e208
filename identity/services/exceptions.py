# identity/services/exceptions.py

# --- General Exceptions ---
class UserNotFoundError(Exception):
    """사용자를 찾을 수 없을 때"""
    pass

class RoleNotFoundError(Exception):
    """역할을 찾을 수 없을 때"""
    pass

# --- Creation/Validation Exceptions ---
class RoleAlreadyExistsError(Exception):
    """역할 이름이 이미 존재할 때. 재시도 대상이 아닌 최종 실패입니다."""
    pass
