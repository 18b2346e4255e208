from typing import Optional

from identity.database import models
from identity.domain import User


def to_domain(entity: Optional[models.UserEntity]) -> Optional[User]:
    """
    저장 엔티티를 도메인 User로 변환합니다.
    password_hash는 의도적으로 옮기지 않습니다.
    """
    if entity is None:
        return None

    role_ids = None
    if entity.role_assignments is not None:
        role_ids = {assignment.role_id for assignment in entity.role_assignments}

    return User(
        id=entity.id,
        username=entity.username,
        email=entity.email,
        first_name=entity.first_name,
        last_name=entity.last_name,
        enabled=entity.enabled,
        account_locked=entity.account_locked,
        account_expired=entity.account_expired,
        credentials_expired=entity.credentials_expired,
        role_ids=role_ids,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
        created_by=entity.created_by,
        updated_by=entity.updated_by,
    )


def to_entity(user: Optional[User]) -> Optional[models.UserEntity]:
    """
    도메인 User를 저장 엔티티로 변환합니다.
    password_hash는 호출하는 쪽에서 별도로 설정해야 합니다.
    역할 연결은 id와 role_ids가 모두 있을 때만 만듭니다.
    """
    if user is None:
        return None

    fields = {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "enabled": user.enabled,
        "account_locked": user.account_locked,
        "account_expired": user.account_expired,
        "credentials_expired": user.credentials_expired,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        "created_by": user.created_by,
        "updated_by": user.updated_by,
    }
    entity = models.UserEntity(**{key: value for key, value in fields.items() if value is not None})

    if user.id is not None and user.role_ids is not None:
        entity.role_assignments = [
            models.UserRoleEntity(user_id=user.id, role_id=role_id) for role_id in user.role_ids
        ]
    return entity
