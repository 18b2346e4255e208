from typing import Optional

from identity.database import models
from identity.domain import Role


def to_domain(entity: Optional[models.RoleEntity]) -> Optional[Role]:
    """저장 엔티티를 도메인 Role로 변환합니다. None이면 None을 반환합니다."""
    if entity is None:
        return None
    return Role(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
        created_by=entity.created_by,
        updated_by=entity.updated_by,
    )


def to_entity(role: Role) -> models.RoleEntity:
    """
    도메인 Role을 새 저장 엔티티로 변환합니다.
    값이 없는(None) 필드는 넘기지 않아 컬럼 기본값(id, 타임스탬프 등)이 적용되게 합니다.

    Raises:
        ValueError: role이 None일 때.
    """
    if role is None:
        raise ValueError("domain role must not be None")
    fields = {
        "id": role.id,
        "name": role.name,
        "description": role.description,
        "created_at": role.created_at,
        "updated_at": role.updated_at,
        "created_by": role.created_by,
        "updated_by": role.updated_by,
    }
    return models.RoleEntity(**{key: value for key, value in fields.items() if value is not None})
