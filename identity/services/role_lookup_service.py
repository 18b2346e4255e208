import uuid
from typing import Iterable, Optional, Set

from identity.repositories.interfaces import IRoleRepository
from identity.shared import RoleLookup


class RoleLookupService(RoleLookup):
    """RoleLookup 계약을 역할 리포지토리로 구현합니다."""

    def __init__(self, role_repo: IRoleRepository):
        self.role_repo = role_repo

    def find_role_names_by_ids(self, role_ids: Optional[Iterable[uuid.UUID]]) -> Set[str]:
        if not role_ids:
            return set()
        return {role.name for role in self.role_repo.find_all_by_id(set(role_ids))}

    def find_role_id_by_name(self, role_name: str) -> Optional[uuid.UUID]:
        role = self.role_repo.find_by_name(role_name)
        return role.id if role else None
