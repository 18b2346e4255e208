from dataclasses import dataclass

from sqlalchemy.orm import Session

from identity.repositories.sqlalchemy import SqlalchemyRoleRepository, SqlalchemyUserRepository
from identity.services import RoleLookupService, RoleService, UserService
from identity.shared import RoleLookup


@dataclass
class Container:
    role_service: RoleService
    role_lookup: RoleLookup
    user_service: UserService


def build_container(db_session: Session) -> Container:
    """하나의 세션을 공유하는 리포지토리와 서비스를 생성자 주입으로 조립합니다."""
    role_repo = SqlalchemyRoleRepository(db_session)
    user_repo = SqlalchemyUserRepository(db_session)
    role_lookup = RoleLookupService(role_repo)
    return Container(
        role_service=RoleService(role_repo),
        role_lookup=role_lookup,
        user_service=UserService(user_repo, role_lookup),
    )
