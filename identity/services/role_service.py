from typing import List

from sqlalchemy.exc import IntegrityError

from identity.domain import SYSTEM_ACTOR, Role
from identity.logger import get_logger
from identity.mappers import role_mapper
from identity.repositories.interfaces import IRoleRepository
from identity.services.exceptions import RoleAlreadyExistsError

log = get_logger(__name__)


class RoleService:
    """역할 목록 조회와 역할 생성을 담당하는 서비스입니다."""

    def __init__(self, role_repo: IRoleRepository):
        """
        RoleService를 초기화합니다.

        Args:
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
        """
        self.role_repo = role_repo

    def get_all_roles(self) -> List[Role]:
        """모든 역할을 리포지토리가 돌려준 순서 그대로 조회합니다."""
        return [role_mapper.to_domain(entity) for entity in self.role_repo.find_all()]

    def create_role(self, name: str, description: str) -> Role:
        """
        새로운 역할을 생성합니다. 존재 확인과 저장은 하나의 트랜잭션에서 수행됩니다.

        Args:
            name: 생성할 역할의 이름. (대소문자 구분)
            description: 역할 설명.

        Returns:
            생성된 id와 타임스탬프가 채워진 Role.

        Raises:
            RoleAlreadyExistsError: 동일한 이름의 역할이 이미 존재하거나,
                동시 생성으로 저장소의 유일성 제약에 걸렸을 때.
        """
        with self.role_repo.transaction():
            if self.role_repo.exists_by_name(name):
                log.info("role_conflict", name=name)
                raise RoleAlreadyExistsError(f"Role already exists: {name}")

            role = Role(
                name=name,
                description=description,
                created_by=SYSTEM_ACTOR,
                updated_by=SYSTEM_ACTOR,
            )
            try:
                saved = self.role_repo.save(role_mapper.to_entity(role))
            except IntegrityError as e:
                # 확인과 저장 사이에 같은 이름이 먼저 저장된 경우
                log.info("role_conflict", name=name, source="unique_constraint")
                raise RoleAlreadyExistsError(f"Role already exists: {name}") from e

            created = role_mapper.to_domain(saved)

        log.info("role_created", role_id=str(created.id), name=created.name)
        return created
