import uuid
from typing import ContextManager, Iterable, List, Optional

from sqlalchemy.orm import Session

from identity.database import models, transaction_scope
from identity.repositories.interfaces import IRoleRepository


class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def transaction(self) -> ContextManager:
        return transaction_scope(self.db)

    def find_all(self) -> List[models.RoleEntity]:
        return self.db.query(models.RoleEntity).order_by(
            models.RoleEntity.created_at.asc(), models.RoleEntity.id.asc()
        ).all()

    def find_all_by_id(self, role_ids: Iterable[uuid.UUID]) -> List[models.RoleEntity]:
        ids = list(role_ids)
        if not ids:
            return []
        return self.db.query(models.RoleEntity).filter(models.RoleEntity.id.in_(ids)).all()

    def find_by_id(self, role_id: uuid.UUID) -> Optional[models.RoleEntity]:
        return self.db.get(models.RoleEntity, role_id)

    def find_by_name(self, name: str) -> Optional[models.RoleEntity]:
        return self.db.query(models.RoleEntity).filter(models.RoleEntity.name == name).first()

    def exists_by_name(self, name: str) -> bool:
        return bool(self.db.query(
            self.db.query(models.RoleEntity).filter(models.RoleEntity.name == name).exists()
        ).scalar())

    def save(self, role_model: models.RoleEntity) -> models.RoleEntity:
        self.db.add(role_model)
        self.db.flush()
        self.db.refresh(role_model)
        return role_model

    def delete(self, role: models.RoleEntity) -> bool:
        if role:
            self.db.delete(role)
            self.db.flush()
            return True
        return False
