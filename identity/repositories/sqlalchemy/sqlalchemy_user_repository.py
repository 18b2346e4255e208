import uuid
from typing import ContextManager, List, Optional

from sqlalchemy.orm import Session, selectinload

from identity.database import models, transaction_scope
from identity.repositories.interfaces import IUserRepository


class SqlalchemyUserRepository(IUserRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def transaction(self) -> ContextManager:
        return transaction_scope(self.db)

    def find_all(self) -> List[models.UserEntity]:
        return self.db.query(models.UserEntity).options(
            selectinload(models.UserEntity.role_assignments)
        ).order_by(models.UserEntity.username.asc()).all()

    def find_by_id(self, user_id: uuid.UUID) -> Optional[models.UserEntity]:
        return self.db.get(models.UserEntity, user_id)

    def find_by_username(self, username: str) -> Optional[models.UserEntity]:
        return self.db.query(models.UserEntity).options(
            selectinload(models.UserEntity.role_assignments)
        ).filter(models.UserEntity.username == username).first()

    def find_by_email(self, email: str) -> Optional[models.UserEntity]:
        return self.db.query(models.UserEntity).filter(models.UserEntity.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return bool(self.db.query(
            self.db.query(models.UserEntity).filter(models.UserEntity.username == username).exists()
        ).scalar())

    def save(self, user_model: models.UserEntity) -> models.UserEntity:
        self.db.add(user_model)
        self.db.flush()
        self.db.refresh(user_model)
        return user_model

    def delete(self, user: models.UserEntity) -> bool:
        if user:
            self.db.delete(user)
            self.db.flush()
            return True
        return False
