from typing import Optional
from sqlalchemy.orm import Session, joinedload
from src.database import models
from src.repositories.interfaces import IUserAuthRepository

class SqlalchemyUserAuthRepository(IUserAuthRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, user_auth_model: models.UserAuth) -> models.UserAuth:
        self.db.add(user_auth_model)
        self.db.commit()
        self.db.refresh(user_auth_model)
        return user_auth_model

    def find_by_access_token(self, access_token: str) -> Optional[models.UserAuth]:
        return self.db.query(models.UserAuth).options(joinedload(models.UserAuth.user)).filter(
            models.UserAuth.access_token == access_token
        ).first()

    def update(self, user_auth_model: models.UserAuth) -> models.UserAuth:
        merged = self.db.merge(user_auth_model)
        self.db.commit()
        return merged
