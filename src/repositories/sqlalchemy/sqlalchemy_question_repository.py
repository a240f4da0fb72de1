from typing import List, Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IQuestionRepository

class SqlalchemyQuestionRepository(IQuestionRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, question_model: models.Question) -> models.Question:
        self.db.add(question_model)
        self.db.commit()
        self.db.refresh(question_model)
        return question_model

    def find_by_uuid(self, question_uuid: str) -> Optional[models.Question]:
        return self.db.query(models.Question).filter(models.Question.uuid == question_uuid).first()

    def list_all(self) -> List[models.Question]:
        return self.db.query(models.Question).order_by(models.Question.date.asc()).all()

    def list_by_user(self, user: models.User) -> List[models.Question]:
        return self.db.query(models.Question).filter(
            models.Question.user_id == user.id
        ).order_by(models.Question.date.asc()).all()

    def update(self, question_model: models.Question) -> models.Question:
        merged = self.db.merge(question_model)
        self.db.commit()
        return merged

    def delete(self, question: models.Question) -> bool:
        if question:
            self.db.delete(question)
            self.db.commit()
            return True
        return False
