from typing import List, Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IAnswerRepository

class SqlalchemyAnswerRepository(IAnswerRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, answer_model: models.Answer) -> models.Answer:
        self.db.add(answer_model)
        self.db.commit()
        self.db.refresh(answer_model)
        return answer_model

    def find_by_uuid(self, answer_uuid: str) -> Optional[models.Answer]:
        return self.db.query(models.Answer).filter(models.Answer.uuid == answer_uuid).first()

    def list_by_question(self, question: models.Question) -> List[models.Answer]:
        return self.db.query(models.Answer).filter(
            models.Answer.question_id == question.id
        ).order_by(models.Answer.date.asc()).all()

    def update(self, answer_model: models.Answer) -> models.Answer:
        merged = self.db.merge(answer_model)
        self.db.commit()
        return merged

    def delete(self, answer: models.Answer) -> bool:
        if answer:
            self.db.delete(answer)
            self.db.commit()
            return True
        return False
