from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IAnswerRepository(ABC):
    @abstractmethod
    def create(self, answer_model: models.Answer) -> models.Answer:
        """새로운 답변을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_uuid(self, answer_uuid: str) -> Optional[models.Answer]:
        """uuid로 특정 답변을 조회합니다."""
        pass

    @abstractmethod
    def list_by_question(self, question: models.Question) -> List[models.Answer]:
        """특정 질문에 달린 모든 답변을 조회합니다."""
        pass

    @abstractmethod
    def update(self, answer_model: models.Answer) -> models.Answer:
        """기존 답변의 변경 사항을 반영합니다."""
        pass

    @abstractmethod
    def delete(self, answer: models.Answer) -> bool:
        """특정 답변을 데이터베이스에서 삭제합니다."""
        pass
