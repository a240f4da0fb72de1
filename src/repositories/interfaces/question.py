from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IQuestionRepository(ABC):
    @abstractmethod
    def create(self, question_model: models.Question) -> models.Question:
        """새로운 질문을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_uuid(self, question_uuid: str) -> Optional[models.Question]:
        """uuid로 특정 질문을 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Question]:
        """모든 질문의 목록을 조회합니다."""
        pass

    @abstractmethod
    def list_by_user(self, user: models.User) -> List[models.Question]:
        """특정 사용자가 작성한 질문의 목록을 조회합니다."""
        pass

    @abstractmethod
    def update(self, question_model: models.Question) -> models.Question:
        """기존 질문의 변경 사항을 반영합니다."""
        pass

    @abstractmethod
    def delete(self, question: models.Question) -> bool:
        """특정 질문을 데이터베이스에서 삭제합니다."""
        pass
