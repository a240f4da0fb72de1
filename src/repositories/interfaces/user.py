from abc import ABC, abstractmethod
from typing import Optional
from src.database import models

class IUserRepository(ABC):
    @abstractmethod
    def create(self, user_model: models.User) -> models.User:
        """
        새로운 사용자를 데이터베이스에 생성합니다.
        username 또는 email이 이미 저장되어 있으면 DuplicateRecordError를 발생시킵니다.
        """
        pass

    @abstractmethod
    def find_by_uuid(self, user_uuid: str) -> Optional[models.User]:
        """외부 식별자(uuid)로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[models.User]:
        """사용자 이름으로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[models.User]:
        """이메일 주소로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def delete(self, user: models.User) -> bool:
        """특정 사용자를 데이터베이스에서 삭제합니다."""
        pass
