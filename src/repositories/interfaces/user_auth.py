from abc import ABC, abstractmethod
from typing import Optional
from src.database import models

class IUserAuthRepository(ABC):
    """
    세션(UserAuth) 레코드 저장소입니다.
    세션은 생성과 로그아웃 시각 갱신만 허용되며, 삭제 연산은 제공하지 않습니다.
    """

    @abstractmethod
    def create(self, user_auth_model: models.UserAuth) -> models.UserAuth:
        """새로운 세션을 데이터베이스에 저장합니다."""
        pass

    @abstractmethod
    def find_by_access_token(self, access_token: str) -> Optional[models.UserAuth]:
        """
        access token으로 세션을 조회합니다.
        로그아웃되었거나 만료된 세션도 그대로 반환합니다. (상태 판단은 호출자의 몫)
        """
        pass

    @abstractmethod
    def update(self, user_auth_model: models.UserAuth) -> models.UserAuth:
        """기존 세션의 변경 사항(로그아웃 시각)을 반영합니다."""
        pass
