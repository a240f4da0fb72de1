import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional

from src.database import models
from src.repositories.interfaces import IUserAuthRepository
from src.services.token_issuer import TokenIssuer
from src.utils.time_utils import utcnow, as_utc

logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=8)


class SessionService:
    """세션(UserAuth)의 생성, 조회, 로그아웃 기록과 활성 여부 판단을 담당합니다."""

    def __init__(
        self,
        user_auth_repo: IUserAuthRepository,
        token_issuer: TokenIssuer,
        ttl: timedelta = SESSION_TTL,
        clock: Callable[[], datetime] = utcnow,
    ):
        """
        SessionService를 초기화합니다.

        Args:
            user_auth_repo: 세션 데이터에 접근하기 위한 리포지토리.
            token_issuer: access token 발급기.
            ttl: 발급 시각으로부터 만료 시각까지의 간격 (기본 8시간).
            clock: 현재 UTC 시각을 반환하는 함수. 테스트에서 시각을 고정할 때 사용합니다.
        """
        self.user_auth_repo = user_auth_repo
        self.token_issuer = token_issuer
        self.ttl = ttl
        self.clock = clock

    def start_session(self, user: models.User) -> models.UserAuth:
        """새 토큰을 발급하고, 활성 상태의 세션을 저장합니다."""
        now = self.clock()
        expires_at = now + self.ttl
        session = models.UserAuth(
            uuid=str(uuid.uuid4()),
            user=user,
            access_token=self.token_issuer.issue(user.uuid, now, expires_at),
            login_at=now,
            expires_at=expires_at,
            logout_at=None,
        )
        created = self.user_auth_repo.create(session)
        logger.info("Session %s started for user %s (expires %s).", created.uuid, user.uuid, expires_at.isoformat())
        return created

    def find_session(self, access_token: str) -> Optional[models.UserAuth]:
        if not access_token:
            return None
        return self.user_auth_repo.find_by_access_token(access_token)

    def end_session(self, session: models.UserAuth) -> models.UserAuth:
        """세션에 로그아웃 시각을 기록합니다. 레코드는 삭제하지 않습니다."""
        session.logout_at = self.clock()
        updated = self.user_auth_repo.update(session)
        logger.info("Session %s signed out.", session.uuid)
        return updated

    def is_live(self, session: models.UserAuth, now: Optional[datetime] = None) -> bool:
        """로그아웃되지 않았고 만료 시각 이전이면 활성 세션입니다."""
        if session.logout_at is not None:
            return False
        now = as_utc(now or self.clock())
        return now < as_utc(session.expires_at)
