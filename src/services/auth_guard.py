import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from src.database import models
from src.services.session_service import SessionService
from src.services.exceptions import UnauthenticatedError, SessionExpiredError, ForbiddenError

logger = logging.getLogger(__name__)


class Access(enum.Enum):
    """보호된 작업이 요구하는 권한 수준."""
    SIGNED_IN = "signed_in"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN_ONLY = "admin_only"


@dataclass
class AuthContext:
    """인가에 성공한 요청의 주체 정보."""
    session: models.UserAuth
    user: models.User

    @property
    def user_uuid(self) -> str:
        return self.user.uuid

    @property
    def role(self) -> models.Role:
        return models.Role(self.user.role)

    @property
    def is_admin(self) -> bool:
        return self.role is models.Role.ADMIN


class AuthorizationGuard:
    """
    모든 보호된 작업 앞에서 호출되는 단일 인가 절차입니다.

    1. 토큰으로 세션을 찾는다. 없으면 UnauthenticatedError.
    2. 로그아웃했거나 만료된 세션이면 SessionExpiredError.
    3. 호출 지점에 따라 소유자/관리자 또는 관리자 전용 검사. 실패하면 ForbiddenError.
    4. 성공하면 AuthContext를 반환한다.
    """

    def __init__(self, session_service: SessionService):
        self.session_service = session_service

    def authorize(
        self,
        access_token: str,
        access: Access = Access.SIGNED_IN,
        owner: Optional[Callable[[], str]] = None,
        action: Optional[str] = None,
        forbidden_message: Optional[str] = None,
    ) -> AuthContext:
        """
        토큰을 검증하고 요청 주체를 반환합니다.

        Args:
            access_token: 클라이언트가 제시한 Bearer 토큰.
            access: 요구 권한 수준.
            owner: Access.OWNER_OR_ADMIN일 때 대상 리소스 소유자의 uuid를 반환하는 함수.
                리소스가 없으면 이 함수가 직접 NotFound 계열 예외를 발생시킵니다.
            action: 만료 메시지에 덧붙일 작업 설명 (예: "post a question").
            forbidden_message: ForbiddenError 메시지를 호출 지점별로 바꿀 때 사용합니다.

        Raises:
            UnauthenticatedError: 토큰에 해당하는 세션이 없을 때.
            SessionExpiredError: 세션이 로그아웃되었거나 만료되었을 때.
            ForbiddenError: 소유자/관리자 조건을 만족하지 못할 때.
        """
        session = self.session_service.find_session(access_token)
        if session is None:
            raise UnauthenticatedError()

        if not self.session_service.is_live(session):
            message = SessionExpiredError.default_message
            if action:
                message = f"{message}.Sign in first to {action}"
            raise SessionExpiredError(message)

        context = AuthContext(session=session, user=session.user)

        if access is Access.ADMIN_ONLY:
            if not context.is_admin:
                logger.info("User %s denied admin-only action.", context.user_uuid)
                raise ForbiddenError(forbidden_message or "Unauthorized Access, Entered user is not an admin")
        elif access is Access.OWNER_OR_ADMIN:
            if owner is None:
                raise ValueError("An owner lookup is required for owner-or-admin checks.")
            owner_uuid = owner()
            if owner_uuid != context.user_uuid and not context.is_admin:
                logger.info("User %s denied action on a resource owned by %s.", context.user_uuid, owner_uuid)
                raise ForbiddenError(forbidden_message)

        return context
