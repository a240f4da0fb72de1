import logging
import uuid
from typing import Dict, Any, Optional

from src.database import models
from src.repositories.interfaces import IUserRepository
from src.repositories.exceptions import DuplicateRecordError
from src.services.password_hasher import PasswordHasher
from src.services.session_service import SessionService
from src.services.exceptions import (
    DuplicateUsernameError, DuplicateEmailError, UnknownUserError,
    BadCredentialError, NotSignedInError
)

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "country", "about_me", "dob", "contact_number")


class AuthenticationService:
    """회원 가입, 로그인, 로그아웃 흐름을 제공합니다."""

    def __init__(self, user_repo: IUserRepository, session_service: SessionService, password_hasher: PasswordHasher):
        """
        AuthenticationService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            session_service: 세션 생성/조회/로그아웃을 담당하는 서비스.
            password_hasher: 비밀번호 해시 생성 및 검증기.
        """
        self.user_repo = user_repo
        self.session_service = session_service
        self.password_hasher = password_hasher

    def signup(self, /, username: Optional[str] = None, email: Optional[str] = None, password: Optional[str] = None,
               first_name: Optional[str] = "", last_name: Optional[str] = "", **profile: Optional[str]) -> Dict[str, Any]:
        """
        새로운 사용자를 등록합니다. 비밀번호는 salt와 함께 해시하여 저장하며, 역할은 nonadmin입니다.
        세션은 생성하지 않습니다.

        Returns:
            생성된 사용자의 uuid와 상태 메시지를 담은 딕셔너리.

        Raises:
            ValueError: 필수 입력(username, email, password)이 비어 있거나, 입력 값이 문자열이 아닐 때.
            DuplicateUsernameError: 동일한 username이 이미 존재할 때.
            DuplicateEmailError: 동일한 email이 이미 존재할 때.
        """
        for field, value in (("username", username), ("email", email), ("password", password)):
            if not value:
                raise ValueError(f"'{field}' is required.")
            if not isinstance(value, str):
                raise ValueError(f"'{field}' must be a string.")

        unknown = set(profile) - set(PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}.")

        profile.update(first_name=first_name or "", last_name=last_name or "")
        for field, value in profile.items():
            if value is not None and not isinstance(value, str):
                raise ValueError(f"'{field}' must be a string.")

        if self.user_repo.find_by_username(username):
            raise DuplicateUsernameError()
        if self.user_repo.find_by_email(email):
            raise DuplicateEmailError()

        salt, password_hash = self.password_hasher.hash(password)
        new_user = models.User(
            uuid=str(uuid.uuid4()),
            username=username,
            email=email,
            salt=salt,
            password_hash=password_hash,
            role=models.Role.NONADMIN,
            **profile,
        )
        try:
            created_user = self.user_repo.create(new_user)
        except DuplicateRecordError:
            # 중복 검사 이후 다른 요청이 먼저 같은 username/email을 저장한 경우
            if self.user_repo.find_by_username(username):
                raise DuplicateUsernameError()
            if self.user_repo.find_by_email(email):
                raise DuplicateEmailError()
            raise
        logger.info("User %s registered as %s.", created_user.uuid, username)
        return {"id": created_user.uuid, "status": "USER SUCCESSFULLY REGISTERED"}

    def signin(self, username: str, password: str) -> models.UserAuth:
        """
        자격증명을 검증하고, 성공 시 8시간 동안 유효한 새 세션을 발급합니다.

        Returns:
            생성된 세션(UserAuth). 호출자는 access_token을 응답 헤더로 전달합니다.

        Raises:
            UnknownUserError: 해당 username의 사용자가 없을 때.
            BadCredentialError: 비밀번호가 일치하지 않을 때.
        """
        user = self.user_repo.find_by_username(username)
        if not user:
            raise UnknownUserError()

        if not self.password_hasher.verify(password or "", user.salt, user.password_hash):
            raise BadCredentialError()

        return self.session_service.start_session(user)

    def signout(self, access_token: str) -> Dict[str, Any]:
        """
        세션에 로그아웃 시각을 기록합니다.

        Raises:
            NotSignedInError: 토큰에 해당하는 세션이 없거나 이미 로그아웃된 세션일 때.
        """
        session = self.session_service.find_session(access_token)
        if session is None or session.logout_at is not None:
            raise NotSignedInError()

        self.session_service.end_session(session)
        return {"id": session.user.uuid, "message": "SIGNED OUT SUCCESSFULLY"}
