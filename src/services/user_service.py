import logging
from typing import Dict, Any

from src.repositories.interfaces import IUserRepository
from src.services.auth_guard import AuthorizationGuard, Access
from src.services.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """사용자 프로필 조회와 관리자 전용 사용자 삭제를 제공합니다."""

    def __init__(self, user_repo: IUserRepository, guard: AuthorizationGuard):
        self.user_repo = user_repo
        self.guard = guard

    def get_user_profile(self, access_token: str, user_uuid: str) -> Dict[str, Any]:
        """
        uuid로 사용자 프로필을 조회합니다. (비밀번호, salt 제외)

        Raises:
            UserNotFoundError: 해당 uuid의 사용자가 없을 때.
        """
        self.guard.authorize(access_token, action="get user details")
        user = self.user_repo.find_by_uuid(user_uuid)
        if not user:
            raise UserNotFoundError()
        return {
            "first_name": user.first_name,
            "last_name": user.last_name,
            "user_name": user.username,
            "email_address": user.email,
            "country": user.country,
            "about_me": user.about_me,
            "dob": user.dob,
            "contact_number": user.contact_number,
        }

    def delete_user(self, access_token: str, user_uuid: str) -> Dict[str, Any]:
        """
        사용자를 삭제합니다. 관리자만 가능하며, 소유 개념은 적용되지 않습니다.

        Raises:
            ForbiddenError: 관리자가 아닐 때 (대상 존재 여부와 무관).
            UserNotFoundError: 관리자라도 대상 사용자가 없을 때.
        """
        context = self.guard.authorize(access_token, Access.ADMIN_ONLY, action="delete a user")
        user = self.user_repo.find_by_uuid(user_uuid)
        if not user:
            raise UserNotFoundError("User with entered uuid to be deleted does not exist")
        self.user_repo.delete(user)
        logger.info("User %s deleted by admin %s.", user_uuid, context.user_uuid)
        return {"id": user_uuid, "status": "USER SUCCESSFULLY DELETED"}
