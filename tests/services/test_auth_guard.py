# tests/services/test_auth_guard.py
import pytest
from unittest.mock import MagicMock

from src.database import models
from src.services.auth_guard import AuthorizationGuard, Access
from src.services.exceptions import (
    UnauthenticatedError, SessionExpiredError, ForbiddenError, QuestionNotFoundError
)
from tests.conftest import make_user

# ===================================================================
#  1~2단계: 세션 확인과 활성 여부
# ===================================================================
class TestSessionChecks:
    def test_unknown_token_is_unauthenticated(self, guard: AuthorizationGuard):
        with pytest.raises(UnauthenticatedError) as exc_info:
            guard.authorize("no-such-token")
        assert exc_info.value.code == "ATHR-001"
        assert exc_info.value.message == "User has not signed in"

    def test_logged_out_session_is_rejected(self, guard: AuthorizationGuard, sign_in):
        token = sign_in(make_user("alice"), logged_out=True)
        with pytest.raises(SessionExpiredError) as exc_info:
            guard.authorize(token, action="post a question")
        assert exc_info.value.code == "ATHR-002"
        assert exc_info.value.message == "User is signed out.Sign in first to post a question"

    def test_expired_session_is_rejected(self, guard: AuthorizationGuard, sign_in):
        """명시적 로그아웃 없이 만료된 세션도 로그아웃과 동일하게 거부됩니다."""
        token = sign_in(make_user("alice"), expired=True)
        with pytest.raises(SessionExpiredError):
            guard.authorize(token)

    def test_live_session_yields_identity_and_role(self, guard: AuthorizationGuard, sign_in):
        user = make_user("alice")
        context = guard.authorize(sign_in(user))
        assert context.user is user
        assert context.user_uuid == user.uuid
        assert context.role is models.Role.NONADMIN
        assert context.is_admin is False

    def test_expiry_is_checked_before_ownership(self, guard: AuthorizationGuard, sign_in):
        """세션이 만료되었다면 리소스 조회(owner)는 호출되지 않아야 합니다."""
        owner = MagicMock(return_value="someone")
        token = sign_in(make_user("alice"), expired=True)
        with pytest.raises(SessionExpiredError):
            guard.authorize(token, Access.OWNER_OR_ADMIN, owner=owner)
        owner.assert_not_called()

# ===================================================================
#  3단계: 소유자/관리자 검사
# ===================================================================
class TestOwnerOrAdmin:
    def test_owner_is_allowed(self, guard: AuthorizationGuard, sign_in):
        user = make_user("alice")
        context = guard.authorize(sign_in(user), Access.OWNER_OR_ADMIN, owner=lambda: user.uuid)
        assert context.user is user

    def test_admin_is_allowed_on_foreign_resource(self, guard: AuthorizationGuard, sign_in):
        admin = make_user("root", role=models.Role.ADMIN)
        context = guard.authorize(sign_in(admin), Access.OWNER_OR_ADMIN, owner=lambda: "other-uuid")
        assert context.is_admin

    def test_non_owner_non_admin_is_forbidden(self, guard: AuthorizationGuard, sign_in):
        token = sign_in(make_user("mallory"))
        with pytest.raises(ForbiddenError) as exc_info:
            guard.authorize(token, Access.OWNER_OR_ADMIN, owner=lambda: "other-uuid",
                            forbidden_message="Only the question owner or admin can delete the question")
        assert exc_info.value.code == "ATHR-003"
        assert exc_info.value.message == "Only the question owner or admin can delete the question"

    def test_missing_resource_error_propagates(self, guard: AuthorizationGuard, sign_in):
        def owner():
            raise QuestionNotFoundError()

        with pytest.raises(QuestionNotFoundError):
            guard.authorize(sign_in(make_user("alice")), Access.OWNER_OR_ADMIN, owner=owner)

    def test_owner_lookup_is_required(self, guard: AuthorizationGuard, sign_in):
        with pytest.raises(ValueError):
            guard.authorize(sign_in(make_user("alice")), Access.OWNER_OR_ADMIN)

# ===================================================================
#  3단계: 관리자 전용 검사
# ===================================================================
class TestAdminOnly:
    def test_nonadmin_is_forbidden(self, guard: AuthorizationGuard, sign_in):
        with pytest.raises(ForbiddenError) as exc_info:
            guard.authorize(sign_in(make_user("alice")), Access.ADMIN_ONLY)
        assert exc_info.value.message == "Unauthorized Access, Entered user is not an admin"

    def test_admin_is_allowed(self, guard: AuthorizationGuard, sign_in):
        admin = make_user("root", role=models.Role.ADMIN)
        assert guard.authorize(sign_in(admin), Access.ADMIN_ONLY).is_admin

    def test_role_stored_as_plain_string_is_understood(self, guard: AuthorizationGuard, sign_in):
        admin = make_user("root", role="admin")
        assert guard.authorize(sign_in(admin), Access.ADMIN_ONLY).role is models.Role.ADMIN
