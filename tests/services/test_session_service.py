# tests/services/test_session_service.py
from datetime import timedelta
from unittest.mock import MagicMock

from src.services.session_service import SessionService
from tests.conftest import NOW, make_user


class TestSessionLifecycle:
    def test_start_session_is_live_for_eight_hours(self, session_service: SessionService, mock_user_auth_repo: MagicMock):
        """새 세션은 issuedAt + 8h에 만료되고 logout_at이 비어 있어야 합니다."""
        # === Arrange ===
        user = make_user("alice")

        # === Act ===
        session = session_service.start_session(user)

        # === Assert ===
        assert session.user is user
        assert session.login_at == NOW
        assert session.expires_at == session.login_at + timedelta(hours=8)
        assert session.logout_at is None
        assert session.access_token
        assert session_service.is_live(session)
        mock_user_auth_repo.create.assert_called_once_with(session)

    def test_each_session_gets_a_distinct_token(self, session_service: SessionService):
        user = make_user("alice")
        first = session_service.start_session(user)
        second = session_service.start_session(user)
        assert first.access_token != second.access_token

    def test_end_session_records_logout_without_deleting(self, session_service: SessionService, mock_user_auth_repo: MagicMock, sign_in, sessions):
        # === Arrange ===
        token = sign_in(make_user("alice"))
        session = sessions[token]

        # === Act ===
        session_service.end_session(session)

        # === Assert ===
        assert session.logout_at == NOW
        assert not session_service.is_live(session)
        mock_user_auth_repo.update.assert_called_once_with(session)

    def test_find_session_with_empty_token(self, session_service: SessionService, mock_user_auth_repo: MagicMock):
        assert session_service.find_session("") is None
        mock_user_auth_repo.find_by_access_token.assert_not_called()


class TestLiveness:
    def test_logged_out_session_is_never_live(self, session_service: SessionService, sign_in, sessions):
        """로그아웃된 세션은 만료 시각과 관계없이 활성 상태가 아닙니다."""
        token = sign_in(make_user("alice"), logged_out=True)
        assert sessions[token].expires_at > NOW
        assert not session_service.is_live(sessions[token])

    def test_expired_session_is_never_live(self, session_service: SessionService, sign_in, sessions):
        """만료된 세션은 로그아웃 여부와 관계없이 활성 상태가 아닙니다."""
        token = sign_in(make_user("alice"), expired=True)
        assert sessions[token].logout_at is None
        assert not session_service.is_live(sessions[token])

    def test_session_expires_exactly_at_expiry_instant(self, session_service: SessionService, sign_in, sessions):
        session = sessions[sign_in(make_user("alice"))]
        assert session_service.is_live(session, now=session.expires_at - timedelta(seconds=1))
        assert not session_service.is_live(session, now=session.expires_at)

    def test_naive_datetimes_from_store_are_treated_as_utc(self, session_service: SessionService, sign_in, sessions):
        """SQLite에서 읽은 naive datetime도 UTC로 비교되어야 합니다."""
        session = sessions[sign_in(make_user("alice"))]
        session.expires_at = session.expires_at.replace(tzinfo=None)
        assert session_service.is_live(session)
