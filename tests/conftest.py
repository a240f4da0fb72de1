# tests/conftest.py
import os

# src.config를 임포트하기 전에 설정해야 서명 키가 자동 생성되고 메모리 DB를 사용합니다.
os.environ.setdefault("QUORA_DEBUG", "true")
os.environ.setdefault("QUORA_DATABASE_URL", "sqlite://")

import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict

import pytest
from unittest.mock import MagicMock

from src.database import models
from src.repositories.interfaces import IUserAuthRepository
from src.services.token_issuer import TokenIssuer
from src.services.session_service import SessionService
from src.services.auth_guard import AuthorizationGuard

TEST_SECRET_KEY = "test-secret-key-0123456789abcdef0123456789"
NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

# ===================================================================
#  모델 생성 헬퍼
# ===================================================================

def make_user(username: str = "alice", role: models.Role = models.Role.NONADMIN, **fields) -> models.User:
    """저장되지 않은 User 모델을 생성합니다."""
    defaults = dict(
        id=fields.pop("id", None),
        uuid=fields.pop("uuid", str(uuid.uuid4())),
        username=username,
        email=f"{username}@x.com",
        first_name=username.capitalize(),
        last_name="Tester",
        salt="c2FsdA==",
        password_hash="hash",
        role=role,
    )
    defaults.update(fields)
    return models.User(**defaults)

# ===================================================================
#  세션 / 인가 Fixture
# ===================================================================

@pytest.fixture
def clock():
    """현재 시각을 NOW로 고정한 시계."""
    return lambda: NOW

@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_SECRET_KEY)

@pytest.fixture
def sessions() -> Dict[str, models.UserAuth]:
    """access token -> 세션. mock_user_auth_repo가 조회하는 가짜 저장소입니다."""
    return {}

@pytest.fixture
def mock_user_auth_repo(sessions) -> MagicMock:
    """IUserAuthRepository에 대한 모의 객체. 조회는 sessions 딕셔너리를 사용합니다."""
    repo = MagicMock(spec=IUserAuthRepository)
    repo.find_by_access_token.side_effect = sessions.get
    repo.create.side_effect = lambda session: session
    repo.update.side_effect = lambda session: session
    return repo

@pytest.fixture
def session_service(mock_user_auth_repo, token_issuer, clock) -> SessionService:
    return SessionService(mock_user_auth_repo, token_issuer, clock=clock)

@pytest.fixture
def guard(session_service) -> AuthorizationGuard:
    return AuthorizationGuard(session_service)

@pytest.fixture
def sign_in(sessions):
    """
    사용자에 대한 세션을 sessions에 등록하고 토큰을 반환하는 함수를 제공합니다.
    expired/logged_out으로 세션 상태를 지정할 수 있습니다.
    """
    def _sign_in(user: models.User, expired: bool = False, logged_out: bool = False) -> str:
        token = f"token-{uuid.uuid4()}"
        login_at = NOW - timedelta(hours=9) if expired else NOW - timedelta(minutes=5)
        sessions[token] = models.UserAuth(
            uuid=str(uuid.uuid4()),
            user=user,
            access_token=token,
            login_at=login_at,
            expires_at=login_at + timedelta(hours=8),
            logout_at=NOW - timedelta(minutes=1) if logged_out else None,
        )
        return token
    return _sign_in

# ===================================================================
#  실제 DB(메모리 SQLite) Fixture
# ===================================================================

@pytest.fixture
def db_session_factory():
    """테스트마다 새로 만드는 메모리 SQLite 엔진에 바인딩된 sessionmaker."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool
    from src.database.database import Base

    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()

@pytest.fixture
def db_session(db_session_factory):
    session = db_session_factory()
    yield session
    session.close()
