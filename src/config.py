# src/config.py
import logging
import secrets
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    환경 변수(QUORA_ 접두사)와 .env 파일에서 읽어 오는 애플리케이션 설정입니다.
    모든 필드에 기본값이 있으므로 테스트 환경에서도 별도 설정 없이 생성할 수 있습니다.
    """
    model_config = SettingsConfigDict(
        env_prefix="QUORA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # 데이터베이스 연결 문자열 (기본값은 로컬 SQLite 파일)
    database_url: str = "sqlite:///quora.db"

    # 인증 토큰 서명 키. 빈 문자열은 "설정되지 않음"을 의미합니다.
    secret_key: str = ""
    token_issuer: str = "https://quora.io"
    session_ttl_hours: int = 8
    password_hash_iterations: int = 1000

    # db_init 실행 시 생성할 관리자 계정의 비밀번호 (비어 있으면 생성하지 않음)
    admin_password: str = ""

    host: str = ""
    port: int = 8000
    log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """
        서명 키 정책을 검증합니다.

        debug 모드에서는 키가 없으면 임의의 키를 생성하고 경고를 남깁니다.
        (재시작하면 기존 토큰은 서명 키가 달라지지만, 세션 유효성은 DB 상태로만 판단합니다.)
        운영 모드에서는 키가 없으면 시작을 거부합니다. 32자 미만의 키는 항상 거부합니다.
        """
        if not self.secret_key:
            if self.debug:
                self.secret_key = secrets.token_hex(32)
                logger.warning("Using auto-generated QUORA_SECRET_KEY (debug mode).")
            else:
                raise ValueError(
                    "QUORA_SECRET_KEY is required. "
                    "Set it in the environment or .env file, or set QUORA_DEBUG=true for local development."
                )
        if len(self.secret_key) < 32:
            raise ValueError("QUORA_SECRET_KEY must be at least 32 characters.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Settings 싱글톤을 반환합니다. 테스트에서 환경을 바꿨다면 get_settings.cache_clear()를 호출합니다."""
    return Settings()
