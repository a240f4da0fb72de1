import logging
import uuid

from src.services.password_hasher import PasswordHasher
from src.config import get_settings
from .database import engine, SessionLocal, Base
from .models import *

logger = logging.getLogger(__name__)

def initialize_db(admin_username: str = "admin", admin_password: str = None):
    """
    DB와 테이블을 생성하고, 기본 관리자 계정을 삽입합니다.
    SQLAlchemy 모델을 사용하여 모든 작업을 수행합니다.

    관리자 비밀번호는 인자 또는 QUORA_ADMIN_PASSWORD 환경 변수로 전달합니다.
    둘 다 없으면 관리자 계정은 만들지 않습니다.
    """
    logger.info("DB 초기화 중 (SQLAlchemy 사용)...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)
    logger.info("테이블 생성 완료.")

    admin_password = admin_password or get_settings().admin_password
    if not admin_password:
        logger.info("관리자 비밀번호가 지정되지 않아 기본 데이터 삽입을 건너뜁니다.")
        return

    db = SessionLocal()
    try:
        # 관리자 계정이 이미 있는지 확인
        if db.query(User).filter(User.username == admin_username).first():
            logger.info("관리자 계정이 이미 존재합니다. 초기화를 건너뜁니다.")
            return

        hasher = PasswordHasher(iterations=get_settings().password_hash_iterations)
        salt, password_hash = hasher.hash(admin_password)
        admin_user = User(
            uuid=str(uuid.uuid4()),
            first_name="Admin",
            last_name="User",
            username=admin_username,
            email=f"{admin_username}@quora.local",
            salt=salt,
            password_hash=password_hash,
            role=Role.ADMIN,
        )
        db.add(admin_user)
        db.commit()
        logger.info("DB 초기화 및 관리자 계정(%s) 삽입 완료.", admin_username)

    except Exception:
        logger.exception("DB 초기화 중 오류 발생")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    logging.basicConfig(level=get_settings().log_level)
    initialize_db()
