from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class UserAuth(Base):
    """
    한 번의 로그인으로 생성되는 세션을 나타냅니다.
    access_token은 클라이언트가 Bearer 토큰으로 제시하는 불투명한 문자열입니다.
    로그아웃 시 logout_at만 기록되며, 레코드는 삭제하지 않고 감사 기록으로 남깁니다.
    """
    __tablename__ = "user_auth"
    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(200), unique=True, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    access_token = Column(String(500), unique=True, nullable=False, index=True)
    login_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    logout_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="sessions")
