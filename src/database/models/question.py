from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Question(Base):
    """사용자가 게시한 질문입니다. 작성자(user)가 곧 소유자입니다."""
    __tablename__ = "question"
    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(200), unique=True, nullable=False, index=True)
    content = Column(String(500), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    user = relationship("User", back_populates="questions")
    answers = relationship("Answer", back_populates="question", cascade="all, delete-orphan")
