from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Answer(Base):
    """특정 질문에 대해 사용자가 작성한 답변입니다."""
    __tablename__ = "answer"
    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(200), unique=True, nullable=False, index=True)
    answer = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    question_id = Column(Integer, ForeignKey("question.id", ondelete="CASCADE"), nullable=False)

    user = relationship("User", back_populates="answers")
    question = relationship("Question", back_populates="answers")
