from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from ..database import Base
from .role import Role

class User(Base):
    """
    서비스에 가입하여 질문과 답변을 작성하는 사용자를 나타냅니다.
    username과 email은 전역적으로 유일하며, 비밀번호는 평문 대신 salt와 해시만 저장합니다.
    외부에 노출되는 식별자는 내부 id가 아닌 uuid입니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(200), unique=True, nullable=False, index=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    username = Column(String(30), unique=True, nullable=False, index=True)
    email = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    salt = Column(String(200), nullable=False)
    country = Column(String(30))
    about_me = Column(String(50))
    dob = Column(String(30))
    role = Column(Enum(Role, values_callable=lambda roles: [r.value for r in roles]), nullable=False, default=Role.NONADMIN)
    contact_number = Column(String(30))

    sessions = relationship("UserAuth", back_populates="user", cascade="all, delete-orphan")
    questions = relationship("Question", back_populates="user", cascade="all, delete-orphan")
    answers = relationship("Answer", back_populates="user", cascade="all, delete-orphan")
