from .user import IUserRepository
from .user_auth import IUserAuthRepository
from .question import IQuestionRepository
from .answer import IAnswerRepository
