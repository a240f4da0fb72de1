from .role import Role
from .user import User
from .user_auth import UserAuth
from .question import Question
from .answer import Answer
