# src/services/exceptions.py


class QuoraError(Exception):
    """
    이 서비스의 모든 비즈니스 오류의 기반 클래스.
    각 오류는 고정된 짧은 코드(code)와 사람이 읽을 수 있는 메시지(message)를 가집니다.
    """
    code = ""
    default_message = ""

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

# --- Authorization Exceptions ---
class UnauthenticatedError(QuoraError):
    """토큰에 해당하는 세션이 없을 때"""
    code = "ATHR-001"
    default_message = "User has not signed in"

class SessionExpiredError(QuoraError):
    """로그아웃했거나 만료된 세션일 때"""
    code = "ATHR-002"
    default_message = "User is signed out"

class ForbiddenError(QuoraError):
    """소유자도 관리자도 아닌 사용자가 작업을 시도할 때"""
    code = "ATHR-003"
    default_message = "Only the owner or admin can perform this action"

# --- Signup / Signin / Signout Exceptions ---
class DuplicateUsernameError(QuoraError):
    """이미 등록된 username으로 가입하려 할 때"""
    code = "SGR-001"
    default_message = "Try any other Username, this Username has already been taken"

class DuplicateEmailError(QuoraError):
    """이미 등록된 email로 가입하려 할 때"""
    code = "SGR-002"
    default_message = "This user has already been registered, try with any other emailId"

class UnknownUserError(QuoraError):
    """로그인 시 username이 존재하지 않을 때"""
    code = "ATH-001"
    default_message = "This username does not exist"

class BadCredentialError(QuoraError):
    """로그인 시 비밀번호가 일치하지 않을 때"""
    code = "ATH-002"
    default_message = "Password failed"

class NotSignedInError(QuoraError):
    """로그아웃할 세션이 없거나 이미 로그아웃된 세션일 때"""
    code = "SGR-001"
    default_message = "User is not Signed in"

# --- Not Found Exceptions ---
class UserNotFoundError(QuoraError):
    """사용자를 찾을 수 없을 때"""
    code = "USR-001"
    default_message = "User with entered uuid does not exist"

class QuestionNotFoundError(QuoraError):
    """질문을 찾을 수 없을 때"""
    code = "QUES-001"
    default_message = "Entered question uuid does not exist"

class AnswerNotFoundError(QuoraError):
    """답변을 찾을 수 없을 때"""
    code = "ANS-001"
    default_message = "Entered answer uuid does not exist"
