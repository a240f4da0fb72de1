# src/app.py
from wsgiref.simple_server import make_server
import base64
import binascii
import json
import logging
import re
from datetime import timedelta

from pydantic import ValidationError

# SQLAlchemy 및 의존성 임포트
from src.config import get_settings
from src.database.database import SessionLocal
from src.repositories.sqlalchemy.sqlalchemy_user_repository import SqlalchemyUserRepository
from src.repositories.sqlalchemy.sqlalchemy_user_auth_repository import SqlalchemyUserAuthRepository
from src.repositories.sqlalchemy.sqlalchemy_question_repository import SqlalchemyQuestionRepository
from src.repositories.sqlalchemy.sqlalchemy_answer_repository import SqlalchemyAnswerRepository
from src.services.password_hasher import PasswordHasher
from src.services.token_issuer import TokenIssuer
from src.services.session_service import SessionService
from src.services.auth_guard import AuthorizationGuard
from src.services.authentication_service import AuthenticationService
from src.services.question_service import QuestionService
from src.services.answer_service import AnswerService
from src.services.user_service import UserService
from src.services.exceptions import *

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        data = json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise ValueError("Invalid or missing JSON body.")
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object.")
    return data

def get_access_token(environ):
    """authorization 헤더에서 Bearer 토큰을 꺼냅니다. 'Bearer ' 접두사는 있어도 없어도 됩니다."""
    authorization = environ.get('HTTP_AUTHORIZATION', '').strip()
    if authorization.startswith('Bearer '):
        return authorization[len('Bearer '):].strip()
    return authorization

def get_basic_credentials(environ):
    """authorization 헤더의 'Basic base64(username:password)' 값을 해석합니다."""
    authorization = environ.get('HTTP_AUTHORIZATION', '')
    if not authorization.startswith('Basic '):
        raise ValueError("Missing 'Basic' credentials in 'authorization' header.")
    try:
        decoded = base64.b64decode(authorization[len('Basic '):], validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError):
        raise ValueError("Malformed 'Basic' credentials.")
    username, separator, password = decoded.partition(':')
    if not separator:
        raise ValueError("Malformed 'Basic' credentials.")
    return username, password

ERROR_STATUS_MAP = {
    UnauthenticatedError: "401 Unauthorized",
    SessionExpiredError: "401 Unauthorized",
    ForbiddenError: "403 Forbidden",
    DuplicateUsernameError: "409 Conflict",
    DuplicateEmailError: "409 Conflict",
    UnknownUserError: "401 Unauthorized",
    BadCredentialError: "401 Unauthorized",
    NotSignedInError: "401 Unauthorized",
    UserNotFoundError: "404 Not Found",
    QuestionNotFoundError: "404 Not Found",
    AnswerNotFoundError: "404 Not Found",
}

def handle_exception(e):
    if isinstance(e, QuoraError):
        # 비즈니스 오류는 예상된 결과이므로 스택 트레이스 없이 기록합니다.
        logger.info("Request rejected: %s %s", e.code, e.message)
        return ERROR_STATUS_MAP[type(e)], json.dumps({"code": e.code, "message": e.message})
    # 설정 검증 오류(pydantic ValidationError)는 500으로 처리합니다.
    if isinstance(e, ValueError) and not isinstance(e, ValidationError):
        return "400 Bad Request", json.dumps({"code": "BAD-REQUEST", "message": str(e)})
    logger.exception("Unhandled error while processing request")
    return "500 Internal Server Error", json.dumps({"code": "INTERNAL", "message": "Internal Server Error"})

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (의존성 주입 및 라우팅)
# --------------------------------------------------------------------------

def build_services(db_session, settings):
    """요청 단위 DB 세션으로 리포지토리와 서비스를 조립합니다."""
    user_repo = SqlalchemyUserRepository(db_session)
    user_auth_repo = SqlalchemyUserAuthRepository(db_session)
    question_repo = SqlalchemyQuestionRepository(db_session)
    answer_repo = SqlalchemyAnswerRepository(db_session)

    password_hasher = PasswordHasher(iterations=settings.password_hash_iterations)
    token_issuer = TokenIssuer(settings.secret_key, issuer=settings.token_issuer)
    session_service = SessionService(user_auth_repo, token_issuer, ttl=timedelta(hours=settings.session_ttl_hours))
    guard = AuthorizationGuard(session_service)

    return {
        'auth': AuthenticationService(user_repo, session_service, password_hasher),
        'question': QuestionService(question_repo, user_repo, guard),
        'answer': AnswerService(answer_repo, question_repo, guard),
        'user': UserService(user_repo, guard),
    }

def application(environ, start_response):
    db_session = SessionLocal()
    environ['response_headers'] = [("Content-Type", "application/json")]
    try:
        # 1. 의존성 생성 (Repositories -> Services)
        environ['services'] = build_services(db_session, get_settings())

        # 2. 라우팅 및 핸들러 실행
        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "")

        uuid_pattern = r'([a-zA-Z0-9_-]+)'
        routes = [
            ('POST', r'^/user/signup$', signup_handler),
            ('POST', r'^/user/signin$', signin_handler),
            ('POST', r'^/user/signout$', signout_handler),
            ('GET', rf'^/userprofile/{uuid_pattern}$', user_profile_handler),
            ('DELETE', rf'^/admin/user/{uuid_pattern}$', delete_user_handler),
            ('POST', r'^/question/create$', create_question_handler),
            ('GET', r'^/question/all$', list_questions_handler),
            ('PUT', rf'^/question/edit/{uuid_pattern}$', edit_question_handler),
            ('DELETE', rf'^/question/delete/{uuid_pattern}$', delete_question_handler),
            ('GET', rf'^/question/all/{uuid_pattern}$', list_questions_by_user_handler),
            ('POST', rf'^/question/{uuid_pattern}/answer/create$', create_answer_handler),
            ('PUT', rf'^/answer/edit/{uuid_pattern}$', edit_answer_handler),
            ('DELETE', rf'^/answer/delete/{uuid_pattern}$', delete_answer_handler),
            ('GET', rf'^/answer/all/{uuid_pattern}$', list_answers_handler),
        ]

        handler, path_args = None, []
        for route_method, pattern, route_handler in routes:
            if method == route_method and (match := re.match(pattern, path)):
                handler, path_args = route_handler, match.groups()
                break

        if handler:
            status, response_body = handler(environ, *path_args)
        else:
            status, response_body = '404 Not Found', json.dumps({'code': 'NOT-FOUND', 'message': 'Not Found'})

    except Exception as e:
        db_session.rollback()
        status, response_body = handle_exception(e)
    finally:
        db_session.close()

    start_response(status, environ['response_headers'])
    return [response_body.encode("utf-8")]

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def signup_handler(environ, *args):
    data = get_request_data(environ)
    result = environ['services']['auth'].signup(**data)
    return '201 Created', json.dumps(result)

def signin_handler(environ, *args):
    username, password = get_basic_credentials(environ)
    session = environ['services']['auth'].signin(username, password)
    environ['response_headers'].append(('access_token', session.access_token))
    return '200 OK', json.dumps({"id": session.user.uuid, "message": "SIGNED IN SUCCESSFULLY"})

def signout_handler(environ, *args):
    result = environ['services']['auth'].signout(get_access_token(environ))
    return '200 OK', json.dumps(result)

def user_profile_handler(environ, user_uuid):
    profile = environ['services']['user'].get_user_profile(get_access_token(environ), user_uuid)
    return '200 OK', json.dumps(profile)

def delete_user_handler(environ, user_uuid):
    result = environ['services']['user'].delete_user(get_access_token(environ), user_uuid)
    return '200 OK', json.dumps(result)

def create_question_handler(environ, *args):
    data = get_request_data(environ)
    result = environ['services']['question'].create_question(get_access_token(environ), data.get('content'))
    return '201 Created', json.dumps(result)

def list_questions_handler(environ, *args):
    questions = environ['services']['question'].list_questions(get_access_token(environ))
    return '200 OK', json.dumps(questions)

def edit_question_handler(environ, question_uuid):
    data = get_request_data(environ)
    result = environ['services']['question'].edit_question(get_access_token(environ), question_uuid, data.get('content'))
    return '200 OK', json.dumps(result)

def delete_question_handler(environ, question_uuid):
    result = environ['services']['question'].delete_question(get_access_token(environ), question_uuid)
    return '200 OK', json.dumps(result)

def list_questions_by_user_handler(environ, user_uuid):
    questions = environ['services']['question'].list_questions_by_user(get_access_token(environ), user_uuid)
    return '200 OK', json.dumps(questions)

def create_answer_handler(environ, question_uuid):
    data = get_request_data(environ)
    result = environ['services']['answer'].create_answer(get_access_token(environ), question_uuid, data.get('answer'))
    return '201 Created', json.dumps(result)

def edit_answer_handler(environ, answer_uuid):
    data = get_request_data(environ)
    result = environ['services']['answer'].edit_answer(get_access_token(environ), answer_uuid, data.get('content'))
    return '200 OK', json.dumps(result)

def delete_answer_handler(environ, answer_uuid):
    result = environ['services']['answer'].delete_answer(get_access_token(environ), answer_uuid)
    return '200 OK', json.dumps(result)

def list_answers_handler(environ, question_uuid):
    answers = environ['services']['answer'].list_answers(get_access_token(environ), question_uuid)
    return '200 OK', json.dumps(answers)


# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        with make_server(settings.host, settings.port, application) as httpd:
            logger.info("Serving Quora API on port %d...", settings.port)
            httpd.serve_forever()
    except OSError:
        logger.exception("Error starting server")
        raise
