import logging
import uuid
from typing import Dict, Any, List

from src.database import models
from src.repositories.interfaces import IQuestionRepository, IUserRepository
from src.services.auth_guard import AuthorizationGuard, Access
from src.services.exceptions import QuestionNotFoundError, UserNotFoundError
from src.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


class QuestionService:
    def __init__(self, question_repo: IQuestionRepository, user_repo: IUserRepository, guard: AuthorizationGuard):
        self.question_repo = question_repo
        self.user_repo = user_repo
        self.guard = guard

    def _get_question(self, question_uuid: str) -> models.Question:
        question = self.question_repo.find_by_uuid(question_uuid)
        if not question:
            raise QuestionNotFoundError()
        return question

    def create_question(self, access_token: str, content: str) -> Dict[str, Any]:
        """
        로그인한 사용자의 이름으로 새 질문을 게시합니다.

        Raises:
            UnauthenticatedError, SessionExpiredError: 인가에 실패했을 때.
            ValueError: 질문 내용이 비어 있을 때.
        """
        context = self.guard.authorize(access_token, action="post a question")
        if not content:
            raise ValueError("'content' is required.")

        question = models.Question(uuid=str(uuid.uuid4()), content=content, date=utcnow(), user=context.user)
        created = self.question_repo.create(question)
        logger.info("Question %s created by user %s.", created.uuid, context.user_uuid)
        return {"id": created.uuid, "status": "QUESTION CREATED"}

    def list_questions(self, access_token: str) -> List[Dict[str, Any]]:
        """모든 사용자가 게시한 질문 목록을 조회합니다."""
        self.guard.authorize(access_token, action="get all questions")
        return [{"id": q.uuid, "content": q.content} for q in self.question_repo.list_all()]

    def edit_question(self, access_token: str, question_uuid: str, content: str) -> Dict[str, Any]:
        """
        질문 내용을 수정합니다. 작성자 또는 관리자만 가능합니다.

        Raises:
            QuestionNotFoundError: 해당 uuid의 질문이 없을 때.
            ForbiddenError: 작성자도 관리자도 아닐 때.
        """
        question = None

        def owner() -> str:
            nonlocal question
            question = self._get_question(question_uuid)
            return question.user.uuid

        self.guard.authorize(
            access_token, Access.OWNER_OR_ADMIN, owner=owner, action="edit the question",
            forbidden_message="Only the question owner or admin can edit the question",
        )
        if not content:
            raise ValueError("'content' is required.")

        question.content = content
        question.date = utcnow()
        edited = self.question_repo.update(question)
        return {"id": edited.uuid, "status": "QUESTION EDITED"}

    def delete_question(self, access_token: str, question_uuid: str) -> Dict[str, Any]:
        """
        질문을 삭제합니다. 작성자 또는 관리자만 가능합니다.

        Raises:
            QuestionNotFoundError: 해당 uuid의 질문이 없을 때.
            ForbiddenError: 작성자도 관리자도 아닐 때.
        """
        question = None

        def owner() -> str:
            nonlocal question
            question = self._get_question(question_uuid)
            return question.user.uuid

        context = self.guard.authorize(
            access_token, Access.OWNER_OR_ADMIN, owner=owner, action="delete a question",
            forbidden_message="Only the question owner or admin can delete the question",
        )
        self.question_repo.delete(question)
        logger.info("Question %s deleted by user %s.", question_uuid, context.user_uuid)
        return {"id": question_uuid, "status": "QUESTION DELETED"}

    def list_questions_by_user(self, access_token: str, user_uuid: str) -> List[Dict[str, Any]]:
        """
        특정 사용자가 게시한 질문 목록을 조회합니다.

        Raises:
            UserNotFoundError: 해당 uuid의 사용자가 없을 때.
        """
        self.guard.authorize(access_token, action="get all questions posted by a specific user")
        user = self.user_repo.find_by_uuid(user_uuid)
        if not user:
            raise UserNotFoundError("User with entered uuid whose question details are to be seen does not exist")
        return [{"id": q.uuid, "content": q.content} for q in self.question_repo.list_by_user(user)]
