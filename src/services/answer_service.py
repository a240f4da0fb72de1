import logging
import uuid
from typing import Dict, Any, List

from src.database import models
from src.repositories.interfaces import IAnswerRepository, IQuestionRepository
from src.services.auth_guard import AuthorizationGuard, Access
from src.services.exceptions import AnswerNotFoundError, QuestionNotFoundError
from src.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


class AnswerService:
    def __init__(self, answer_repo: IAnswerRepository, question_repo: IQuestionRepository, guard: AuthorizationGuard):
        self.answer_repo = answer_repo
        self.question_repo = question_repo
        self.guard = guard

    def _get_answer(self, answer_uuid: str) -> models.Answer:
        answer = self.answer_repo.find_by_uuid(answer_uuid)
        if not answer:
            raise AnswerNotFoundError()
        return answer

    def create_answer(self, access_token: str, question_uuid: str, content: str) -> Dict[str, Any]:
        """
        질문에 답변을 작성합니다.

        Raises:
            QuestionNotFoundError: 해당 uuid의 질문이 없을 때.
        """
        context = self.guard.authorize(access_token, action="post an answer")
        question = self.question_repo.find_by_uuid(question_uuid)
        if not question:
            raise QuestionNotFoundError("The question entered is invalid")
        if not content:
            raise ValueError("'answer' is required.")

        answer = models.Answer(
            uuid=str(uuid.uuid4()), answer=content, date=utcnow(), user=context.user, question=question
        )
        created = self.answer_repo.create(answer)
        logger.info("Answer %s created on question %s by user %s.", created.uuid, question_uuid, context.user_uuid)
        return {"id": created.uuid, "status": "ANSWER CREATED"}

    def edit_answer(self, access_token: str, answer_uuid: str, content: str) -> Dict[str, Any]:
        """
        답변 내용을 수정합니다. 작성자 또는 관리자만 가능합니다.

        Raises:
            AnswerNotFoundError: 해당 uuid의 답변이 없을 때.
            ForbiddenError: 작성자도 관리자도 아닐 때.
        """
        answer = None

        def owner() -> str:
            nonlocal answer
            answer = self._get_answer(answer_uuid)
            return answer.user.uuid

        self.guard.authorize(
            access_token, Access.OWNER_OR_ADMIN, owner=owner, action="edit an answer",
            forbidden_message="Only the answer owner or admin can edit the answer",
        )
        if not content:
            raise ValueError("'content' is required.")

        answer.answer = content
        answer.date = utcnow()
        edited = self.answer_repo.update(answer)
        return {"id": edited.uuid, "status": "ANSWER EDITED"}

    def delete_answer(self, access_token: str, answer_uuid: str) -> Dict[str, Any]:
        """
        답변을 삭제합니다. 작성자 또는 관리자만 가능합니다.

        Raises:
            AnswerNotFoundError: 해당 uuid의 답변이 없을 때.
            ForbiddenError: 작성자도 관리자도 아닐 때.
        """
        answer = None

        def owner() -> str:
            nonlocal answer
            answer = self._get_answer(answer_uuid)
            return answer.user.uuid

        context = self.guard.authorize(
            access_token, Access.OWNER_OR_ADMIN, owner=owner, action="delete an answer",
            forbidden_message="Only the answer owner or admin can delete the answer",
        )
        self.answer_repo.delete(answer)
        logger.info("Answer %s deleted by user %s.", answer_uuid, context.user_uuid)
        return {"id": answer_uuid, "status": "ANSWER DELETED"}

    def list_answers(self, access_token: str, question_uuid: str) -> List[Dict[str, Any]]:
        """특정 질문에 달린 모든 답변을 조회합니다."""
        self.guard.authorize(access_token, action="get the answers")
        question = self.question_repo.find_by_uuid(question_uuid)
        if not question:
            raise QuestionNotFoundError("The question with entered uuid whose details are to be seen does not exist")
        return [
            {"id": a.uuid, "answer_content": a.answer, "question_content": question.content}
            for a in self.answer_repo.list_by_question(question)
        ]
