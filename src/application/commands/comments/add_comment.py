"""
Add Comment Command - apply one operation as a reply.

Handler steps:
1. Parse the operation token (unknown tokens never reach the evaluator)
2. Verify the acting user and the discussion exist
3. Resolve the previous number: parent's stored result, or the discussion's start number
4. Evaluate once and persist the comment together with its result

Every check happens before the write, so a rejected comment leaves no trace.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.comment import Comment, CommentDraft
from src.domain.exceptions import (
    AuthenticationError,
    DivisionByZeroError,
    DomainValidationError,
    InvalidOperationError,
    UnknownDiscussionError,
    UnresolvedParentError,
)
from src.domain.ports.repositories import (
    CommentRepository,
    DiscussionRepository,
    UserRepository,
)
from src.domain.services.calculator import evaluate
from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.operation import Operation
from src.domain.value_objects.user_id import UserId
from src.observability.metrics import (
    MetricsErrorType,
    increment_comment_created,
    increment_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddCommentCommand(Command[Comment]):
    discussion_id: DiscussionId
    user_id: UserId
    operation: str
    operand: float
    parent_id: Optional[CommentId] = None


class AddCommentHandler(CommandHandler[Comment]):
    def __init__(
        self,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
    ):
        self._discussion_repository = discussion_repository
        self._comment_repository = comment_repository
        self._user_repository = user_repository

    async def execute(self, command: AddCommentCommand) -> Comment:
        try:
            operation = Operation.parse(command.operation)
            if not math.isfinite(command.operand):
                raise DomainValidationError("Operand must be a finite number")

            user = await self._user_repository.get_by_id(command.user_id)
            if not user:
                raise AuthenticationError("User not found")

            previous = await self._resolve_previous_number(
                command.discussion_id, command.parent_id
            )
            result = evaluate(previous, operation, command.operand)
        except InvalidOperationError:
            increment_error(MetricsErrorType.INVALID_OPERATION)
            raise
        except DivisionByZeroError:
            increment_error(MetricsErrorType.DIVISION_BY_ZERO)
            raise
        except (UnknownDiscussionError, UnresolvedParentError):
            increment_error(MetricsErrorType.UNRESOLVED_REFERENCE)
            raise

        draft = CommentDraft(
            discussion_id=command.discussion_id,
            parent_id=command.parent_id,
            user_id=command.user_id,
            operation=operation,
            operand=command.operand,
        )
        comment = await self._comment_repository.add(draft, result)
        increment_comment_created(operation.value)

        logger.info(
            f"Comment {comment.id.value} in discussion {comment.discussion_id.value}: "
            f"{previous} {operation.value} {command.operand} = {result}"
        )
        return comment

    async def _resolve_previous_number(
        self, discussion_id: DiscussionId, parent_id: Optional[CommentId]
    ) -> float:
        """
        The number an operation applies to.

        Raises:
            UnknownDiscussionError: discussion does not exist
            UnresolvedParentError: parent does not exist or is in another discussion
        """
        discussion = await self._discussion_repository.get_by_id(discussion_id)
        if not discussion:
            raise UnknownDiscussionError(discussion_id.value)

        if parent_id is None:
            return discussion.start_number

        parent = await self._comment_repository.get_by_id(parent_id)
        if not parent or parent.discussion_id != discussion_id:
            raise UnresolvedParentError(parent_id.value, discussion_id.value)
        return parent.result
