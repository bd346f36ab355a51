"""
Comments API Router - attach an operation to a discussion or another comment.

Request:  {"discussionId": 1, "parentId": 2, "operation": "MULTIPLY", "operand": 3}
Response: the stored comment, including the result computed from its parent
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import Field
from src.application.commands.comments import AddCommentCommand, AddCommentHandler
from src.application.dto.discussion import CamelModel, CommentDTO
from src.domain.exceptions import (
    AuthenticationError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.discussion_id import DiscussionId
from src.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class CreateCommentRequest(CamelModel):
    discussion_id: int = Field(gt=0, strict=True)
    parent_id: Optional[int] = Field(default=None, gt=0, strict=True)
    operation: str
    # Strict: booleans and numeric strings are rejected, JSON ints are accepted
    operand: float = Field(strict=True)


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/comments", tags=["comments"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=CommentDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_comment(
    request: CreateCommentRequest,
    handler: FromDishka[AddCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Apply an operation to the previous number and store the result.

    Errors:
    - 400: unknown operation, division by zero, non-finite operand or result
    - 404: discussion not found, or parent not found in that discussion
    """
    command = AddCommentCommand(
        discussion_id=DiscussionId(request.discussion_id),
        parent_id=CommentId(request.parent_id) if request.parent_id else None,
        user_id=current_user.id,
        operation=request.operation,
        operand=request.operand,
    )
    try:
        comment = await handler.execute(command)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return CommentDTO.from_entity(comment)
