"""
Discussions API Router.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
                                                  ↓
  HTTP Response ← Router ← DiscussionDTO ← DiscussionThread (aggregated forest)
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import Field
from src.application.commands.discussions import (
    CreateDiscussionCommand,
    CreateDiscussionHandler,
)
from src.application.dto.discussion import CamelModel, DiscussionDTO
from src.application.queries.discussions import (
    GetDiscussionHandler,
    GetDiscussionQuery,
    ListDiscussionsHandler,
    ListDiscussionsQuery,
)
from src.domain.exceptions import (
    AuthenticationError,
    DomainValidationError,
    UnknownDiscussionError,
)
from src.domain.services.discussion_aggregator import DiscussionThread
from src.domain.value_objects.discussion_id import DiscussionId
from src.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class CreateDiscussionRequest(CamelModel):
    """Request body: {"startNumber": 10}"""

    start_number: float = Field(strict=True)


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/discussions", tags=["discussions"])


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=list[DiscussionDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_discussions(handler: FromDishka[ListDiscussionsHandler]):
    """
    List every discussion with its comment tree, newest discussion first.

    Roots and replies are in creation order. A comment whose parent is
    missing is shown as a root rather than failing the response.
    """
    threads = await handler.execute(ListDiscussionsQuery())
    return [DiscussionDTO.from_thread(thread) for thread in threads]


@router.get(
    "/{discussion_id}",
    response_model=DiscussionDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_discussion(
    discussion_id: int,
    handler: FromDishka[GetDiscussionHandler],
):
    """Get one discussion with its comment tree."""
    try:
        thread = await handler.execute(
            GetDiscussionQuery(discussion_id=DiscussionId(discussion_id))
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except UnknownDiscussionError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return DiscussionDTO.from_thread(thread)


@router.post(
    "",
    response_model=DiscussionDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_discussion(
    request: CreateDiscussionRequest,
    handler: FromDishka[CreateDiscussionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Start a discussion from a seed number. Returned with an empty comment list."""
    try:
        discussion = await handler.execute(
            CreateDiscussionCommand(
                user_id=current_user.id, start_number=request.start_number
            )
        )
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return DiscussionDTO.from_thread(DiscussionThread(discussion=discussion))
