"""Health API Router - liveness plus row counts."""

from fastapi import APIRouter
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from src.application.queries.health import GetStoreStatsHandler, GetStoreStatsQuery


class HealthCounts(BaseModel):
    users: int
    discussions: int
    comments: int


class HealthResponse(BaseModel):
    status: str
    counts: HealthCounts


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
@inject
async def health(handler: FromDishka[GetStoreStatsHandler]):
    stats = await handler.execute(GetStoreStatsQuery())
    return HealthResponse(
        status="ok",
        counts=HealthCounts(
            users=stats.users, discussions=stats.discussions, comments=stats.comments
        ),
    )
