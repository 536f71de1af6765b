"""
Achievements API: GET /api/achievements (starting achievement set for a new game).
"""
from fastapi import APIRouter

from app.schemas.game_record import AchievementResponse
from app.services.gamification import DEFAULT_ACHIEVEMENTS

router = APIRouter(prefix="/api/achievements", tags=["achievements"])


@router.get("", response_model=list[AchievementResponse], response_model_exclude_none=True)
def list_achievements():
    """Default achievements, all locked; progress-based ones start at 0."""
    return [AchievementResponse.model_validate(a) for a in DEFAULT_ACHIEVEMENTS]
