"""
Game records API: POST /api/game-records (save a finished session), GET /api/game-records?classId=.
The performance rating is computed server-side from score and unlocked achievements.
"""
from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_storage
from app.models.game_record import GameRecord
from app.schemas.game_record import GameRecordCreate, GameRecordListResponse, GameRecordResponse
from app.services.gamification import performance_rating
from app.services.storage import Storage

router = APIRouter(prefix="/api/game-records", tags=["game-records"])


def _record_to_response(r: GameRecord) -> GameRecordResponse:
    return GameRecordResponse(
        id=r.id,
        student_name=r.student_name,
        class_id=r.class_id,
        level=r.level,
        topic_id=r.topic_id,
        topic_name=r.topic_name,
        score=r.score,
        achievements_unlocked=r.achievements_unlocked,
        keywords_used=r.keywords_used,
        rounds_completed=r.rounds_completed,
        rating=r.rating,
        created_at=r.created_at,
    )


@router.post("", response_model=GameRecordResponse, status_code=status.HTTP_201_CREATED)
def create_game_record(data: GameRecordCreate, storage: Storage = Depends(get_storage)):
    fields = data.model_dump()
    fields["rating"] = performance_rating(data.score, data.achievements_unlocked)
    return _record_to_response(storage.create_game_record(fields))


@router.get("", response_model=GameRecordListResponse)
def list_game_records(
    class_id: str | None = Query(None, alias="classId"),
    storage: Storage = Depends(get_storage),
):
    return GameRecordListResponse(items=[_record_to_response(r) for r in storage.list_game_records(class_id)])
