"""
Topics API: GET /api/topics (home screen list), GET /api/topics/{id} (game header).
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_storage
from app.database import MAX_DB_INT
from app.models.topic import Topic
from app.schemas.topic import TopicResponse
from app.services.storage import Storage

router = APIRouter(prefix="/api/topics", tags=["topics"])


def _topic_to_response(t: Topic) -> TopicResponse:
    return TopicResponse(id=t.id, name=t.name, description=t.description, icon=t.icon, color_class=t.color_class)


@router.get("", response_model=list[TopicResponse])
def list_topics(storage: Storage = Depends(get_storage)):
    return [_topic_to_response(t) for t in storage.get_all_topics()]


@router.get("/{topic_id}", response_model=TopicResponse)
def get_topic(topic_id: int, storage: Storage = Depends(get_storage)):
    topic = storage.get_topic_by_id(topic_id) if 1 <= topic_id <= MAX_DB_INT else None
    if topic is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")
    return _topic_to_response(topic)
