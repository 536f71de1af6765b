"""
Prompts API: GET /api/prompts?level&topicId&continue&customTopic&freeMode.
Query parameters are validated by hand so that bad input is a 400, not FastAPI's 422.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_prompt_generator, get_storage
from app.config import settings
from app.database import MAX_DB_INT
from app.schemas.prompt import CEFR_LEVELS, GamePrompts
from app.services.prompt_generator import PromptGenerator
from app.services.prompt_service import TopicNotFoundError, get_or_generate_prompts
from app.services.storage import Storage

router = APIRouter(prefix="/api/prompts", tags=["prompts"])
logger = logging.getLogger(__name__)


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


@router.get("", response_model=GamePrompts)
def get_prompts(
    level: str | None = Query(None),
    topic_id: str | None = Query(None, alias="topicId"),
    continue_: str | None = Query(None, alias="continue"),
    custom_topic: str | None = Query(None, alias="customTopic"),
    free_mode: str | None = Query(None, alias="freeMode"),
    storage: Storage = Depends(get_storage),
    generator: PromptGenerator = Depends(get_prompt_generator),
):
    """Three-stage prompt set for a level and topic, cached unless continue=true."""
    if not level or not topic_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Level and topicId are required")
    if level not in CEFR_LEVELS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"level must be one of {', '.join(CEFR_LEVELS)}",
        )
    try:
        parsed_topic_id = int(topic_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="topicId must be an integer")
    if not 0 <= parsed_topic_id <= MAX_DB_INT:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="topicId is out of range")

    try:
        return get_or_generate_prompts(
            storage,
            generator,
            level,
            parsed_topic_id,
            continue_flag=_flag(continue_),
            custom_topic=custom_topic,
            free_mode=_flag(free_mode),
        )
    except TopicNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")
    except Exception as e:
        storage.db.rollback()
        logger.exception("Error generating prompts: %s", e)
        detail = "Failed to generate prompts"
        if settings.debug:
            detail = f"Failed to generate prompts: {type(e).__name__}: {e}"
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
