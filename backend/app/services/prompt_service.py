"""
Prompt request flow: serve the cached set for (level, topic) or generate, persist and return a fresh one.

Cache policy: a non-continue request for a curated topic returns the most recent three rows
(by insertion order) when at least three exist. continue=true always regenerates. Free-mode
custom topics always regenerate and their rows never feed the curated cache.
All writes are appends; concurrent misses may each generate and store their own batch.
"""
import logging
import time
import uuid

from app.models.prompt import Prompt
from app.schemas.prompt import STAGE_ORDER, GamePrompts, StagePrompt
from app.services.prompt_generator import PromptGenerator
from app.services.storage import Storage

logger = logging.getLogger(__name__)

ASPECT_WORDS = 8


class TopicNotFoundError(Exception):
    def __init__(self, topic_id: int) -> None:
        super().__init__(f"Topic {topic_id} not found")
        self.topic_id = topic_id


def aspect_signature(question: str) -> str:
    """First few words of a question; a lightweight fingerprint of the topic aspect it covers."""
    return " ".join(question.split()[:ASPECT_WORDS])


def new_session_id() -> str:
    return f"session_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def cached_prompts(storage: Storage, level: str, topic_id: int) -> GamePrompts | None:
    """Most recent cached set for (level, topic_id) in stage order, or None on a miss."""
    size = len(STAGE_ORDER)
    rows = storage.get_prompts_by_level_and_topic(level, topic_id, limit=size)
    if len(rows) < size:
        return None
    return _rows_to_game_prompts(rows)


def _rows_to_game_prompts(rows: list[Prompt]) -> GamePrompts | None:
    order = {stage: i for i, stage in enumerate(STAGE_ORDER)}
    rows = sorted(rows, key=lambda r: (order.get(r.stage, len(order)), -r.id))
    try:
        return GamePrompts(
            stages=[
                StagePrompt(stage=r.stage, question=r.question, context=r.context, hint_words=list(r.hint_words or []))
                for r in rows
            ]
        )
    except ValueError as e:
        # Interleaved batches from concurrent writers; treat as a miss
        logger.warning("Cached prompts do not form a valid set (%s); regenerating", e)
        return None


def get_or_generate_prompts(
    storage: Storage,
    generator: PromptGenerator,
    level: str,
    topic_id: int,
    continue_flag: bool = False,
    custom_topic: str | None = None,
    free_mode: bool = False,
) -> GamePrompts:
    """
    Resolve the topic name, then serve from cache or generate and persist a new set.
    Raises TopicNotFoundError for an unknown curated topic (no generator call, no writes).
    Store errors propagate; the generator itself never raises.
    """
    custom = (custom_topic or "").strip() if free_mode else ""
    if custom:
        topic_name = custom
    else:
        topic = storage.get_topic_by_id(topic_id)
        if topic is None:
            raise TopicNotFoundError(topic_id)
        topic_name = topic.name

    if continue_flag:
        logger.info("Continue requested; regenerating prompts: level=%s, topic=%s", level, topic_name)
    elif custom:
        logger.info("Custom topic; generating prompts: level=%s, topic=%s", level, topic_name)
    else:
        cached = cached_prompts(storage, level, topic_id)
        if cached is not None:
            logger.info("Serving cached prompts: level=%s, topic=%s", level, topic_name)
            return cached
        logger.info("No cached prompts; generating: level=%s, topic=%s", level, topic_name)

    prompts = generator.generate(level, topic_name)

    session_id = new_session_id()
    timestamp = int(time.time() * 1000)
    storage.create_prompt_batch([
        {
            "topic_id": topic_id,
            "level": level,
            "stage": s.stage,
            "question": s.question,
            "context": s.context,
            "hint_words": s.hint_words,
            "session_id": session_id,
            "custom_topic": custom or None,
            "metadata": {
                "sessionId": session_id,
                "timestamp": timestamp,
                "aspect": aspect_signature(s.question),
            },
        }
        for s in prompts.stages
    ])
    return prompts
