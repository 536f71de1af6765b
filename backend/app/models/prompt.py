"""
Prompt: one stage (Ask | Tell | Reveal) of a generated prompt set.
Inserted in batches of three sharing a session_id; never updated or deleted.
The autoincrement id is the recency order used by cached reads.
"""
from datetime import datetime
from sqlalchemy import String, Integer, Text, DateTime, CheckConstraint, Index
from sqlalchemy.types import JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.database import Base


class Prompt(Base):
    __tablename__ = "prompts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No FK constraint: free-mode custom topics are stored under whatever topicId the client sent
    topic_id: Mapped[int] = mapped_column(Integer, nullable=False)
    level: Mapped[str] = mapped_column(String(8), nullable=False)
    stage: Mapped[str] = mapped_column(String(10), nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    context: Mapped[str] = mapped_column(Text, nullable=False)
    hint_words: Mapped[list] = mapped_column(JSON, nullable=False)
    session_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    custom_topic: Mapped[str | None] = mapped_column(String(255), nullable=True)  # set for free-mode custom topics
    # "metadata" is reserved on declarative classes; column keeps the wire name
    prompt_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)  # {sessionId, timestamp, aspect}
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint("stage IN ('Ask', 'Tell', 'Reveal')", name="prompts_stage_check"),
        Index("ix_prompts_level_topic_id", "level", "topic_id"),
    )
