"""
GameRecord: summary of a completed practice session, saved for the teacher dashboard.
Write-only from the game's point of view; listed per class.
"""
from datetime import datetime
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.database import Base


class GameRecord(Base):
    __tablename__ = "game_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_name: Mapped[str] = mapped_column(String(255), nullable=False)
    class_id: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    level: Mapped[str] = mapped_column(String(8), nullable=False)
    topic_id: Mapped[int] = mapped_column(Integer, nullable=False)
    topic_name: Mapped[str] = mapped_column(String(255), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    achievements_unlocked: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    keywords_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rounds_completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
