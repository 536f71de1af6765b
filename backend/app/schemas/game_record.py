"""
Game record schemas: camelCase on the wire, snake_case in Python.
"""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.database import MAX_DB_INT
from app.schemas.prompt import CefrLevel


class GameRecordCreate(BaseModel):
    student_name: str = Field(alias="studentName")
    class_id: str | None = Field(default=None, alias="classId")
    level: CefrLevel
    topic_id: int = Field(ge=0, le=MAX_DB_INT, alias="topicId")
    topic_name: str = Field(alias="topicName")
    score: int = Field(default=0, ge=0, le=MAX_DB_INT)
    achievements_unlocked: int = Field(default=0, ge=0, le=MAX_DB_INT, alias="achievementsUnlocked")
    keywords_used: int = Field(default=0, ge=0, le=MAX_DB_INT, alias="keywordsUsed")
    rounds_completed: int = Field(default=0, ge=0, le=MAX_DB_INT, alias="roundsCompleted")

    class Config:
        populate_by_name = True

    @field_validator("student_name")
    @classmethod
    def student_name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("studentName is required")
        return v


class GameRecordResponse(BaseModel):
    id: int
    student_name: str = Field(alias="studentName")
    class_id: str | None = Field(default=None, alias="classId")
    level: str
    topic_id: int = Field(alias="topicId")
    topic_name: str = Field(alias="topicName")
    score: int
    achievements_unlocked: int = Field(alias="achievementsUnlocked")
    keywords_used: int = Field(alias="keywordsUsed")
    rounds_completed: int = Field(alias="roundsCompleted")
    rating: str
    created_at: datetime | None = Field(default=None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class GameRecordListResponse(BaseModel):
    items: list[GameRecordResponse]


class AchievementResponse(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    is_unlocked: bool = Field(alias="isUnlocked")
    progress: int | None = None
    max_progress: int | None = Field(default=None, alias="maxProgress")

    class Config:
        populate_by_name = True
