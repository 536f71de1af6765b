"""
Prompt set schemas: one StagePrompt per stage, GamePrompts = exactly Ask, Tell, Reveal in that order.
GamePrompts is also the structural gate for LLM output (see app.services.prompt_generator).
"""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

STAGE_ORDER = ("Ask", "Tell", "Reveal")
HINT_WORD_COUNT = 5

CEFR_LEVELS = ("B1", "B1+", "B2", "B2+", "C1", "C2")
CefrLevel = Literal["B1", "B1+", "B2", "B2+", "C1", "C2"]


class StagePrompt(BaseModel):
    stage: Literal["Ask", "Tell", "Reveal"]
    question: str
    context: str
    hint_words: list[str] = Field(alias="hintWords")

    class Config:
        populate_by_name = True

    @field_validator("question", "context")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("hint_words")
    @classmethod
    def five_hint_words(cls, v: list[str]) -> list[str]:
        words = [w.strip() for w in v]
        if len(words) != HINT_WORD_COUNT:
            raise ValueError(f"hintWords must have exactly {HINT_WORD_COUNT} items")
        if not all(words):
            raise ValueError("hintWords must not contain empty words")
        return words


class GamePrompts(BaseModel):
    stages: list[StagePrompt]

    @field_validator("stages")
    @classmethod
    def ask_tell_reveal(cls, v: list[StagePrompt]) -> list[StagePrompt]:
        if tuple(s.stage for s in v) != STAGE_ORDER:
            raise ValueError("stages must be exactly Ask, Tell, Reveal in that order")
        return v
