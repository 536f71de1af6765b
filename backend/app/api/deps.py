"""
Shared dependencies: Storage over the request's DB session, PromptGenerator over the
application's text generator (created at startup, see app.main).
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.prompt_generator import PromptGenerator
from app.services.storage import Storage


def get_storage(db: Session = Depends(get_db)) -> Storage:
    return Storage(db)


def get_prompt_generator(request: Request) -> PromptGenerator:
    """PromptGenerator bound to app.state.text_generator; None there means fallback prompts only."""
    return PromptGenerator(getattr(request.app.state, "text_generator", None))
