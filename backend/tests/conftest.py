"""
Shared fixtures: in-memory SQLite (seeded topics) per test, a fake text generator,
and a TestClient with get_db / get_prompt_generator overridden. Startup hooks are not run,
so no real Gemini client is created.
"""
import json

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import init_db
from app.services.prompt_generator import PromptGenerator
from app.services.storage import Storage


VALID_STAGES = [
    {
        "stage": "Ask",
        "question": "Ask your partner about the strangest dish they have tried.",
        "context": "Find out where and why they ate it.",
        "hintWords": ["flavour", "texture", "brave", "spicy", "local"],
    },
    {
        "stage": "Tell",
        "question": "Tell your partner about a meal your family cooks together.",
        "context": "Describe who does what in the kitchen.",
        "hintWords": ["recipe", "chop", "stir", "tradition", "share"],
    },
    {
        "stage": "Reveal",
        "question": "Which food would you never give up, even for a month?",
        "context": "Explain what makes it special to you.",
        "hintWords": ["craving", "comfort", "habit", "treat", "miss"],
    },
]


class FakeTextGenerator:
    """TextGenerator stand-in: returns a canned reply or raises, recording every instruction."""

    def __init__(self, reply: str | None = None, error: Exception | None = None) -> None:
        self.reply = reply if reply is not None else json.dumps({"stages": VALID_STAGES})
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    def generate_text(self, instruction: str) -> str:
        self.calls.append(instruction)
        if self.error is not None:
            raise self.error
        return self.reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def valid_reply() -> str:
    return json.dumps({"stages": VALID_STAGES})


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage(db_session) -> Storage:
    return Storage(db_session)


@pytest.fixture
def text_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def prompt_generator(text_generator) -> PromptGenerator:
    return PromptGenerator(text_generator)


@pytest.fixture
def topic_ids(storage) -> dict[str, int]:
    """Seeded topic name -> id."""
    return {t.name: t.id for t in storage.get_all_topics()}


@pytest.fixture
def client(db_session, prompt_generator):
    from fastapi.testclient import TestClient
    from app.api.deps import get_prompt_generator
    from app.database import get_db
    from app.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_prompt_generator] = lambda: prompt_generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_text_generator():
    """Factory for FakeTextGenerator with a custom reply or error."""
    return FakeTextGenerator
