"""
FastAPI application entrypoint.
APIs: topics, prompts, users, game records, achievements. Run with: uvicorn app.main:app --reload --port 8000

  - Topics:  GET /api/topics, GET /api/topics/{id}
  - Prompts: GET /api/prompts?level=B1&topicId=1&continue=false[&customTopic=...&freeMode=true]
  - Users:   POST /api/users, POST /api/users/login, GET /api/users/{id}
  - Game records: POST /api/game-records, GET /api/game-records?classId=...
  - Achievements: GET /api/achievements

The Gemini client is created at startup (app.state.text_generator) and closed at shutdown.
Without GEMINI_API_KEY the prompts endpoint serves the static fallback prompts.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.topics import router as topics_router
from app.api.prompts import router as prompts_router
from app.api.users import router as users_router
from app.api.game_records import router as game_records_router
from app.api.achievements import router as achievements_router

app = FastAPI(
    title="ESL Ask Tell Reveal API",
    description="Speaking practice prompts (Ask, Tell, Reveal) by CEFR level and topic.",
    version="0.1.0",
)

_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(topics_router)
app.include_router(prompts_router)
app.include_router(users_router)
app.include_router(game_records_router)
app.include_router(achievements_router)


@app.on_event("startup")
def startup():
    """Init DB (tables + topic seed) and the LLM client."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    _log = logging.getLogger("app.main")
    from app.database import init_db
    init_db()
    from app.llm import get_text_generator
    try:
        app.state.text_generator = get_text_generator()
    except ImportError as e:
        _log.error("Gemini SDK import failed. Install deps (pip install -e .). Error: %s", e)
        raise
    if app.state.text_generator is None:
        _log.warning("Gemini: No API key. Set GEMINI_API_KEY in backend/.env for generated prompts (using fallback).")


@app.on_event("shutdown")
def shutdown():
    generator = getattr(app.state, "text_generator", None)
    if generator is not None:
        generator.close()
    app.state.text_generator = None


@app.get("/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok", "llm_configured": getattr(app.state, "text_generator", None) is not None}
