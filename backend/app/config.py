"""
Application configuration from environment variables.
Loads .env from the backend directory so API keys are found regardless of cwd.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default model for generateContent (v1beta). gemini-1.5-flash is retired.
_DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Models that return 404 or are unsupported. Normalized at config load to _DEFAULT_GEMINI_MODEL.
_UNSUPPORTED_GEMINI_MODELS = frozenset({
    "gemini-1.5-flash-002", "gemini-1.5-flash-001", "gemini-1.5-flash",
    "gemini-1.5-pro", "gemini-1.5-pro-001", "gemini-1.5-pro-002",
    "gemini-2.0-flash", "gemini-2.0-flash-001", "gemini-2.0-flash-lite", "gemini-2.0-flash-lite-001",
})


def normalize_gen_model(v: str) -> str:
    """Ensure gen_model_name is supported by generateContent (avoids 404 from old .env)."""
    s = (v or _DEFAULT_GEMINI_MODEL).strip()
    if not s:
        return _DEFAULT_GEMINI_MODEL
    if s in _UNSUPPORTED_GEMINI_MODELS or s.startswith("gemini-1.5-") or s.startswith("gemini-2.0-flash"):
        return _DEFAULT_GEMINI_MODEL
    return s


# .env next to backend/ (parent of app/); load explicitly so the key is set even when run from repo root
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: sqlite for local use, postgresql in production
    database_url: str = "sqlite:///./esl_practice.db"

    env: str = ""
    debug: bool = False

    # LLM: Gemini. Without GEMINI_API_KEY every request is served from the fallback prompts.
    gemini_api_key: str = ""
    gen_model_name: str = _DEFAULT_GEMINI_MODEL
    gemini_max_output_tokens: int = 1024
    # High temperature; the instruction also carries a random seed for variety.
    gemini_temperature: float = 1.0

    @field_validator("gen_model_name", mode="before")
    @classmethod
    def _resolve_gen_model(cls, v: str) -> str:
        return normalize_gen_model(v) if isinstance(v, str) else _DEFAULT_GEMINI_MODEL

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    @property
    def active_llm_model(self) -> str:
        """Model name for display/logging."""
        return (self.gen_model_name or _DEFAULT_GEMINI_MODEL).strip()


settings = Settings()
