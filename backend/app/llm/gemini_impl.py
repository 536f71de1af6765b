"""
Gemini (Google) text generation via google.genai (new SDK).
Uses GEN_MODEL_NAME (e.g. gemini-2.5-flash) and GEMINI_API_KEY.
One attempt per call: no retries, errors propagate to the caller.
"""
import logging
import os
import time

from app.config import settings, normalize_gen_model

logger = logging.getLogger(__name__)


def get_gemini_api_key() -> str:
    """Resolve Gemini API key from settings or env. Never log the key."""
    return (settings.gemini_api_key or os.environ.get("GEMINI_API_KEY") or "").strip()


def _resolve_model_name(name: str) -> str:
    """Return a model id that works with generateContent. Replace known-unsupported ids (e.g. from old .env)."""
    resolved = normalize_gen_model(name)
    if resolved != (name or "").strip():
        logger.info("Gemini: mapping unsupported model %s -> %s", name, resolved)
    return resolved


class GeminiService:
    """Google Gemini implementation of TextGenerator via google.genai SDK (generate_content)."""

    def __init__(self, model_name: str | None = None, api_key: str | None = None) -> None:
        from google import genai
        from google.genai import types
        key = api_key or get_gemini_api_key()
        self._client = genai.Client(api_key=key)
        self._types = types
        self._model_name = _resolve_model_name(model_name or settings.gen_model_name)

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate_text(self, instruction: str) -> str:
        config = self._types.GenerateContentConfig(
            max_output_tokens=settings.gemini_max_output_tokens,
            temperature=settings.gemini_temperature,
            response_mime_type="application/json",
        )
        t_start = time.perf_counter()
        logger.info("Gemini API request: model=%s, instruction_len=%s", self._model_name, len(instruction))
        response = self._client.models.generate_content(
            model=self._model_name,
            contents=instruction,
            config=config,
        )
        raw = (getattr(response, "text", None) or "").strip()
        inp = 0
        out = 0
        um = getattr(response, "usage_metadata", None)
        if um:
            inp = getattr(um, "prompt_token_count", 0) or 0
            out = getattr(um, "candidates_token_count", 0) or getattr(um, "output_token_count", 0) or 0
        logger.info(
            "Gemini API %.2fs: response_len=%s, input_tokens=%s, output_tokens=%s",
            time.perf_counter() - t_start,
            len(raw),
            inp,
            out,
        )
        return raw

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            close()


def get_text_generator() -> GeminiService | None:
    """Return a Gemini text generator if GEMINI_API_KEY is set; otherwise None (callers serve fallback prompts)."""
    key = get_gemini_api_key()
    if not key:
        logger.warning("GEMINI_API_KEY is empty or unset; prompts will come from the fallback table.")
        return None
    service = GeminiService(api_key=key)
    logger.info("Using LLM: %s (Gemini)", service.model_name)
    return service
