"""
LLM abstraction: generate_text(instruction) -> raw model text.
Gemini only. Uses GEN_MODEL_NAME and GEMINI_API_KEY.
"""
from app.llm.base import TextGenerator
from app.llm.gemini_impl import GeminiService, get_text_generator

__all__ = ["TextGenerator", "GeminiService", "get_text_generator"]
