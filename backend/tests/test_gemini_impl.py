"""
Unit tests for the Gemini text generator: model resolution, key handling, and generate_text
against a stubbed google.genai client (no network).
"""
import pytest

from app.config import normalize_gen_model
from app.llm.gemini_impl import _resolve_model_name


def test_resolve_model_name_unsupported_mapped_to_fallback():
    """Unsupported model ids (e.g. from old .env) are mapped to gemini-2.5-flash to avoid 404."""
    assert _resolve_model_name("gemini-1.5-flash") == "gemini-2.5-flash"
    assert _resolve_model_name("gemini-1.5-flash-002") == "gemini-2.5-flash"
    assert _resolve_model_name("gemini-1.5-pro-001") == "gemini-2.5-flash"
    assert _resolve_model_name("gemini-2.0-flash") == "gemini-2.5-flash"


def test_resolve_model_name_supported_unchanged():
    assert _resolve_model_name("gemini-2.5-flash") == "gemini-2.5-flash"
    assert _resolve_model_name("gemini-2.5-pro") == "gemini-2.5-pro"


def test_resolve_model_name_empty_returns_fallback():
    assert _resolve_model_name("") == "gemini-2.5-flash"
    assert normalize_gen_model("   ") == "gemini-2.5-flash"


def test_get_text_generator_none_without_key(monkeypatch):
    """No GEMINI_API_KEY: no client, the prompt generator serves fallback prompts."""
    import app.llm.gemini_impl as gemini_impl

    monkeypatch.setattr(gemini_impl, "get_gemini_api_key", lambda: "")
    assert gemini_impl.get_text_generator() is None


def test_get_text_generator_returns_gemini_when_key_set(monkeypatch):
    pytest.importorskip("google.genai")
    import app.llm.gemini_impl as gemini_impl

    monkeypatch.setattr(gemini_impl, "get_gemini_api_key", lambda: "test-key-for-test")
    service = gemini_impl.get_text_generator()
    assert isinstance(service, gemini_impl.GeminiService)
    service.close()


def test_generate_text_single_call(monkeypatch):
    """generate_text makes one generate_content call and returns the stripped text."""
    pytest.importorskip("google.genai")
    from app.llm.gemini_impl import GeminiService

    calls = []
    mock_usage = type("Usage", (), {"prompt_token_count": 10, "candidates_token_count": 20})()
    mock_response = type("Response", (), {"text": '  {"stages": []}\n', "usage_metadata": mock_usage})()

    def fake_generate_content(model, contents, config):
        calls.append((model, contents, config))
        return mock_response

    service = GeminiService(model_name="gemini-2.5-flash", api_key="test-key")
    monkeypatch.setattr(service._client.models, "generate_content", fake_generate_content)

    assert service.generate_text("make prompts") == '{"stages": []}'
    assert len(calls) == 1
    assert calls[0][0] == "gemini-2.5-flash"
    assert calls[0][1] == "make prompts"
    assert calls[0][2].response_mime_type == "application/json"


def test_generate_text_propagates_errors(monkeypatch):
    """No retries: the first upstream error reaches the caller."""
    pytest.importorskip("google.genai")
    from app.llm.gemini_impl import GeminiService

    calls = []

    def failing(model, contents, config):
        calls.append(model)
        raise RuntimeError("503 overloaded")

    service = GeminiService(model_name="gemini-2.5-flash", api_key="test-key")
    monkeypatch.setattr(service._client.models, "generate_content", failing)
    with pytest.raises(RuntimeError):
        service.generate_text("make prompts")
    assert len(calls) == 1
