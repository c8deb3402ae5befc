"""Tests for the LLM layer: provider selection, settings lookup and request building."""

from types import SimpleNamespace

import pytest

from thumbaudit.config import Settings
from thumbaudit.errors import ConfigurationError
from thumbaudit.llm import get_provider, provider_from_settings
from thumbaudit.llm.anthropic_provider import AnthropicProvider
from thumbaudit.llm.gemini_provider import GeminiProvider
from thumbaudit.llm.openai_provider import OpenAIProvider


def test_unknown_provider():
    with pytest.raises(ValueError, match="Unknown LLM provider"):
        get_provider("mistral", api_key="x")


def test_missing_api_key():
    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        get_provider("gemini", api_key=None)


@pytest.mark.parametrize(
    "name,cls",
    [("gemini", GeminiProvider), ("openai", OpenAIProvider), ("anthropic", AnthropicProvider)],
)
def test_get_provider_returns_implementation(name, cls):
    assert isinstance(get_provider(name, api_key="test-key"), cls)


def test_provider_from_settings_uses_configured_default():
    settings = Settings(thumbaudit_llm_provider="openai", openai_api_key="sk-test")
    assert isinstance(provider_from_settings(settings), OpenAIProvider)


def test_provider_from_settings_override():
    settings = Settings(thumbaudit_llm_provider="openai", gemini_api_key="g-test")
    assert isinstance(provider_from_settings(settings, "Gemini"), GeminiProvider)


def test_settings_unknown_provider():
    with pytest.raises(ConfigurationError):
        Settings().api_key_for("mistral")
    with pytest.raises(ConfigurationError):
        Settings().model_for("mistral")


def test_settings_cors_list():
    settings = Settings(cors_origins=" http://a.test , ,http://b.test")
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


def test_gemini_request_parts(own_image, competitor_images):
    provider = GeminiProvider(api_key="test-key", model="gemini-test")
    captured = {}

    def generate_content(model, contents):
        captured["model"] = model
        captured["contents"] = contents
        return SimpleNamespace(text="report")

    provider._client = SimpleNamespace(models=SimpleNamespace(generate_content=generate_content))
    assert provider.complete("prompt", images=[own_image, *competitor_images]) == "report"
    parts = captured["contents"]
    assert captured["model"] == "gemini-test"
    assert parts[0].text == "prompt"
    assert [p.inline_data.mime_type for p in parts[1:]] == [
        "image/png",
        "image/jpeg",
        "image/png",
        "image/webp",
    ]
    assert parts[1].inline_data.data == own_image.data


def test_gemini_empty_text_becomes_empty_string():
    provider = GeminiProvider(api_key="test-key")
    provider._client = SimpleNamespace(
        models=SimpleNamespace(generate_content=lambda model, contents: SimpleNamespace(text=None))
    )
    assert provider.complete("prompt") == ""


def test_openai_request_messages(own_image):
    provider = OpenAIProvider(api_key="sk-test")
    captured = {}

    def create(**kwargs):
        captured.update(kwargs)
        message = SimpleNamespace(content="report")
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    assert provider.complete("prompt", images=[own_image]) == "report"
    content = captured["messages"][0]["content"]
    assert content[0] == {"type": "text", "text": "prompt"}
    assert content[1]["image_url"]["url"] == own_image.to_data_url()


def test_anthropic_request_blocks(own_image):
    provider = AnthropicProvider(api_key="test-key")
    captured = {}

    def create(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text="report")])

    provider._client = SimpleNamespace(messages=SimpleNamespace(create=create))
    assert provider.complete("prompt", images=[own_image]) == "report"
    blocks = captured["messages"][0]["content"]
    assert blocks[0]["text"] == "prompt"
    assert blocks[1]["source"] == {
        "type": "base64",
        "media_type": "image/png",
        "data": own_image.to_base64(),
    }
    assert captured["max_tokens"] == 8192
