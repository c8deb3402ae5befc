"""LLM adapter layer: Gemini, OpenAI and Anthropic behind a common multimodal protocol."""

from thumbaudit.config import Settings
from thumbaudit.errors import ConfigurationError
from thumbaudit.llm.base import LLMProvider

PROVIDER_NAMES = ("gemini", "openai", "anthropic")

_API_KEY_ENV = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def get_provider(provider_name: str, **kwargs: object) -> LLMProvider:
    """Return the configured LLM provider. provider_name: 'gemini' | 'openai' | 'anthropic'."""
    name = provider_name.lower()
    if name not in PROVIDER_NAMES:
        raise ValueError(f"Unknown LLM provider: {provider_name}")
    if not kwargs.get("api_key"):
        raise ConfigurationError(
            f"API key not configured for provider '{name}'. Please set {_API_KEY_ENV[name]} in .env"
        )
    # SDKs are imported lazily so only the selected provider's package is required
    if name == "openai":
        from thumbaudit.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(**kwargs)
    if name == "anthropic":
        from thumbaudit.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(**kwargs)
    from thumbaudit.llm.gemini_provider import GeminiProvider

    return GeminiProvider(**kwargs)


def provider_from_settings(settings: Settings, provider_name: str | None = None) -> LLMProvider:
    """Build the provider named by *provider_name* (or the configured default) with its key and model."""
    name = (provider_name or settings.thumbaudit_llm_provider).lower()
    return get_provider(name, api_key=settings.api_key_for(name), model=settings.model_for(name))


__all__ = ["LLMProvider", "PROVIDER_NAMES", "get_provider", "provider_from_settings"]
