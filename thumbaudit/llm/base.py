"""Abstract LLM provider protocol."""

from typing import Any, Protocol, Sequence

from thumbaudit.schemas.models import ScreenshotImage


class LLMProvider(Protocol):
    """Protocol for multimodal LLM backends (Gemini, OpenAI, Anthropic)."""

    def complete(self, prompt: str, images: Sequence[ScreenshotImage] = (), **kwargs: Any) -> str:
        """Send the prompt followed by the images as one request; return the raw text completion."""
        ...
