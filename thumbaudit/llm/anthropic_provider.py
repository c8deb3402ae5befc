"""Anthropic implementation: one user message with a text block and base64 image blocks."""

from typing import Any, Sequence

from anthropic import Anthropic

from thumbaudit.llm.base import LLMProvider
from thumbaudit.schemas.models import ScreenshotImage


class AnthropicProvider:
    """Anthropic multimodal message completion."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-3-5-sonnet-20241022",
    ):
        self._client = Anthropic(api_key=api_key)
        self._model = model

    def complete(self, prompt: str, images: Sequence[ScreenshotImage] = (), **kwargs: Any) -> str:
        content: list[dict[str, Any]] = [{"type": "text", "text": prompt}]
        for image in images:
            content.append(
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": image.mime_type,
                        "data": image.to_base64(),
                    },
                }
            )
        response = self._client.messages.create(
            model=kwargs.get("model") or self._model,
            max_tokens=kwargs.get("max_tokens", 8192),
            messages=[{"role": "user", "content": content}],
        )
        return response.content[0].text if response.content else ""
