"""OpenAI implementation: chat completion with a text part and base64 data-URL image parts."""

from typing import Any, Sequence

from openai import OpenAI

from thumbaudit.llm.base import LLMProvider
from thumbaudit.schemas.models import ScreenshotImage


class OpenAIProvider:
    """OpenAI multimodal chat completion."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
    ):
        self._client = OpenAI(api_key=api_key)
        self._model = model

    def complete(self, prompt: str, images: Sequence[ScreenshotImage] = (), **kwargs: Any) -> str:
        content: list[dict[str, Any]] = [{"type": "text", "text": prompt}]
        for image in images:
            content.append({"type": "image_url", "image_url": {"url": image.to_data_url()}})
        # OpenAI errors propagate; the requester turns them into ReportGenerationError
        response = self._client.chat.completions.create(
            model=kwargs.get("model") or self._model,
            messages=[{"role": "user", "content": content}],
            **{k: v for k, v in kwargs.items() if k not in ("model",)},
        )
        msg = response.choices[0].message
        return msg.content or ""
