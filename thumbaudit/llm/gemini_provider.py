"""Google Gemini implementation: one generate_content call with a text part and inline image parts."""

from typing import Any, Sequence

from google import genai
from google.genai import types

from thumbaudit.llm.base import LLMProvider
from thumbaudit.schemas.models import ScreenshotImage


class GeminiProvider:
    """Gemini multimodal completion."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.5-flash",
    ):
        self._client = genai.Client(api_key=api_key)
        self._model = model

    def complete(self, prompt: str, images: Sequence[ScreenshotImage] = (), **kwargs: Any) -> str:
        parts = [types.Part.from_text(text=prompt)]
        parts.extend(
            types.Part.from_bytes(data=image.data, mime_type=image.mime_type) for image in images
        )
        response = self._client.models.generate_content(
            model=kwargs.get("model") or self._model,
            contents=parts,
        )
        return response.text or ""
