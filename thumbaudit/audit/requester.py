"""Report requester: validate inputs, fill in the template, make the one model call."""

from __future__ import annotations

import logging
from typing import Sequence

from thumbaudit.errors import MissingTemplateError, NotEnoughImagesError, ReportGenerationError
from thumbaudit.llm.base import LLMProvider
from thumbaudit.prompt.template import apply_language
from thumbaudit.schemas.models import ScreenshotImage

logger = logging.getLogger(__name__)

MIN_SCREENSHOTS = 3


def generate_audit_report(
    own_image: ScreenshotImage | None,
    competitor_images: Sequence[ScreenshotImage],
    template: str,
    language: str,
    llm: LLMProvider,
) -> str:
    """
    Ask the model for a thumbnail audit and return the raw report text.

    The request carries the finished prompt first, then the own-channel screenshot,
    then the competitor screenshots in order.
    Raises NotEnoughImagesError (< 3 screenshots) or MissingTemplateError (blank template)
    before any network call; any provider failure, including an empty reply, becomes
    ReportGenerationError.
    """
    screenshots = ([own_image] if own_image is not None else []) + list(competitor_images)
    if len(screenshots) < MIN_SCREENSHOTS:
        raise NotEnoughImagesError()
    if not template or not template.strip():
        raise MissingTemplateError()

    prompt = apply_language(template, language)
    logger.info(
        "Requesting audit report: %d screenshots, language=%s, prompt=%d chars",
        len(screenshots),
        language,
        len(prompt),
    )
    try:
        text = llm.complete(prompt, images=screenshots)
    except Exception as e:
        logger.exception("Error calling the LLM provider")
        raise ReportGenerationError() from e

    if not text or not text.strip():
        logger.error("LLM provider returned an empty audit report")
        raise ReportGenerationError()
    logger.info("Audit report received (%d chars)", len(text))
    return text
