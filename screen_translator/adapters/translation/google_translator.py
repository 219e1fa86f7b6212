"""Google translator - implements Translator port with deep-translator."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from deep_translator import GoogleTranslator

from ...config import DEFAULT_TARGET_LANGUAGE
from ...core.cancellation import raise_if_cancelled, run_cancellable

logger = logging.getLogger(__name__)


class GoogleTranslateAdapter:
    """Translate through the public Google Translate endpoint.

    The source language is detected by the service. Network and service
    errors are logged and reported as None so the pipeline can fall back
    to the recognized text.
    """

    def __init__(self, translator_factory: Callable[..., Any] = GoogleTranslator):
        self._translator_factory = translator_factory

    async def translate(
        self,
        text: str,
        target_language: str,
        cancel_event: asyncio.Event | None = None
    ) -> str | None:
        if not text or not text.strip():
            return None
        if not target_language or not target_language.strip():
            target_language = DEFAULT_TARGET_LANGUAGE

        raise_if_cancelled(cancel_event)
        return await run_cancellable(
            asyncio.to_thread(self._translate_sync, text, target_language.strip()),
            cancel_event
        )

    def _translate_sync(self, text: str, target_language: str) -> str | None:
        try:
            translator = self._translator_factory(source="auto", target=target_language)
            result = translator.translate(text)
        except Exception as e:
            logger.warning(f"Translation to '{target_language}' failed: {e}")
            return None

        if not result or not result.strip():
            return None
        return result.strip()
