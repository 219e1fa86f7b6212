"""Mock translator - implements Translator port for development and tests."""

from __future__ import annotations

import asyncio


class MockTranslator:
    """Tag text with the target language instead of translating it."""

    async def translate(
        self,
        text: str,
        target_language: str,
        cancel_event: asyncio.Event | None = None
    ) -> str | None:
        if not text or not text.strip():
            return None
        return f"{text} [{target_language}]"
