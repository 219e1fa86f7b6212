"""Translator port - interface for text translation backends."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable


@runtime_checkable
class Translator(Protocol):
    """Port for translation backends."""

    async def translate(
        self,
        text: str,
        target_language: str,
        cancel_event: asyncio.Event | None = None
    ) -> str | None:
        """Translate text into the target language.

        Returns:
            Translated text, or None if it could not be translated. None is
            a valid outcome, not necessarily an error.
        """
        ...
