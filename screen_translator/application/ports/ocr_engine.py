"""OCR Engine port - interface for text recognition."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable


@runtime_checkable
class OCREngine(Protocol):
    """Port for OCR engines.

    Implementations: Tesseract, test fakes.
    """

    async def recognize(
        self,
        image_bytes: bytes | None,
        cancel_event: asyncio.Event | None = None
    ) -> str | None:
        """Extract text from encoded image bytes.

        Args:
            image_bytes: Encoded raster image
            cancel_event: Set to abort recognition

        Returns:
            Recognized text, or None if nothing was found

        Raises:
            OCRError: If the engine cannot be configured or started
            asyncio.CancelledError: If cancellation was requested
        """
        ...

    def close(self) -> None:
        """Release the engine. Safe to call more than once."""
        ...
