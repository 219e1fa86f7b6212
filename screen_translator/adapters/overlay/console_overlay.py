"""Console overlay - implements Overlay port by writing to a stream."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class ConsoleOverlay:
    """Overlay that prints shown text.

    Tracks visibility like a real overlay window so temp-hide/temp-show
    behave the same way.
    """

    def __init__(self, stream: TextIO | None = None, prefix: str = "[Overlay] "):
        self._stream = stream or sys.stdout
        self._prefix = prefix
        self.visible = False
        self.text: str | None = None
        self._restore_visible: bool | None = None

    async def show(self, text: str, cancel_event: asyncio.Event | None = None) -> None:
        self.text = text
        self.visible = True
        self._restore_visible = None
        print(f"{self._prefix}{text}", file=self._stream, flush=True)

    async def hide(self, cancel_event: asyncio.Event | None = None) -> None:
        if self.visible:
            logger.debug("Overlay hidden")
        self.visible = False
        self._restore_visible = None

    async def temp_hide(self, cancel_event: asyncio.Event | None = None) -> None:
        self._restore_visible = self.visible
        self.visible = False

    async def temp_show(self, cancel_event: asyncio.Event | None = None) -> None:
        if self._restore_visible:
            self.visible = True
        self._restore_visible = None
