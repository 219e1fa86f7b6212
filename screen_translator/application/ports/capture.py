"""Screen capture port - interface for grabbing a screen region."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from ...domain.value_objects.region import Region


@runtime_checkable
class ScreenCapture(Protocol):
    """Port for screen capture backends.

    Implementations: mss, platform screenshot APIs, test fakes.
    """

    async def capture(
        self,
        region: Region,
        cancel_event: asyncio.Event | None = None
    ) -> bytes | None:
        """Capture a screen region.

        Args:
            region: Area to capture
            cancel_event: Set to abort the capture

        Returns:
            Encoded image bytes (PNG), or None/empty if nothing was captured.
            Ordinary capture failures are reported this way, not raised.
        """
        ...
