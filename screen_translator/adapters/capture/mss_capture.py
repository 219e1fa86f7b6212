"""mss screen capture - implements ScreenCapture port."""

from __future__ import annotations

import asyncio
import logging

from mss import mss, tools
from mss.exception import ScreenShotError

from ...domain.value_objects.region import Region

logger = logging.getLogger(__name__)


class MssScreenCapture:
    """Capture screen regions with mss and encode them as PNG."""

    def __init__(self, compression_level: int = 6):
        self._compression_level = compression_level

    async def capture(
        self,
        region: Region,
        cancel_event: asyncio.Event | None = None
    ) -> bytes | None:
        """Capture a region off the event loop.

        Returns:
            PNG bytes, or None if the grab failed
        """
        return await asyncio.to_thread(self._grab, region)

    def _grab(self, region: Region) -> bytes | None:
        monitor = {
            "left": region.x,
            "top": region.y,
            "width": region.width,
            "height": region.height,
        }
        try:
            # mss handles are not thread-safe, so open one per grab
            with mss() as sct:
                shot = sct.grab(monitor)
        except ScreenShotError as e:
            logger.warning(f"Screen capture failed for region {region}: {e}")
            return None

        return tools.to_png(shot.rgb, shot.size, level=self._compression_level)
