"""Pipeline coordinator - sequences capture, OCR, translation and display."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from ...config import DEFAULT_TARGET_LANGUAGE
from ...core.cancellation import cancellable_sleep, raise_if_cancelled, run_cancellable
from ...domain.value_objects.region import Region, validate_region
from ...exceptions import ValidationError
from ..ports.capture import ScreenCapture
from ..ports.ocr_engine import OCREngine
from ..ports.overlay import Overlay
from ..ports.translator import Translator

logger = logging.getLogger(__name__)


@dataclass
class LoopSummary:
    """Counters for a finished pipeline loop."""
    cycles: int = 0
    shown: int = 0
    failed: int = 0


@dataclass
class _OverlayBracket:
    """Progress of one cycle as seen by the overlay restore."""
    showing: bool = False


class PipelineCoordinator:
    """Run capture -> OCR -> translate -> display cycles.

    Collaborators are passed in explicitly; the coordinator holds no other
    state, so one instance can serve any number of cycles.
    """

    def __init__(
        self,
        capture: ScreenCapture,
        ocr: OCREngine,
        translator: Translator,
        overlay: Overlay,
        default_target_language: str = DEFAULT_TARGET_LANGUAGE
    ):
        for name, collaborator in (
            ("capture", capture), ("ocr", ocr), ("translator", translator), ("overlay", overlay)
        ):
            if collaborator is None:
                raise ValueError(f"{name} must not be None")

        self._capture = capture
        self._ocr = ocr
        self._translator = translator
        self._overlay = overlay
        self._default_target_language = default_target_language

    def _target_language(self, target_language: str | None) -> str:
        if target_language is None or not target_language.strip():
            return self._default_target_language
        return target_language.strip()

    @staticmethod
    def _check_region(region: Region) -> None:
        if region is None:
            raise ValueError("region must not be None")
        validate_region(region)

    @asynccontextmanager
    async def _overlay_suppressed(
        self,
        cancel_event: asyncio.Event | None
    ) -> AsyncIterator[_OverlayBracket]:
        """Hide the overlay for the cycle and restore it on the way out.

        Both calls are best-effort. A cycle cancelled before the show step
        skips restoration; once showing has started the overlay is always
        restored.
        """
        try:
            await run_cancellable(self._overlay.temp_hide(cancel_event), cancel_event)
        except Exception as e:
            logger.debug(f"Overlay temp-hide failed: {e}")

        bracket = _OverlayBracket()
        restore = True
        try:
            yield bracket
        except asyncio.CancelledError:
            restore = bracket.showing
            raise
        finally:
            if restore:
                # Restore even when the cancel event is already set
                restore_event = None if bracket.showing else cancel_event
                try:
                    await self._overlay.temp_show(restore_event)
                except Exception as e:
                    logger.debug(f"Overlay restore failed: {e}")

    async def run_once(
        self,
        region: Region,
        target_language: str | None = None,
        cancel_event: asyncio.Event | None = None
    ) -> bool:
        """Run a single capture -> OCR -> translate -> display cycle.

        Args:
            region: Screen area to capture
            target_language: Translation target; blank means the default
            cancel_event: Set to abort the cycle

        Returns:
            True if text was shown on the overlay

        Raises:
            ValueError: If region is None
            ValidationError: If region has no area
            asyncio.CancelledError: If the cycle was cancelled
        """
        self._check_region(region)
        target_language = self._target_language(target_language)
        raise_if_cancelled(cancel_event)

        async with self._overlay_suppressed(cancel_event) as bracket:
            image_bytes = await run_cancellable(
                self._capture.capture(region, cancel_event), cancel_event
            )
            if not image_bytes:
                logger.debug(f"Nothing captured from region {region}")
                await run_cancellable(self._overlay.hide(cancel_event), cancel_event)
                return False

            text = await run_cancellable(
                self._ocr.recognize(image_bytes, cancel_event), cancel_event
            )
            if text is None or not text.strip():
                logger.debug("No text recognized")
                await run_cancellable(self._overlay.hide(cancel_event), cancel_event)
                return False

            translated = await run_cancellable(
                self._translator.translate(text, target_language, cancel_event), cancel_event
            )
            if translated is None or not translated.strip():
                logger.debug("Translation unavailable, showing recognized text")
                translated = text

            bracket.showing = True
            await run_cancellable(self._overlay.show(translated, cancel_event), cancel_event)
            logger.debug(f"Shown {len(translated)} characters ({target_language})")
            return True

    async def run_loop(
        self,
        region: Region,
        interval: float,
        target_language: str | None = None,
        cancel_event: asyncio.Event | None = None
    ) -> LoopSummary:
        """Run cycles until the cancel event is set.

        A failing cycle is logged and the loop continues; only cancellation
        stops it. Cycles never overlap.

        Args:
            region: Screen area to capture
            interval: Seconds to wait between cycles
            target_language: Translation target; blank means the default
            cancel_event: Set to stop the loop

        Returns:
            Cycle counters

        Raises:
            ValueError: If region is None
            ValidationError: If region has no area or interval is not positive
        """
        self._check_region(region)
        if interval <= 0:
            raise ValidationError(f"Interval must be positive, got {interval}", field="interval")
        if cancel_event is None:
            cancel_event = asyncio.Event()

        summary = LoopSummary()
        logger.info(f"Pipeline loop started (region {region}, every {interval}s)")

        while not cancel_event.is_set():
            summary.cycles += 1
            try:
                if await self.run_once(region, target_language, cancel_event):
                    summary.shown += 1
            except asyncio.CancelledError:
                if cancel_event.is_set():
                    break
                raise
            except Exception:
                summary.failed += 1
                logger.exception(f"Pipeline cycle {summary.cycles} failed")

            if await cancellable_sleep(interval, cancel_event):
                break

        logger.info(
            f"Pipeline loop stopped after {summary.cycles} cycles "
            f"({summary.shown} shown, {summary.failed} failed)"
        )
        return summary
