"""Tests for the pipeline coordinator."""

import asyncio
from types import SimpleNamespace

import pytest

from ..application.services.pipeline import LoopSummary, PipelineCoordinator
from ..domain.value_objects.region import Region
from ..exceptions import ValidationError


class FakeCapture:
    def __init__(self, result=b"PNG"):
        self.result = result
        self.calls = []

    async def capture(self, region, cancel_event=None):
        self.calls.append(region)
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


class FakeOcr:
    def __init__(self, result="HELLO"):
        self.result = result
        self.calls = []

    async def recognize(self, image_bytes, cancel_event=None):
        self.calls.append(image_bytes)
        return self.result


class FakeTranslator:
    def __init__(self, result="SAMPLE_TR"):
        self.result = result
        self.calls = []

    async def translate(self, text, target_language, cancel_event=None):
        self.calls.append((text, target_language))
        return self.result


class FakeOverlay:
    def __init__(self, show_error=None):
        self.show_error = show_error
        self.shown = []
        self.events = []

    async def show(self, text, cancel_event=None):
        self.events.append("show")
        if self.show_error is not None:
            raise self.show_error
        self.shown.append(text)

    async def hide(self, cancel_event=None):
        self.events.append("hide")

    async def temp_hide(self, cancel_event=None):
        self.events.append("temp_hide")

    async def temp_show(self, cancel_event=None):
        self.events.append("temp_show")


class BlockingOcr:
    """Recognition that never finishes on its own."""

    def __init__(self):
        self.started = asyncio.Event()

    async def recognize(self, image_bytes, cancel_event=None):
        self.started.set()
        await asyncio.Event().wait()


class BlockingShowOverlay(FakeOverlay):
    """Overlay whose show step never finishes on its own."""

    def __init__(self):
        super().__init__()
        self.showing = asyncio.Event()

    async def show(self, text, cancel_event=None):
        self.events.append("show")
        self.showing.set()
        await asyncio.Event().wait()


REGION = Region(0, 0, 100, 40)


def make_coordinator(capture=None, ocr=None, translator=None, overlay=None):
    return PipelineCoordinator(
        capture=capture or FakeCapture(),
        ocr=ocr or FakeOcr(),
        translator=translator or FakeTranslator(),
        overlay=overlay or FakeOverlay(),
    )


class TestConstruction:
    """Test collaborator checks."""

    @pytest.mark.parametrize("missing", ["capture", "ocr", "translator", "overlay"])
    def test_none_collaborator_rejected(self, missing):
        """Every collaborator is required."""
        collaborators = {
            "capture": FakeCapture(),
            "ocr": FakeOcr(),
            "translator": FakeTranslator(),
            "overlay": FakeOverlay(),
        }
        collaborators[missing] = None
        with pytest.raises(ValueError, match=missing):
            PipelineCoordinator(**collaborators)


class TestRunOnce:
    """Test a single pipeline cycle."""

    def test_full_chain_shows_translation(self):
        """Captured text is translated and shown."""
        translator = FakeTranslator()
        overlay = FakeOverlay()
        coordinator = make_coordinator(translator=translator, overlay=overlay)

        shown = asyncio.run(coordinator.run_once(REGION, "de"))

        assert shown is True
        assert overlay.shown == ["SAMPLE_TR"]
        assert translator.calls == [("HELLO", "de")]

    def test_empty_capture_hides_overlay(self):
        """An empty capture stops the cycle before OCR."""
        ocr = FakeOcr()
        translator = FakeTranslator()
        overlay = FakeOverlay()
        coordinator = make_coordinator(
            capture=FakeCapture(b""), ocr=ocr, translator=translator, overlay=overlay
        )

        assert asyncio.run(coordinator.run_once(REGION)) is False
        assert ocr.calls == []
        assert translator.calls == []
        assert overlay.shown == []
        assert "hide" in overlay.events

    @pytest.mark.parametrize("recognized", [None, "", "   \n"])
    def test_no_text_hides_overlay(self, recognized):
        """Blank recognition result hides the overlay without translating."""
        translator = FakeTranslator()
        overlay = FakeOverlay()
        coordinator = make_coordinator(
            ocr=FakeOcr(recognized), translator=translator, overlay=overlay
        )

        assert asyncio.run(coordinator.run_once(REGION)) is False
        assert translator.calls == []
        assert overlay.shown == []
        assert "hide" in overlay.events

    @pytest.mark.parametrize("translated", [None, "", "  "])
    def test_missing_translation_shows_recognized_text(self, translated):
        """Recognized text is shown when translation gives nothing."""
        overlay = FakeOverlay()
        coordinator = make_coordinator(
            translator=FakeTranslator(translated), overlay=overlay
        )

        assert asyncio.run(coordinator.run_once(REGION)) is True
        assert overlay.shown == ["HELLO"]

    @pytest.mark.parametrize("language", [None, "", "   "])
    def test_blank_language_uses_default(self, language):
        """Blank target language falls back to 'en'."""
        translator = FakeTranslator()
        coordinator = make_coordinator(translator=translator)

        asyncio.run(coordinator.run_once(REGION, language))

        assert translator.calls == [("HELLO", "en")]

    def test_overlay_bracket_on_success(self):
        """temp_hide comes first and temp_show last."""
        overlay = FakeOverlay()
        coordinator = make_coordinator(overlay=overlay)

        asyncio.run(coordinator.run_once(REGION))

        assert overlay.events == ["temp_hide", "show", "temp_show"]

    def test_overlay_restored_when_show_fails(self):
        """temp_show still runs once when a later step raises."""
        overlay = FakeOverlay(show_error=RuntimeError("boom"))
        coordinator = make_coordinator(overlay=overlay)

        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(coordinator.run_once(REGION))

        assert overlay.events.count("temp_hide") == 1
        assert overlay.events.count("temp_show") == 1

    def test_capture_error_propagates(self):
        """Structural step failures are not swallowed."""
        overlay = FakeOverlay()
        coordinator = make_coordinator(
            capture=FakeCapture(OSError("no display")), overlay=overlay
        )

        with pytest.raises(OSError):
            asyncio.run(coordinator.run_once(REGION))
        assert overlay.events[-1] == "temp_show"

    def test_none_region_rejected(self):
        """A missing region is a programming error."""
        capture = FakeCapture()
        coordinator = make_coordinator(capture=capture)

        with pytest.raises(ValueError):
            asyncio.run(coordinator.run_once(None))
        assert capture.calls == []

    def test_empty_region_rejected_before_capture(self):
        """A zero-size region never reaches the capture port."""
        capture = FakeCapture()
        coordinator = make_coordinator(capture=capture)
        region = SimpleNamespace(x=0, y=0, width=0, height=20)

        with pytest.raises(ValidationError):
            asyncio.run(coordinator.run_once(region))
        assert capture.calls == []

    def test_cancelled_before_start(self):
        """A set cancel event stops the cycle before any step."""
        capture = FakeCapture()
        overlay = FakeOverlay()
        coordinator = make_coordinator(capture=capture, overlay=overlay)

        async def run():
            event = asyncio.Event()
            event.set()
            await coordinator.run_once(REGION, cancel_event=event)

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(run())
        assert capture.calls == []
        assert overlay.events == []

    def test_cancel_during_recognition(self):
        """Setting the event aborts the step in flight."""
        ocr = BlockingOcr()
        translator = FakeTranslator()
        overlay = FakeOverlay()
        coordinator = make_coordinator(ocr=ocr, translator=translator, overlay=overlay)

        async def run():
            event = asyncio.Event()
            task = asyncio.create_task(coordinator.run_once(REGION, cancel_event=event))
            await ocr.started.wait()
            event.set()
            await task

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(run())
        assert translator.calls == []
        assert overlay.shown == []
        assert "temp_show" not in overlay.events

    def test_cancel_during_show_restores_overlay(self):
        """Once showing has started the overlay is restored even on cancel."""
        overlay = BlockingShowOverlay()
        coordinator = make_coordinator(overlay=overlay)

        async def run():
            event = asyncio.Event()
            task = asyncio.create_task(coordinator.run_once(REGION, cancel_event=event))
            await overlay.showing.wait()
            event.set()
            await task

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(run())
        assert overlay.events == ["temp_hide", "show", "temp_show"]


class TestRunLoop:
    """Test the repeating pipeline loop."""

    def test_invalid_interval(self):
        """Interval must be positive."""
        coordinator = make_coordinator()
        with pytest.raises(ValidationError):
            asyncio.run(coordinator.run_loop(REGION, 0))

    def test_stops_when_event_set(self):
        """No cycle starts after the event is set."""
        overlay = FakeOverlay()
        coordinator = make_coordinator(overlay=overlay)

        async def run():
            event = asyncio.Event()
            loop_task = asyncio.create_task(
                coordinator.run_loop(REGION, 0.01, cancel_event=event)
            )
            while len(overlay.shown) < 3:
                await asyncio.sleep(0.005)
            event.set()
            summary = await loop_task
            shown_at_stop = len(overlay.shown)
            await asyncio.sleep(0.05)
            return summary, shown_at_stop

        summary, shown_at_stop = asyncio.run(run())

        assert isinstance(summary, LoopSummary)
        assert summary.shown >= 3
        assert summary.failed == 0
        assert len(overlay.shown) == shown_at_stop

    def test_failing_cycles_do_not_stop_loop(self):
        """A cycle that raises is counted and the loop goes on."""
        capture = FakeCapture(RuntimeError("capture broke"))
        coordinator = make_coordinator(capture=capture)

        async def run():
            event = asyncio.Event()
            loop_task = asyncio.create_task(
                coordinator.run_loop(REGION, 0.01, cancel_event=event)
            )
            while len(capture.calls) < 3:
                await asyncio.sleep(0.005)
            event.set()
            return await loop_task

        summary = asyncio.run(run())

        assert summary.failed >= 3
        assert summary.shown == 0

    def test_cancel_during_cycle_ends_loop(self):
        """Cancelling in the middle of a cycle stops the loop quietly."""
        ocr = BlockingOcr()
        coordinator = make_coordinator(ocr=ocr)

        async def run():
            event = asyncio.Event()
            loop_task = asyncio.create_task(
                coordinator.run_loop(REGION, 0.01, cancel_event=event)
            )
            await ocr.started.wait()
            event.set()
            return await loop_task

        summary = asyncio.run(run())

        assert summary.cycles == 1
        assert summary.shown == 0
        assert summary.failed == 0

    def test_cancel_during_long_interval_stops_promptly(self):
        """Setting the event during the wait ends the loop without sleeping it out."""
        overlay = FakeOverlay()
        coordinator = make_coordinator(overlay=overlay)

        async def run():
            loop = asyncio.get_running_loop()
            event = asyncio.Event()
            loop_task = asyncio.create_task(
                coordinator.run_loop(REGION, 10, cancel_event=event)
            )
            while not overlay.shown:
                await asyncio.sleep(0.005)
            await asyncio.sleep(0.02)
            started = loop.time()
            event.set()
            summary = await asyncio.wait_for(loop_task, timeout=5)
            return summary, loop.time() - started

        summary, elapsed = asyncio.run(run())

        assert elapsed < 1.0
        assert summary.cycles == 1
        assert summary.shown == 1
