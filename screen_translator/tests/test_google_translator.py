"""Tests for the deep-translator backed translator."""

import asyncio
import threading

import pytest

from ..adapters.translation.google_translator import GoogleTranslateAdapter
from ..application.ports import Translator


class StubGoogleTranslator:
    """Stands in for deep_translator.GoogleTranslator."""

    def __init__(self, result="Hallo Welt", error=None):
        self.result = result
        self.error = error
        self.calls = []
        self.threads = []

    def __call__(self, source, target):
        self.calls.append((source, target))
        return self

    def translate(self, text):
        self.threads.append(threading.current_thread())
        if self.error is not None:
            raise self.error
        return self.result


class TestGoogleTranslateAdapter:
    """Test translation through the library call."""

    def test_implements_port(self):
        assert isinstance(GoogleTranslateAdapter(StubGoogleTranslator()), Translator)

    def test_translates(self):
        factory = StubGoogleTranslator(" Hallo Welt \n")
        adapter = GoogleTranslateAdapter(factory)

        assert asyncio.run(adapter.translate("Hello world", "de")) == "Hallo Welt"
        assert factory.calls == [("auto", "de")]

    def test_runs_off_the_event_loop_thread(self):
        """The blocking library call runs in a worker thread."""
        factory = StubGoogleTranslator()
        adapter = GoogleTranslateAdapter(factory)

        asyncio.run(adapter.translate("Hello", "de"))

        assert factory.threads[0] is not threading.main_thread()

    @pytest.mark.parametrize("language", [None, "", "  "])
    def test_blank_language_defaults_to_english(self, language):
        factory = StubGoogleTranslator()
        adapter = GoogleTranslateAdapter(factory)

        asyncio.run(adapter.translate("Hallo", language))

        assert factory.calls == [("auto", "en")]

    @pytest.mark.parametrize("text", [None, "", " \n"])
    def test_blank_text_skips_library(self, text):
        factory = StubGoogleTranslator()
        adapter = GoogleTranslateAdapter(factory)

        assert asyncio.run(adapter.translate(text, "de")) is None
        assert factory.calls == []

    def test_failure_returns_none(self):
        """Service errors are reported as no translation."""
        factory = StubGoogleTranslator(error=ConnectionError("offline"))
        adapter = GoogleTranslateAdapter(factory)

        assert asyncio.run(adapter.translate("Hello", "de")) is None

    def test_factory_failure_returns_none(self):
        """An unsupported language is rejected when the client is built."""
        def factory(source, target):
            raise ValueError(f"{target} is not supported")

        adapter = GoogleTranslateAdapter(factory)

        assert asyncio.run(adapter.translate("Hello", "xx")) is None

    @pytest.mark.parametrize("result", [None, "", "   "])
    def test_blank_result_is_none(self, result):
        adapter = GoogleTranslateAdapter(StubGoogleTranslator(result))
        assert asyncio.run(adapter.translate("Hello", "de")) is None

    def test_cancelled_before_start(self):
        factory = StubGoogleTranslator()
        adapter = GoogleTranslateAdapter(factory)

        async def run():
            event = asyncio.Event()
            event.set()
            await adapter.translate("Hello", "de", event)

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(run())
        assert factory.calls == []
