"""Tesseract adapter - implements OCREngine port."""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Protocol

from ...core.cancellation import raise_if_cancelled, run_cancellable
from ...core.image_ops import preprocess_for_ocr
from ...core.tessdata import normalize_language, resolve_data_directory
from ...domain.value_objects.config import EngineConfig
from ...exceptions import DataDirectoryNotFoundError, EngineInitializationError
from .diagnostics import gather_diagnostics
from .tesseract_engine import TesseractEngine, tesseract_command

logger = logging.getLogger(__name__)


class TextEngine(Protocol):
    """Native engine handle owned by the adapter."""

    def recognize(self, image_bytes: bytes) -> str:
        ...

    def close(self) -> None:
        ...


EngineFactory = Callable[[Path, str], TextEngine]


class EngineState(str, Enum):
    """Lifecycle of the engine handle."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class TesseractOcrAdapter:
    """Adapter for the Tesseract engine.

    Implements OCREngine port. The engine is created lazily on the first
    recognition and at most once per adapter; after a failed start an equal
    error is raised on every call until ``reset()`` is called. Recognition
    runs on a single worker thread, so calls on one adapter are serialized.

    Example:
        with TesseractOcrAdapter(EngineConfig(language="de")) as ocr:
            text = await ocr.recognize(png_bytes)
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        engine_factory: EngineFactory = TesseractEngine,
        base_dir: Optional[Path] = None,
        environ: Optional[dict[str, str]] = None,
        preprocess: Callable[[bytes], bytes] = preprocess_for_ocr,
        executable_command: Optional[str] = None
    ):
        """Initialize the adapter without touching the engine.

        Args:
            config: Data directory and language (both optional)
            engine_factory: Creates the engine from (data_directory, language)
            base_dir: Application base directory for the tessdata search
            environ: Environment mapping for TESSDATA_PREFIX
            preprocess: Image preprocessing applied before recognition
            executable_command: Engine command reported in diagnostics
        """
        config = config or EngineConfig()
        self.language = normalize_language(config.language)
        self.resolution = resolve_data_directory(config.data_directory, base_dir, environ)

        self._engine_factory = engine_factory
        self._preprocess = preprocess
        self._executable_command = executable_command

        self._engine: Optional[TextEngine] = None
        self._state = EngineState.UNINITIALIZED
        self._last_error: Optional[EngineInitializationError] = None
        self._lock = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> TesseractOcrAdapter:
        """Create an adapter from a settings collaborator (read once)."""
        return cls(EngineConfig.from_settings(settings), **kwargs)

    @property
    def name(self) -> str:
        return "Tesseract"

    @property
    def data_directory(self) -> Path:
        return self.resolution.path

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is EngineState.READY

    def ensure_engine(self) -> None:
        """Create the engine if needed.

        Raises:
            DataDirectoryNotFoundError: If the data directory does not exist
            EngineInitializationError: If the engine cannot be created
            RuntimeError: If the adapter has been closed
        """
        with self._lock:
            self._ensure_engine_locked()

    def _ensure_engine_locked(self) -> None:
        if self._state is EngineState.READY:
            return
        if self._state is EngineState.CLOSED:
            raise RuntimeError("OCR adapter is closed")
        if self._state is EngineState.FAILED and self._last_error is not None:
            # New instance per call so the stored traceback never grows
            cached = self._last_error
            raise EngineInitializationError(
                cached.message,
                diagnostics=cached.diagnostics,
            ) from cached.__cause__

        data_directory = self.resolution.path
        if not data_directory.is_dir():
            raise DataDirectoryNotFoundError(
                f"tessdata directory not found: {data_directory}. "
                f"Set the tessdata path in settings or the TESSDATA_PREFIX variable.",
                attempted_paths=self.resolution.attempted_paths(),
            )

        try:
            self._engine = self._engine_factory(data_directory, self.language)
        except Exception as e:
            diagnostics = gather_diagnostics(
                data_directory,
                self.language,
                self._executable_command or tesseract_command(),
            )
            error = EngineInitializationError(
                f"Failed to initialize Tesseract engine: {e}",
                diagnostics=diagnostics,
            )
            self._state = EngineState.FAILED
            self._last_error = error
            logger.error(f"OCR engine initialization failed:\n{diagnostics.format()}")
            raise error from e

        self._state = EngineState.READY
        logger.info(f"Tesseract engine loaded ({self.language}, {data_directory})")

    def reset(self) -> None:
        """Forget a failed initialization so the next call retries."""
        with self._lock:
            if self._state is EngineState.FAILED:
                self._state = EngineState.UNINITIALIZED
                self._last_error = None

    async def recognize(
        self,
        image_bytes: bytes | None,
        cancel_event: asyncio.Event | None = None
    ) -> str | None:
        """Recognize text in encoded image bytes.

        Args:
            image_bytes: Encoded raster image
            cancel_event: Set to abort recognition

        Returns:
            Stripped text, or None for empty input or when nothing was found

        Raises:
            DataDirectoryNotFoundError: If the data directory is missing
            EngineInitializationError: If the engine cannot be created
            asyncio.CancelledError: If cancellation was requested
        """
        if not image_bytes:
            return None

        raise_if_cancelled(cancel_event)
        if self._state is EngineState.CLOSED:
            raise RuntimeError("OCR adapter is closed")

        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(self._get_executor(), self._recognize_sync, image_bytes)
        return await run_cancellable(future, cancel_event)

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="ocr")
        return self._executor

    def _recognize_sync(self, image_bytes: bytes) -> str | None:
        with self._lock:
            self._ensure_engine_locked()
            processed = self._preprocess(image_bytes)
            raw = self._engine.recognize(processed)

        text = raw.strip() if raw else ""
        logger.debug(f"Recognized {len(text)} characters")
        return text or None

    def close(self) -> None:
        """Release the engine and worker thread. Safe to call more than once."""
        with self._lock:
            if self._state is EngineState.CLOSED:
                return
            engine, self._engine = self._engine, None
            self._state = EngineState.CLOSED
            self._last_error = None

        if engine is not None:
            try:
                engine.close()
            except Exception as e:
                logger.warning(f"Error closing OCR engine: {e}")
            logger.info("Tesseract engine unloaded")

        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
