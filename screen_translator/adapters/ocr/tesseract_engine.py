"""Thin wrapper around the Tesseract engine (via pytesseract)."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytesseract
from PIL import Image

from ...config import TESSERACT_OPTIONS

logger = logging.getLogger(__name__)


def tesseract_command() -> str:
    """Command pytesseract uses to run Tesseract."""
    return pytesseract.pytesseract.tesseract_cmd


class TesseractEngine:
    """Tesseract engine bound to one data directory and language.

    Construction checks the executable and the available languages so a
    broken installation fails here rather than on the first image.
    """

    def __init__(self, data_directory: Path, language: str, options: str = TESSERACT_OPTIONS):
        """Initialize the engine.

        Args:
            data_directory: tessdata directory
            language: Tesseract language ('+' joins several)
            options: Extra command-line options

        Raises:
            pytesseract.TesseractNotFoundError: If Tesseract is not installed
            RuntimeError: If a requested language has no traineddata
        """
        self.data_directory = Path(data_directory)
        self.language = language
        self._tessdata_config = f'--tessdata-dir "{self.data_directory}"'
        self._config = f"{self._tessdata_config} {options}".strip()
        self._closed = False

        self.version = pytesseract.get_tesseract_version()

        available = set(pytesseract.get_languages(config=self._tessdata_config))
        missing = [lang for lang in language.split("+") if lang not in available]
        if missing:
            raise RuntimeError(
                f"Language data not found for: {', '.join(missing)} "
                f"(available: {', '.join(sorted(available)) or 'none'})"
            )

        logger.debug(f"Tesseract {self.version} ready ({language}, {self.data_directory})")

    def recognize(self, image_bytes: bytes) -> str:
        """Run recognition on encoded image bytes."""
        if self._closed:
            raise RuntimeError("Tesseract engine is closed")

        with Image.open(io.BytesIO(image_bytes)) as image:
            return pytesseract.image_to_string(image, lang=self.language, config=self._config)

    def close(self) -> None:
        """Mark the engine closed."""
        self._closed = True
