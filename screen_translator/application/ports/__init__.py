"""Ports - interfaces for external dependencies (Dependency Inversion)."""

from .capture import ScreenCapture
from .ocr_engine import OCREngine
from .translator import Translator
from .overlay import Overlay
from .settings import Settings

__all__ = [
    'ScreenCapture',
    'OCREngine',
    'Translator',
    'Overlay',
    'Settings',
]
