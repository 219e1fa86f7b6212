"""OCR adapters - implementations of OCREngine port."""

from .diagnostics import EngineDiagnostics, gather_diagnostics
from .tesseract_adapter import EngineState, TesseractOcrAdapter
from .tesseract_engine import TesseractEngine

__all__ = [
    'EngineDiagnostics',
    'gather_diagnostics',
    'EngineState',
    'TesseractOcrAdapter',
    'TesseractEngine',
]
