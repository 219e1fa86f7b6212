"""Screen Translator - capture a screen region, OCR it, translate and overlay the text."""

__version__ = "1.0.0"

from .application.services.pipeline import LoopSummary, PipelineCoordinator
from .domain.value_objects.config import EngineConfig, PipelineConfig
from .domain.value_objects.region import Region
from .exceptions import (
    ScreenTranslatorError,
    ConfigurationError,
    ValidationError,
    OCRError,
    DataDirectoryNotFoundError,
    EngineInitializationError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'Region',
    'EngineConfig',
    'PipelineConfig',
    'PipelineCoordinator',
    'LoopSummary',
    'setup_logging',
    # Exceptions
    'ScreenTranslatorError',
    'ConfigurationError',
    'ValidationError',
    'OCRError',
    'DataDirectoryNotFoundError',
    'EngineInitializationError',
]
