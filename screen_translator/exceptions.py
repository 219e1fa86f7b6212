"""Custom exceptions for Screen Translator."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .adapters.ocr.diagnostics import EngineDiagnostics


class ScreenTranslatorError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(ScreenTranslatorError):
    """Error in configuration or settings.

    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key


class ValidationError(ScreenTranslatorError):
    """Error validating inputs or parameters.

    Attributes:
        field: The field that failed validation (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field = field


class OCRError(ScreenTranslatorError):
    """Error during text recognition."""

    def __init__(self, message: str, error_code: str = "OCR_ERROR"):
        super().__init__(message, error_code=error_code)


class DataDirectoryNotFoundError(OCRError):
    """The resolved tessdata directory does not exist.

    Raised on the first recognition attempt, never at adapter construction.
    The user can fix the data directory setting and retry.

    Attributes:
        attempted_paths: Candidate locations by source
            ('configured', 'environment', 'default', 'resolved')
    """

    def __init__(self, message: str, attempted_paths: dict[str, Optional[Path]]):
        super().__init__(message, error_code="TESSDATA_NOT_FOUND")
        self.attempted_paths = attempted_paths

    def __str__(self) -> str:
        lines = [super().__str__(), "Attempted paths:"]
        for source, path in self.attempted_paths.items():
            lines.append(f"  {source}: {path if path is not None else '(not set)'}")
        return "\n".join(lines)


class EngineInitializationError(OCRError):
    """The native OCR engine could not be created.

    The underlying engine failure is chained as ``__cause__``.

    Attributes:
        diagnostics: What was found on disk when initialization failed
    """

    def __init__(self, message: str, diagnostics: EngineDiagnostics):
        super().__init__(message, error_code="ENGINE_INIT_FAILED")
        self.diagnostics = diagnostics

    def __str__(self) -> str:
        return f"{super().__str__()}\n{self.diagnostics.format()}"
