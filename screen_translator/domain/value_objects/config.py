"""Configuration value objects with validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ...config import DEFAULT_INTERVAL_SECONDS, DEFAULT_TARGET_LANGUAGE


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class EngineConfig(BaseModel):
    """OCR engine configuration.

    Both values are optional; the adapter resolves missing ones to the
    environment or built-in defaults.
    """

    model_config = {"frozen": True}

    data_directory: Path | None = None
    language: str | None = None

    @field_validator('data_directory', 'language', mode='before')
    @classmethod
    def blank_is_unset(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @classmethod
    def from_settings(cls, settings: Any) -> EngineConfig:
        """Read the engine configuration from a settings collaborator."""
        return cls(
            data_directory=settings.data_directory_path,
            language=settings.language_code,
        )


class PipelineConfig(BaseModel):
    """Pipeline loop configuration with validation."""

    interval_seconds: float = Field(default=DEFAULT_INTERVAL_SECONDS, gt=0)
    target_language: str = DEFAULT_TARGET_LANGUAGE

    @field_validator('target_language', mode='before')
    @classmethod
    def default_blank_language(cls, v: Any) -> Any:
        """Blank target language falls back to the default instead of failing."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_TARGET_LANGUAGE
        return v.strip() if isinstance(v, str) else v
