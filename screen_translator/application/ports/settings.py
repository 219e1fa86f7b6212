"""Settings port - interface for persisted user configuration."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Settings(Protocol):
    """Port for the settings store.

    Only supplies configuration; the OCR adapter reads it once at
    construction.
    """

    data_directory_path: str | None
    language_code: str | None

    def load(self) -> None:
        """Load settings from storage (missing storage means defaults)."""
        ...

    def save(self) -> None:
        """Persist settings."""
        ...
