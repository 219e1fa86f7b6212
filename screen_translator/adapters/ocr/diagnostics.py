"""Diagnostics gathered when the OCR engine fails to start."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import DIAGNOSTICS_CONFIG, DiagnosticsConfig
from ...core.tessdata import traineddata_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineDiagnostics:
    """Snapshot of the environment at engine init failure."""
    data_directory: Path
    language: str
    traineddata_present: bool
    data_files: list[str] = field(default_factory=list)
    executable: Optional[Path] = None
    native_libraries: list[str] = field(default_factory=list)

    def format(self) -> str:
        """Render as human-readable lines."""
        lines = [
            f"tessdata path: {self.data_directory}",
            f"Language requested: {self.language}",
            f"traineddata present: {self.traineddata_present}",
            f"Files in tessdata: {', '.join(self.data_files) if self.data_files else '(none)'}",
            f"Tesseract executable: {self.executable or '(not found)'}",
            f"Native libraries: {', '.join(self.native_libraries) if self.native_libraries else '(none)'}",
        ]
        return "\n".join(lines)


def list_data_files(data_directory: Path, limit: int) -> list[str]:
    """Return the first ``limit`` file names in the data directory."""
    try:
        names = sorted(p.name for p in data_directory.iterdir() if p.is_file())
    except OSError as e:
        logger.debug(f"Cannot list {data_directory}: {e}")
        return []
    return names[:limit]


def find_executable(command: str) -> Optional[Path]:
    """Locate the engine executable on PATH (or as given)."""
    found = shutil.which(command)
    return Path(found).resolve() if found else None


def list_native_libraries(directory: Path, config: DiagnosticsConfig) -> list[str]:
    """Return the first native libraries found in ``directory``."""
    names: set[str] = set()
    for pattern in config.native_library_patterns:
        try:
            names.update(p.name for p in directory.glob(pattern) if p.is_file())
        except OSError as e:
            logger.debug(f"Cannot scan {directory}: {e}")
    return sorted(names)[:config.max_native_libraries]


def gather_diagnostics(
    data_directory: Path,
    language: str,
    executable_command: Optional[str] = None,
    config: DiagnosticsConfig = DIAGNOSTICS_CONFIG
) -> EngineDiagnostics:
    """Collect what is present on disk for an engine init failure report.

    Args:
        data_directory: Resolved tessdata directory
        language: Requested language ('+' joins several)
        executable_command: Engine command name or path
        config: Output size bounds

    Returns:
        Diagnostics record
    """
    languages = [lang for lang in language.split("+") if lang]
    present = bool(languages) and all(
        traineddata_path(data_directory, lang).is_file() for lang in languages
    )

    executable = find_executable(executable_command) if executable_command else None
    libraries = list_native_libraries(executable.parent, config) if executable else []

    return EngineDiagnostics(
        data_directory=data_directory,
        language=language,
        traineddata_present=present,
        data_files=list_data_files(data_directory, config.max_data_files),
        executable=executable,
        native_libraries=libraries,
    )
