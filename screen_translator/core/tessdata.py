"""Tesseract language codes and data directory resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import (
    DEFAULT_OCR_LANGUAGE,
    LANGUAGE_CODE_MAP,
    TESSDATA_DIR_NAME,
    TRAINEDDATA_SUFFIX,
)
from ..utils.env import app_base_dir, tessdata_from_env

logger = logging.getLogger(__name__)


def normalize_language(code: Optional[str]) -> str:
    """Map a human-entered language code to a Tesseract language name.

    Examples:
        >>> normalize_language("EN")
        'eng'
        >>> normalize_language("chi_sim")
        'chi_sim'
        >>> normalize_language(None)
        'eng'

    Args:
        code: Language code such as 'en', 'de' or an engine name like 'deu'

    Returns:
        Mapped code; unknown codes pass through unchanged
    """
    if code is None or not code.strip():
        return DEFAULT_OCR_LANGUAGE
    code = code.strip()
    return LANGUAGE_CODE_MAP.get(code.lower(), code)


def traineddata_path(data_directory: Path, language: str) -> Path:
    """Path of the traineddata file for a single language."""
    return data_directory / f"{language}{TRAINEDDATA_SUFFIX}"


@dataclass(frozen=True, slots=True)
class DataDirectoryResolution:
    """Outcome of data directory resolution.

    Keeps every candidate so a missing directory can be reported with the
    paths that were considered.
    """
    path: Path
    source: str  # 'configured', 'environment', 'search' or 'default'
    configured: Optional[Path]
    environment: Optional[Path]
    default: Path

    @property
    def exists(self) -> bool:
        return self.path.is_dir()

    def attempted_paths(self) -> dict[str, Optional[Path]]:
        return {
            "configured": self.configured,
            "environment": self.environment,
            "default": self.default,
            "resolved": self.path,
        }


def find_ancestor_tessdata(start: Path) -> Optional[Path]:
    """Walk upward from ``start`` to the first directory holding a tessdata dir."""
    for directory in (start, *start.parents):
        candidate = directory / TESSDATA_DIR_NAME
        if candidate.is_dir():
            return candidate
    return None


def resolve_data_directory(
    configured: Optional[Path | str] = None,
    base_dir: Optional[Path] = None,
    environ: Optional[dict[str, str]] = None
) -> DataDirectoryResolution:
    """Resolve the tessdata directory.

    Priority: configured value, then the TESSDATA_PREFIX environment
    variable, then the first ancestor of ``base_dir`` containing a tessdata
    directory, then ``base_dir/tessdata``. The result is not required to
    exist.

    Args:
        configured: Explicit directory from settings
        base_dir: Application base directory (defaults to app_base_dir())
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolution with the chosen path and all candidates
    """
    base_dir = Path(base_dir) if base_dir is not None else app_base_dir()
    configured_path = Path(configured) if configured else None
    env_path = tessdata_from_env(environ)
    default_path = base_dir / TESSDATA_DIR_NAME

    if configured_path is not None:
        path, source = configured_path, "configured"
    elif env_path is not None:
        path, source = env_path, "environment"
    else:
        found = find_ancestor_tessdata(base_dir)
        if found is not None:
            path, source = found, "search"
        else:
            path, source = default_path, "default"

    logger.debug(f"tessdata resolved to {path} ({source})")
    return DataDirectoryResolution(
        path=path,
        source=source,
        configured=configured_path,
        environment=env_path,
        default=default_path,
    )
