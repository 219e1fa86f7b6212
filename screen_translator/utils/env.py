"""Environment and utility functions."""

import logging
import os
import sys
from pathlib import Path

from ..config import LOG_FORMAT, LOG_DATE_FORMAT, TESSDATA_ENV_VAR

# Default log file location
DEFAULT_LOG_FILE = "screen_translator.log"


def setup_logging(level: int = logging.INFO, log_file: str | None = DEFAULT_LOG_FILE) -> None:
    """Set up logging configuration.

    Logs are written to both console (stderr) and a file.

    Args:
        level: Logging level
        log_file: Path to log file (None to disable file logging)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            handlers.append(file_handler)
        except (OSError, PermissionError) as e:
            # Fall back to console-only if file logging fails
            print(f"Warning: Could not open log file '{log_file}': {e}", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True  # Replace any existing handlers
    )


def app_base_dir() -> Path:
    """Directory the application runs from.

    For frozen builds this is the executable's directory, otherwise the
    package directory.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent


def tessdata_from_env(environ: dict[str, str] | None = None) -> Path | None:
    """Read the tessdata directory from the environment (blank means unset)."""
    environ = os.environ if environ is None else environ
    value = environ.get(TESSDATA_ENV_VAR, "").strip()
    return Path(value) if value else None
