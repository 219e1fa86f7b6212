"""Core processing functionality."""

from .cancellation import cancellable_sleep, raise_if_cancelled, run_cancellable
from .image_ops import compute_upscale_size, enhance_for_ocr, preprocess_for_ocr
from .tessdata import (
    DataDirectoryResolution,
    find_ancestor_tessdata,
    normalize_language,
    resolve_data_directory,
)

__all__ = [
    # Cancellation
    'cancellable_sleep',
    'raise_if_cancelled',
    'run_cancellable',
    # Image operations
    'compute_upscale_size',
    'enhance_for_ocr',
    'preprocess_for_ocr',
    # Tessdata
    'DataDirectoryResolution',
    'find_ancestor_tessdata',
    'normalize_language',
    'resolve_data_directory',
]
