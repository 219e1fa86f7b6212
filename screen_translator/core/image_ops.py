"""Image preprocessing for OCR.

Small, low resolution crops recognize poorly. Every image goes through the
same deterministic policy before recognition; there is no feedback from OCR
confidence.
"""

import io
import logging

from PIL import Image, ImageEnhance, ImageFilter, ImageOps

from ..config import PREPROCESS_CONFIG, PreprocessConfig

logger = logging.getLogger(__name__)


def compute_upscale_size(
    width: int,
    height: int,
    config: PreprocessConfig = PREPROCESS_CONFIG
) -> tuple[int, int]:
    """Compute the target size for upscaling.

    Each dimension below its minimum is multiplied by the upscale factor;
    the other is left alone.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        config: Preprocessing policy

    Returns:
        (width, height) target box; equal to the input when no growth is needed
    """
    target_w = width * config.upscale_factor if width < config.min_width else width
    target_h = height * config.upscale_factor if height < config.min_height else height
    return target_w, target_h


def enhance_for_ocr(
    image: Image.Image,
    config: PreprocessConfig = PREPROCESS_CONFIG
) -> Image.Image:
    """Apply orientation, grayscale, contrast, sharpening and upscaling.

    Args:
        image: Source image
        config: Preprocessing policy

    Returns:
        New grayscale image ready for recognition
    """
    image = ImageOps.exif_transpose(image)
    image = image.convert("L")
    image = ImageEnhance.Contrast(image).enhance(config.contrast_factor)
    image = image.filter(ImageFilter.UnsharpMask(
        radius=config.sharpen_radius,
        percent=config.sharpen_percent,
        threshold=config.sharpen_threshold,
    ))

    target = compute_upscale_size(image.width, image.height, config)
    if target != image.size:
        logger.debug(f"Upscaling {image.width}x{image.height} -> {target[0]}x{target[1]}")
        image = image.resize(target, Image.Resampling.LANCZOS)

    return image


def preprocess_for_ocr(
    image_bytes: bytes,
    config: PreprocessConfig = PREPROCESS_CONFIG
) -> bytes:
    """Preprocess encoded image bytes for recognition.

    The result is re-encoded in the source format so the engine reads the
    same kind of data it was given.

    Args:
        image_bytes: Encoded raster image
        config: Preprocessing policy

    Returns:
        Encoded preprocessed image
    """
    with Image.open(io.BytesIO(image_bytes)) as source:
        image_format = source.format or config.fallback_format
        source.load()
        processed = enhance_for_ocr(source, config)

    buffer = io.BytesIO()
    processed.save(buffer, format=image_format)
    return buffer.getvalue()
