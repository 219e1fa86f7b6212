"""Configuration and constants for the Screen Translator project."""

from dataclasses import dataclass


# OCR language handling
DEFAULT_OCR_LANGUAGE = "eng"
DEFAULT_TARGET_LANGUAGE = "en"

# Two-letter (ISO 639-1 style) codes -> Tesseract traineddata names.
# Unknown codes are passed to Tesseract unchanged.
LANGUAGE_CODE_MAP: dict[str, str] = {
    "en": "eng",
    "de": "deu",
    "fr": "fra",
    "es": "spa",
    "it": "ita",
    "pt": "por",
    "nl": "nld",
    "pl": "pol",
    "ru": "rus",
    "uk": "ukr",
    "cs": "ces",
    "sv": "swe",
    "da": "dan",
    "fi": "fin",
    "no": "nor",
    "el": "ell",
    "tr": "tur",
    "ar": "ara",
    "he": "heb",
    "hi": "hin",
    "th": "tha",
    "vi": "vie",
    "id": "ind",
    "ja": "jpn",
    "ko": "kor",
    "zh": "chi_sim",
    "zh-cn": "chi_sim",
    "zh-tw": "chi_tra",
}


# Tesseract data directory lookup
TESSDATA_DIR_NAME = "tessdata"
TESSDATA_ENV_VAR = "TESSDATA_PREFIX"
TRAINEDDATA_SUFFIX = ".traineddata"


# Region selection minimum (smaller crops recognize poorly)
MIN_REGION_WIDTH = 30
MIN_REGION_HEIGHT = 15


# Pipeline loop
DEFAULT_INTERVAL_SECONDS = 0.5


@dataclass(frozen=True)
class PreprocessConfig:
    """Fixed preprocessing policy applied before recognition."""
    contrast_factor: float = 1.1

    # Unsharp mask (Gaussian based) to counter blur from contrast/resize
    sharpen_radius: float = 1.0
    sharpen_percent: int = 60
    sharpen_threshold: int = 2

    # Upscaling: a dimension below its minimum is doubled
    min_width: int = 800
    min_height: int = 200
    upscale_factor: int = 2

    # Used when the source format cannot be detected
    fallback_format: str = "PNG"


PREPROCESS_CONFIG = PreprocessConfig()


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Bounds for the diagnostics gathered on engine init failure."""
    max_data_files: int = 20
    max_native_libraries: int = 10
    native_library_patterns: tuple[str, ...] = ("*.so", "*.so.*", "*.dll", "*.dylib")


DIAGNOSTICS_CONFIG = DiagnosticsConfig()


# Tesseract invocation
TESSERACT_OPTIONS = "--oem 3 --psm 6"


# Settings persistence
SETTINGS_ORGANIZATION = "ScreenTranslator"
SETTINGS_APPLICATION = "settings"
SETTINGS_KEY_TESSDATA = "ocr/tessdata_path"
SETTINGS_KEY_LANGUAGE = "ocr/language"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
