"""Command-line interface for Screen Translator."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import pydantic

from .adapters.capture import MssScreenCapture
from .adapters.ocr import TesseractOcrAdapter
from .adapters.overlay import ConsoleOverlay
from .adapters.translation import GoogleTranslateAdapter, MockTranslator
from .application.services.pipeline import PipelineCoordinator
from .config import DEFAULT_INTERVAL_SECONDS, DEFAULT_TARGET_LANGUAGE
from .domain.value_objects.config import EngineConfig, PipelineConfig
from .domain.value_objects.region import Region
from .exceptions import ConfigurationError, ScreenTranslatorError
from .infrastructure.settings_store import SettingsStore
from .utils.env import setup_logging

logger = logging.getLogger(__name__)

TRANSLATORS = {
    "mock": MockTranslator,
    "google": GoogleTranslateAdapter,
}
DEFAULT_TRANSLATOR = "google"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="screen-translator",
        description="Capture a screen region, recognize its text and show a translation"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--settings-file",
        type=Path,
        help="Settings file to use instead of the per-user one"
    )

    # OCR options shared by commands that run the engine
    ocr_options = argparse.ArgumentParser(add_help=False)
    ocr_group = ocr_options.add_argument_group("OCR options")
    ocr_group.add_argument(
        "--tessdata",
        type=Path,
        help="Tesseract data directory (overrides settings and TESSDATA_PREFIX)"
    )
    ocr_group.add_argument(
        "--ocr-lang",
        help="OCR language, e.g. 'en', 'de' or 'jpn' (overrides settings)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    run_parser = commands.add_parser(
        "run",
        parents=[ocr_options],
        help="Translate a screen region repeatedly"
    )
    run_parser.add_argument(
        "--region",
        type=int,
        nargs=4,
        required=True,
        metavar=("X", "Y", "WIDTH", "HEIGHT"),
        help="Screen region to capture"
    )
    run_parser.add_argument(
        "-i", "--interval",
        type=float,
        default=DEFAULT_INTERVAL_SECONDS,
        help=f"Seconds between captures (default: {DEFAULT_INTERVAL_SECONDS})"
    )
    run_parser.add_argument(
        "-l", "--lang",
        default=DEFAULT_TARGET_LANGUAGE,
        help=f"Target language (default: {DEFAULT_TARGET_LANGUAGE})"
    )
    run_parser.add_argument(
        "--translator",
        choices=sorted(TRANSLATORS),
        default=DEFAULT_TRANSLATOR,
        help=f"Translation backend (default: {DEFAULT_TRANSLATOR})"
    )
    run_parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single cycle and exit"
    )

    ocr_parser = commands.add_parser(
        "ocr",
        parents=[ocr_options],
        help="Recognize text in an image file"
    )
    ocr_parser.add_argument("image", type=Path, help="Image file")

    settings_parser = commands.add_parser("settings", help="Show or change saved settings")
    settings_commands = settings_parser.add_subparsers(dest="settings_command", required=True)
    settings_commands.add_parser("show", help="Show effective settings")
    set_parser = settings_commands.add_parser("set", help="Save settings")
    set_parser.add_argument("--tessdata", help="Tesseract data directory ('' to unset)")
    set_parser.add_argument("--ocr-lang", help="OCR language ('' to unset)")
    settings_commands.add_parser("reset", help="Remove all saved settings")

    return parser


def build_engine_config(parsed: argparse.Namespace, settings: SettingsStore) -> EngineConfig:
    """Command-line values win over saved settings."""
    return EngineConfig(
        data_directory=parsed.tessdata or settings.data_directory_path,
        language=parsed.ocr_lang or settings.language_code,
    )


def build_coordinator(
    ocr: TesseractOcrAdapter,
    translator: str = DEFAULT_TRANSLATOR
) -> PipelineCoordinator:
    """Wire the default collaborators around an OCR adapter.

    Raises:
        ConfigurationError: If the translator name is unknown
    """
    translator_class = TRANSLATORS.get(translator)
    if translator_class is None:
        raise ConfigurationError(f"Unknown translator: {translator}", config_key="translator")

    return PipelineCoordinator(
        capture=MssScreenCapture(),
        ocr=ocr,
        translator=translator_class(),
        overlay=ConsoleOverlay(),
    )


def _command_run(parsed: argparse.Namespace, settings: SettingsStore) -> int:
    region = Region(*parsed.region)
    if not region.is_selectable:
        logger.warning(f"Region {region} is very small, recognition may be poor")

    try:
        pipeline_config = PipelineConfig(
            interval_seconds=parsed.interval,
            target_language=parsed.lang,
        )
    except pydantic.ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return 2

    with TesseractOcrAdapter(build_engine_config(parsed, settings)) as ocr:
        logger.info(f"Using tessdata at {ocr.data_directory} ({ocr.resolution.source})")
        coordinator = build_coordinator(ocr, parsed.translator)

        if parsed.once:
            shown = asyncio.run(
                coordinator.run_once(region, pipeline_config.target_language)
            )
            return 0 if shown else 1

        try:
            summary = asyncio.run(coordinator.run_loop(
                region,
                pipeline_config.interval_seconds,
                pipeline_config.target_language,
            ))
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            return 0

        return 0 if summary.failed == 0 else 1


def _command_ocr(parsed: argparse.Namespace, settings: SettingsStore) -> int:
    image_path: Path = parsed.image
    if not image_path.is_file():
        logger.error(f"Image not found: {image_path}")
        return 1

    with TesseractOcrAdapter(build_engine_config(parsed, settings)) as ocr:
        text = asyncio.run(ocr.recognize(image_path.read_bytes()))

    if text is None:
        logger.info("No text recognized")
        return 1

    print(text)
    return 0


def _command_settings(parsed: argparse.Namespace, settings: SettingsStore) -> int:
    if parsed.settings_command == "set":
        if parsed.tessdata is not None:
            settings.data_directory_path = parsed.tessdata
        if parsed.ocr_lang is not None:
            settings.language_code = parsed.ocr_lang
        settings.save()
        logger.info(f"Settings saved to {settings.path}")
    elif parsed.settings_command == "reset":
        settings.reset()
        settings.save()
        logger.info("Settings reset to defaults")

    print(f"settings file: {settings.path}")
    for key, value in settings.as_dict().items():
        print(f"{key}: {value if value is not None else '(not set)'}")
    return 0


COMMANDS = {
    "run": _command_run,
    "ocr": _command_ocr,
    "settings": _command_settings,
}


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Setup logging
    setup_logging(logging.DEBUG if parsed.verbose else logging.INFO)

    settings = SettingsStore(parsed.settings_file)

    try:
        return COMMANDS[parsed.command](parsed, settings)
    except ScreenTranslatorError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
