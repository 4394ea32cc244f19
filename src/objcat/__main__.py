"""
Command-line entry point for objcat.
Usage: python -m objcat [content_dir] [--dump catalog.json]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .content import ContentLoadError, ContentService, dump_catalog
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objcat",
        description="Compile object content files into an index-stable catalog",
    )
    parser.add_argument(
        "content_dir",
        nargs="?",
        help="Directory holding the content files (default: configured content path)",
    )
    parser.add_argument("-o", "--dump", help="Write the compiled catalog as JSON")
    parser.add_argument("--profile", default="default", help="Settings profile name")
    parser.add_argument("--settings-file", help="INI file to read settings from")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to the console"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(profile=args.profile, settings_file=args.settings_file)
    except ConfigError as e:
        setup_logging(console_level="DEBUG" if args.verbose else None)
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(settings, console_level="DEBUG" if args.verbose else None)
    logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

    if args.content_dir:
        content_path: Optional[Path] = Path(args.content_dir)
    else:
        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1
        content_path = settings.paths.content_path

    if content_path is None:
        logger.error("No content directory given and none configured")
        return 1

    service = ContentService(content_path, settings)
    try:
        catalog = service.load()
    except ContentLoadError as e:
        logger.error(f"Compilation failed: {e}")
        return 1

    for name, count in catalog.sizes().items():
        logger.info(f"  {name:<16} {count:>6}")

    dump_target = args.dump or settings.paths.dump_path
    if dump_target:
        try:
            dump_catalog(catalog, Path(dump_target))
        except OSError as e:
            logger.error(f"Could not write catalog dump: {e}")
            return 1

    service.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
