"""bytecopy CLI — command-line interface for the file copier."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .copier import DEFAULT_BUFFER_SIZE, CopyError, ErrorKind, copy_file

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "You need to specify source and destination as arguments"


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="bytecopy",
        description="Copy the contents of one file to another",
    )

    # Global logging verbosity flags
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging output",
    )
    verbosity.add_argument(
        "--quiet", "-q", action="store_true",
        help="Suppress all output except warnings and errors",
    )

    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML settings file (buffer_size, log_level)",
    )

    # Counted by hand so that a missing destination reports usage with exit 1
    parser.add_argument(
        "paths", nargs="*", metavar="PATH",
        help="Source file followed by destination file",
    )

    return parser


def resolve_log_level(args: argparse.Namespace, settings_level: str | None = None) -> int:
    """Pick the root log level: command-line flags win over the settings file."""
    if getattr(args, "verbose", False):
        return logging.DEBUG
    if getattr(args, "quiet", False):
        return logging.WARNING
    if settings_level:
        return getattr(logging, settings_level, logging.INFO)
    return logging.INFO


def cmd_copy(args: argparse.Namespace, buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    """Copy the source path to the destination path.

    Returns exit code (0 = success).
    """
    if len(args.paths) < 2:
        raise CopyError(ErrorKind.MISSING_ARGUMENTS, USAGE_MESSAGE)

    source, dest = args.paths[0], args.paths[1]
    if len(args.paths) > 2:
        logger.warning("Ignoring extra arguments: %s", " ".join(args.paths[2:]))

    result = copy_file(source, dest, buffer_size=buffer_size)
    logger.debug("Copy finished: %d bytes, %d chunks", result.bytes_copied, result.chunks)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # Return the exit code from argparse (0 for --help, 2 for errors)
        return e.code if isinstance(e.code, int) else 1

    settings = None
    config_errors: list[str] = []
    if args.config is not None:
        # PyYAML is only loaded when a settings file is given
        from .settings import load_settings, validate_settings

        try:
            settings = load_settings(Path(args.config))
        except (FileNotFoundError, ValueError) as e:
            config_errors.append(str(e))
        else:
            config_errors.extend(validate_settings(settings))

    log_level = resolve_log_level(
        args, settings.log_level if settings and not config_errors else None
    )
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
        stream=sys.stdout,
    )

    if config_errors:
        for err in config_errors:
            logger.error("Settings error: %s", err)
        return 1

    buffer_size = settings.buffer_size if settings else DEFAULT_BUFFER_SIZE

    try:
        return cmd_copy(args, buffer_size=buffer_size)
    except CopyError as e:
        if e.kind is ErrorKind.MISSING_ARGUMENTS:
            parser.print_usage(sys.stdout)
        logger.error("%s", e)
        return 1
    except Exception as e:
        logger.error("%s", e)
        return 1
