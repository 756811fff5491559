"""Copy settings — loads and validates the optional YAML settings file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from .copier import DEFAULT_BUFFER_SIZE

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass
class CopySettings:
    """Tunable settings for a copy run."""
    buffer_size: int = DEFAULT_BUFFER_SIZE
    log_level: str | None = None


def load_settings(path: str | Path) -> CopySettings:
    """Load copy settings from a YAML file.

    Keys that are absent fall back to their defaults. Unknown keys are ignored.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A CopySettings instance.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If the file is not valid YAML or not a mapping at the top level.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Settings file is not valid YAML: {path}") from e

    # An empty file loads as None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Settings YAML must be a mapping at the top level.")

    log_level = data.get("log_level")
    if isinstance(log_level, str):
        log_level = log_level.upper()

    return CopySettings(
        buffer_size=data.get("buffer_size", DEFAULT_BUFFER_SIZE),
        log_level=log_level,
    )


def validate_settings(settings: CopySettings) -> list[str]:
    """Validate loaded settings.

    Returns a list of validation error messages. Empty list means valid.
    """
    errors: list[str] = []

    buffer_size = settings.buffer_size
    if not isinstance(buffer_size, int) or isinstance(buffer_size, bool) or buffer_size <= 0:
        errors.append(f"buffer_size must be a positive integer, got {buffer_size!r}.")

    if settings.log_level is not None and settings.log_level not in VALID_LOG_LEVELS:
        errors.append(
            f"log_level '{settings.log_level}' is not valid. "
            f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}."
        )

    return errors
