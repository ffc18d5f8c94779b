"""Configuration loading for the fileref command."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from scanner.discovery import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_RESULTS
from scanner.errors import SettingsError
from scanner.prefixes import clean_prefixes

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".fileref.yaml"


@dataclass
class Settings:
    """User-facing options for resolving references."""

    strip_prefixes: List[str] = field(default_factory=list)
    roots: List[str] = field(default_factory=list)
    exclude_dirs: Set[str] = field(default_factory=lambda: set(DEFAULT_EXCLUDE_DIRS))
    max_results: int = DEFAULT_MAX_RESULTS


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    """Read a list of strings, logging and skipping anything invalid."""
    valid, rejected = clean_prefixes(data.get(key))
    for entry in rejected:
        logger.warning("Ignoring invalid %s entry: %r", key, entry)
    return valid


def settings_from_dict(data: Optional[Dict[str, Any]]) -> Settings:
    """
    Build Settings from parsed configuration data.

    Invalid entries are skipped with a warning rather than failing.

    Args:
        data: Mapping loaded from a configuration file, or None.

    Returns:
        Settings with defaults filled in.
    """
    settings = Settings()
    if not data:
        return settings

    settings.strip_prefixes = _string_list(data, "strip_prefixes")
    settings.roots = _string_list(data, "roots")
    settings.exclude_dirs |= set(_string_list(data, "exclude_dirs"))

    max_results = data.get("max_results")
    if max_results is not None:
        if isinstance(max_results, int) and not isinstance(max_results, bool) and max_results > 0:
            settings.max_results = max_results
        else:
            logger.warning(
                "Ignoring invalid max_results %r, using %d", max_results, DEFAULT_MAX_RESULTS
            )

    return settings


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Configuration file. If None, ``.fileref.yaml`` in the current
              directory is used when present.

    Returns:
        Loaded Settings, or defaults when there is no file to read.

    Raises:
        SettingsError: If an explicit file is missing, or any file is
            unreadable or not a YAML mapping.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_NAME)
        if not path.is_file():
            return Settings()

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Cannot read config file '{path}': {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in config file '{path}': {e}") from e

    if data is not None and not isinstance(data, dict):
        raise SettingsError(f"Config file '{path}' must contain a mapping")

    logger.debug("Loaded config file %s", path)
    return settings_from_dict(data)
