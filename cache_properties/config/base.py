"""Base configuration module for property sources and environment loading."""
from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when cache configuration is invalid."""

    def __init__(self, message: str, resource: Any = None):
        super().__init__(message)
        self.resource = resource


# Configuration overlay priorities
class ConfigPriority(Enum):
    """Configuration priority levels for overlay system.

    The package only reads the process environment itself. Callers supply
    every overlay, e.g. values parsed from their own config file go in at
    ``FILE`` and command-line values at ``OVERRIDES``.
    """

    DEFAULTS = 0
    FILE = 1
    ENVIRONMENT = 2
    OVERRIDES = 3


def normalize_key(key: str) -> str:
    """Return the canonical dotted form of a property key.

    Segments are lowercased and ``_``/``-`` separators are dropped, so
    ``spring.cache.cacheNames``, ``spring.cache.cache_names`` and
    ``spring.cache.cache-names`` all normalize to ``spring.cache.cachenames``.
    """
    segments = [seg.strip().lower().replace("-", "").replace("_", "") for seg in key.split(".")]
    return ".".join(seg for seg in segments if seg)


def to_env_key(key: str) -> str:
    """Convert a dotted property key to its environment variable name.

    Args:
        key: Property key such as ``spring.cache.cache-names``

    Returns:
        Upper snake case name such as ``SPRING_CACHE_CACHE_NAMES``
    """
    return key.strip().upper().replace(".", "_").replace("-", "_")


def parse_list(value: Any, delimiter: str = ",") -> List[str]:
    """Parse list value from string or return as-is if already a list.

    Args:
        value: Value to parse
        delimiter: String delimiter

    Returns:
        List value
    """
    if isinstance(value, list):
        return value
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    if isinstance(value, str):
        return [item.strip() for item in value.split(delimiter) if item.strip()]
    return [value] if value is not None else []


def load_environment() -> Optional[Path]:
    """Load environment variables from the first .env file found.

    Returns:
        Path of the loaded file, or None if no file was found
    """
    env_paths = [Path(".env"), Path("../.env"), Path.home() / ".env"]

    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path, override=False)
            logger.debug(f"Loaded environment from {env_path}")
            return env_path
    return None


class PropertySources:
    """Layered key/value sources with environment fallback."""

    def __init__(self):
        self._overlays: Dict[ConfigPriority, Dict[str, Any]] = {}

    def set_overlay(self, priority: ConfigPriority, config: Mapping[str, Any]) -> None:
        """Set configuration overlay at specified priority.

        Args:
            priority: Priority level for overlay
            config: Flat mapping of dotted keys to values
        """
        self._overlays[priority] = {normalize_key(k): v for k, v in config.items()}
        logger.debug(f"Overlay {priority.name} set with {len(config)} key(s)")

    def clear(self) -> None:
        """Drop all overlays."""
        self._overlays.clear()

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get configuration value with overlay priority.

        Args:
            key: Dotted configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        normalized = normalize_key(key)

        # Check overlays in priority order (highest to lowest)
        for priority in sorted(ConfigPriority, key=lambda p: p.value, reverse=True):
            overlay = self._overlays.get(priority)
            if overlay is not None and normalized in overlay:
                return overlay[normalized]

        # Fall back to environment
        env_value = os.getenv(to_env_key(key))
        if env_value is not None:
            return env_value

        return default


_sources = PropertySources()


def get_property_sources() -> PropertySources:
    """Get the process-wide property sources."""
    return _sources
