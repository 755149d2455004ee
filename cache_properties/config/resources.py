"""Configuration resource references."""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .base import ConfigurationError

FILE_PREFIX = "file:"

# Schemes are at least two characters long; "C:" is a drive letter
SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]+):")


class Resource(ABC):
    """Reference to an external configuration file that may not exist."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Location string the resource was created from."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description used in error messages."""

    @abstractmethod
    def exists(self) -> bool:
        """Check whether the resource currently exists."""

    def __str__(self) -> str:
        return self.description


class FileResource(Resource):
    """Resource backed by a filesystem path."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    @property
    def description(self) -> str:
        return f"file [{self._path.absolute()}]"

    def exists(self) -> bool:
        return self._path.exists()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileResource):
            return NotImplemented
        return self._path.absolute() == other._path.absolute()

    def __hash__(self) -> int:
        return hash(self._path.absolute())

    def __repr__(self) -> str:
        return f"FileResource({str(self._path)!r})"


def get_resource(location: Union[Resource, str, Path, None]) -> Optional[Resource]:
    """Turn a configured location into a resource reference.

    Existence is not checked here.

    Args:
        location: Resource, path, ``file:`` prefixed string, or None

    Returns:
        Resource, or None if no location is set

    Raises:
        ConfigurationError: If the location uses a scheme other than ``file:``
    """
    if location is None or isinstance(location, Resource):
        return location
    if isinstance(location, Path):
        return FileResource(location)

    location = str(location).strip()
    scheme = SCHEME_PATTERN.match(location)
    if scheme and scheme.group(1).lower() != "file":
        raise ConfigurationError(
            f"Unsupported cache configuration location '{location}': '{scheme.group(1)}:' "
            f"locations are not supported, use a file path"
        )
    if location.lower().startswith(FILE_PREFIX):
        location = location[len(FILE_PREFIX):]
    if not location:
        return None
    return FileResource(location)
