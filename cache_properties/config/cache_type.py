"""Supported cache types."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .base import ConfigurationError


class CacheType(Enum):
    """Available cache types, in auto-detection order."""

    GENERIC = "generic"
    JCACHE = "jcache"
    EHCACHE = "ehcache"
    HAZELCAST = "hazelcast"
    INFINISPAN = "infinispan"
    COUCHBASE = "couchbase"
    REDIS = "redis"
    CAFFEINE = "caffeine"
    SIMPLE = "simple"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union[CacheType, str, None]) -> Optional[CacheType]:
        """Parse a cache type from its name.

        Matching ignores case, surrounding whitespace and ``-``/``_``.

        Args:
            value: Cache type, its name, or None

        Returns:
            Matching CacheType, or None when unset (auto-detect)

        Raises:
            ConfigurationError: If the name is not a known cache type
        """
        if value is None or isinstance(value, cls):
            return value
        name = str(value).strip().lower().replace("-", "").replace("_", "")
        if not name:
            return None
        for member in cls:
            if member.value == name:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Unknown cache type '{value}'. Valid types: {choices}")
