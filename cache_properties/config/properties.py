"""Configuration properties for the cache abstraction."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .base import ConfigurationError, parse_list
from .cache_type import CacheType
from .providers import (
    CaffeineConfig,
    CouchbaseConfig,
    EhCacheConfig,
    HazelcastConfig,
    InfinispanConfig,
    JCacheConfig,
)
from .resources import Resource

logger = logging.getLogger(__name__)


def _to_names(value: Union[str, Iterable[str], None]) -> List[str]:
    """Copy cache names, splitting a comma-separated string."""
    if value is None or isinstance(value, str):
        return parse_list(value)
    return list(value)


class CacheProperties:
    """Cache settings bound from the ``spring.cache`` keys.

    The provider groups are created once with the aggregate and cannot be
    replaced; set their fields directly instead::

        properties = CacheProperties()
        properties.cache_names = ["users", "orders"]
        properties.couchbase.expiration = 60000
    """

    PREFIX = "spring.cache"

    def __init__(
        self,
        cache_type: Union[CacheType, str, None] = None,
        cache_names: Union[str, Iterable[str], None] = None,
    ):
        self._type: Optional[CacheType] = CacheType.parse(cache_type)
        self._cache_names: List[str] = _to_names(cache_names)

        self._caffeine = CaffeineConfig()
        self._couchbase = CouchbaseConfig()
        self._ehcache = EhCacheConfig()
        self._hazelcast = HazelcastConfig()
        self._infinispan = InfinispanConfig()
        self._jcache = JCacheConfig()

    @property
    def type(self) -> Optional[CacheType]:
        """Cache type, or None to auto-detect it from the environment."""
        return self._type

    @type.setter
    def type(self, value: Union[CacheType, str, None]) -> None:
        self._type = CacheType.parse(value)

    @property
    def cache_names(self) -> List[str]:
        """Names of the caches to create if the cache manager supports it.

        Setting names usually disables creating additional caches on the fly.
        """
        return self._cache_names

    @cache_names.setter
    def cache_names(self, value: Union[str, Iterable[str], None]) -> None:
        self._cache_names = _to_names(value)

    @property
    def caffeine(self) -> CaffeineConfig:
        return self._caffeine

    @property
    def couchbase(self) -> CouchbaseConfig:
        return self._couchbase

    @property
    def ehcache(self) -> EhCacheConfig:
        return self._ehcache

    @property
    def hazelcast(self) -> HazelcastConfig:
        return self._hazelcast

    @property
    def infinispan(self) -> InfinispanConfig:
        return self._infinispan

    @property
    def jcache(self) -> JCacheConfig:
        return self._jcache

    def resolve_config_location(self, config: Optional[Resource]) -> Optional[Resource]:
        """Resolve the config location if set.

        Args:
            config: The config resource, or None

        Returns:
            The same resource, or None if it is not set

        Raises:
            ConfigurationError: If the resource is set but does not exist
        """
        if config is None:
            return None
        if not config.exists():
            raise ConfigurationError(
                f"Cache configuration does not exist '{config.description}'",
                resource=config,
            )
        logger.debug(f"Resolved cache configuration {config.description}")
        return config

    def validate(self) -> bool:
        """Resolve every provider configuration location that is set.

        Returns:
            True if all set locations exist

        Raises:
            ConfigurationError: On the first location that does not exist
        """
        for name in ("ehcache", "hazelcast", "infinispan", "jcache"):
            self.resolve_config_location(getattr(self, name).config)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary keyed by property suffix."""
        return {
            "type": self._type.value if self._type else None,
            "cache-names": list(self._cache_names),
            "caffeine": self._caffeine.to_dict(),
            "couchbase": self._couchbase.to_dict(),
            "ehcache": self._ehcache.to_dict(),
            "hazelcast": self._hazelcast.to_dict(),
            "infinispan": self._infinispan.to_dict(),
            "jcache": self._jcache.to_dict(),
        }

    def __repr__(self) -> str:
        cache_type = self._type.value if self._type else "auto"
        return f"CacheProperties(type={cache_type!r}, cache_names={self._cache_names!r})"
