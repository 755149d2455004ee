"""Cache configuration: properties, provider groups and binding."""
from __future__ import annotations

import threading
from typing import Optional

from .base import (
    ConfigPriority,
    ConfigurationError,
    PropertySources,
    get_property_sources,
    load_environment,
)
from .binding import CachePropertiesModel, bind_cache_properties
from .cache_type import CacheType
from .properties import CacheProperties
from .providers import (
    CaffeineConfig,
    CouchbaseConfig,
    EhCacheConfig,
    HazelcastConfig,
    InfinispanConfig,
    JCacheConfig,
)
from .resources import FileResource, Resource, get_resource

# Singleton instance with thread-safe initialization
_properties_instance: Optional[CacheProperties] = None
_properties_lock = threading.Lock()


def get_cache_properties() -> CacheProperties:
    """Get global cache properties, bound from the environment on first use."""
    global _properties_instance
    if _properties_instance is None:
        with _properties_lock:
            # Double-check pattern to prevent race conditions
            if _properties_instance is None:
                load_environment()
                _properties_instance = bind_cache_properties()
    return _properties_instance


def reset_cache_properties() -> None:
    """Drop the global instance (useful for testing)."""
    global _properties_instance
    with _properties_lock:
        _properties_instance = None


__all__ = [
    "CacheProperties",
    "CachePropertiesModel",
    "CacheType",
    "CaffeineConfig",
    "ConfigPriority",
    "ConfigurationError",
    "CouchbaseConfig",
    "EhCacheConfig",
    "FileResource",
    "HazelcastConfig",
    "InfinispanConfig",
    "JCacheConfig",
    "PropertySources",
    "Resource",
    "bind_cache_properties",
    "get_cache_properties",
    "get_property_sources",
    "get_resource",
    "load_environment",
    "reset_cache_properties",
]
