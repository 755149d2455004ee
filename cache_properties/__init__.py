"""Typed configuration for cache providers."""

from .config import (
    CacheProperties,
    CacheType,
    ConfigPriority,
    ConfigurationError,
    FileResource,
    Resource,
    bind_cache_properties,
    get_cache_properties,
    get_property_sources,
    get_resource,
    reset_cache_properties,
)

__version__ = "1.0.0"

__all__ = [
    "CacheProperties",
    "CacheType",
    "ConfigPriority",
    "ConfigurationError",
    "FileResource",
    "Resource",
    "bind_cache_properties",
    "get_cache_properties",
    "get_property_sources",
    "get_resource",
    "reset_cache_properties",
]
