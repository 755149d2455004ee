"""Bind cache properties from property sources.

Raw values are validated with pydantic models before they are applied, so
type coercion errors surface as a single ConfigurationError naming every
offending key.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .base import ConfigurationError, PropertySources, get_property_sources, normalize_key, parse_list
from .cache_type import CacheType
from .properties import CacheProperties
from .resources import Resource, get_resource

logger = logging.getLogger(__name__)

# Key suffix -> (group, field) on CacheProperties; group None means top level
BINDINGS: List[Tuple[str, Optional[str], str]] = [
    ("type", None, "type"),
    ("cache-names", None, "cache_names"),
    ("caffeine.spec", "caffeine", "spec"),
    ("couchbase.expiration", "couchbase", "expiration"),
    ("ehcache.config", "ehcache", "config"),
    ("hazelcast.config", "hazelcast", "config"),
    ("infinispan.config", "infinispan", "config"),
    ("jcache.config", "jcache", "config"),
    ("jcache.provider", "jcache", "provider"),
]


# Pydantic models for structured validation
class CaffeineModel(BaseModel):
    """Caffeine settings model."""

    spec: Optional[str] = Field(None, description="Spec used to create caches")


class CouchbaseModel(BaseModel):
    """Couchbase settings model."""

    expiration: int = Field(0, description="Entry expiration in milliseconds")


class ConfigLocationModel(BaseModel):
    """Settings model for providers configured through a single file."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: Optional[Resource] = Field(None, description="Configuration file location")

    @field_validator("config", mode="before")
    @classmethod
    def validate_config(cls, v: Any) -> Optional[Resource]:
        """Turn locations into resources, keeping Resource instances as they are."""
        return get_resource(v)


class JCacheModel(ConfigLocationModel):
    """JCache settings model."""

    provider: Optional[str] = Field(None, description="Caching provider implementation")


class CachePropertiesModel(BaseModel):
    """Validation model for the whole ``spring.cache`` tree."""

    model_config = ConfigDict(extra="ignore")

    type: Optional[CacheType] = Field(None, description="Cache type, auto-detected if unset")
    cache_names: List[str] = Field(default_factory=list, description="Cache names to create")
    caffeine: CaffeineModel = Field(default_factory=CaffeineModel)
    couchbase: CouchbaseModel = Field(default_factory=CouchbaseModel)
    ehcache: ConfigLocationModel = Field(default_factory=ConfigLocationModel)
    hazelcast: ConfigLocationModel = Field(default_factory=ConfigLocationModel)
    infinispan: ConfigLocationModel = Field(default_factory=ConfigLocationModel)
    jcache: JCacheModel = Field(default_factory=JCacheModel)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> Optional[CacheType]:
        """Parse cache type names leniently."""
        return CacheType.parse(v)

    @field_validator("cache_names", mode="before")
    @classmethod
    def validate_cache_names(cls, v: Any) -> List[str]:
        """Split comma-separated names."""
        return parse_list(v)


def _flatten(source: Mapping[str, Any], parent: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into normalized dotted keys."""
    flat: Dict[str, Any] = {}
    for key, value in source.items():
        full_key = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, full_key))
        else:
            flat[normalize_key(full_key)] = value
    return flat


def _collect(source: Optional[Mapping[str, Any]], sources: PropertySources) -> Dict[str, Any]:
    """Collect raw values for every known key that is set.

    Returns:
        Mapping of key suffix to raw value
    """
    raw: Dict[str, Any] = {}
    prefix = normalize_key(CacheProperties.PREFIX)

    if source is not None:
        flat = _flatten(source)
        for suffix, _, _ in BINDINGS:
            suffix_key = normalize_key(suffix)
            for candidate in (f"{prefix}.{suffix_key}", suffix_key):
                if candidate in flat:
                    raw[suffix] = flat[candidate]
                    break
        return raw

    for suffix, _, _ in BINDINGS:
        value = sources.get_value(f"{CacheProperties.PREFIX}.{suffix}")
        if value is not None:
            raw[suffix] = value
    return raw


def _to_model_input(raw: Mapping[str, Any]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for suffix, group, attr in BINDINGS:
        if suffix not in raw:
            continue
        if group is None:
            data[attr] = raw[suffix]
        else:
            data.setdefault(group, {})[attr] = raw[suffix]
    return data


def _format_errors(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        key = ".".join(str(part).replace("_", "-") for part in item["loc"])
        messages.append(f"{CacheProperties.PREFIX}.{key}: {item['msg']}")
    return "; ".join(messages)


def bind_cache_properties(
    source: Optional[Mapping[str, Any]] = None,
    properties: Optional[CacheProperties] = None,
    sources: Optional[PropertySources] = None,
) -> CacheProperties:
    """Populate cache properties from configuration.

    Only keys that are set are applied, so binding onto an existing
    instance keeps its other values. Configuration file locations are not
    checked here; use ``CacheProperties.resolve_config_location``.

    Args:
        source: Mapping of dotted keys (with or without the ``spring.cache``
            prefix) or nested dicts. Defaults to the property sources.
        properties: Instance to populate, a new one if omitted
        sources: Property sources used when no mapping is given

    Returns:
        Populated CacheProperties

    Raises:
        ConfigurationError: If any value fails validation
    """
    if properties is None:
        properties = CacheProperties()
    if sources is None:
        sources = get_property_sources()

    raw = _collect(source, sources)
    try:
        model = CachePropertiesModel.model_validate(_to_model_input(raw))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid cache configuration: {_format_errors(e)}") from e

    for suffix, group, attr in BINDINGS:
        if suffix not in raw:
            continue
        value = getattr(model if group is None else getattr(model, group), attr)
        target = properties if group is None else getattr(properties, group)
        setattr(target, attr, value)

    logger.debug(f"Bound cache properties: {sorted(raw)}")
    return properties
