"""Tests for binding cache properties from configuration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from cache_properties.config import (
    CacheProperties,
    CacheType,
    ConfigPriority,
    ConfigurationError,
    FileResource,
    PropertySources,
    bind_cache_properties,
    get_cache_properties,
    get_property_sources,
    reset_cache_properties,
)


class TestBindFromMapping:
    """Tests for binding from an explicit mapping."""

    def test_empty_mapping_gives_defaults(self):
        properties = bind_cache_properties({})
        assert properties.to_dict() == CacheProperties().to_dict()

    def test_prefixed_flat_keys(self, ehcache_xml: Path):
        properties = bind_cache_properties(
            {
                "spring.cache.type": "ehcache",
                "spring.cache.cache-names": "users, orders",
                "spring.cache.ehcache.config": str(ehcache_xml),
            }
        )

        assert properties.type is CacheType.EHCACHE
        assert properties.cache_names == ["users", "orders"]
        assert properties.ehcache.config == FileResource(ehcache_xml)

    def test_unprefixed_keys(self):
        properties = bind_cache_properties({"caffeine.spec": "maximumSize=500", "type": "caffeine"})
        assert properties.type is CacheType.CAFFEINE
        assert properties.caffeine.spec == "maximumSize=500"

    def test_nested_mapping(self):
        properties = bind_cache_properties(
            {
                "spring": {
                    "cache": {
                        "type": "jcache",
                        "jcache": {
                            "provider": "org.ehcache.jsr107.EhcacheCachingProvider",
                            "config": "file:/etc/app/jcache.xml",
                        },
                    }
                }
            }
        )

        assert properties.type is CacheType.JCACHE
        assert properties.jcache.provider == "org.ehcache.jsr107.EhcacheCachingProvider"
        assert properties.jcache.config == FileResource("/etc/app/jcache.xml")

    @pytest.mark.parametrize("key", ["cache-names", "cache_names", "cacheNames", "CACHE_NAMES"])
    def test_relaxed_keys(self, key):
        properties = bind_cache_properties({f"spring.cache.{key}": "a,b"})
        assert properties.cache_names == ["a", "b"]

    def test_cache_names_list_value(self):
        properties = bind_cache_properties({"cache-names": ["a", "b", "c"]})
        assert properties.cache_names == ["a", "b", "c"]

    def test_expiration_coerced(self):
        properties = bind_cache_properties({"spring.cache.couchbase.expiration": "2500"})
        assert properties.couchbase.expiration == 2500
        assert properties.couchbase.expiration_seconds == 2

    def test_resources_not_checked(self, missing_xml: Path):
        properties = bind_cache_properties({"hazelcast.config": str(missing_xml)})
        assert properties.hazelcast.config.exists() is False

        with pytest.raises(ConfigurationError):
            properties.resolve_config_location(properties.hazelcast.config)

    def test_unknown_keys_ignored(self):
        properties = bind_cache_properties({"spring.cache.redis.time-to-live": "60000"})
        assert properties.to_dict() == CacheProperties().to_dict()

    def test_binds_onto_existing_instance(self):
        properties = CacheProperties(cache_type="redis", cache_names=["kept"])
        result = bind_cache_properties({"caffeine.spec": "maximumSize=10"}, properties=properties)

        assert result is properties
        assert properties.type is CacheType.REDIS
        assert properties.cache_names == ["kept"]
        assert properties.caffeine.spec == "maximumSize=10"


class TestBindValidation:
    """Tests for invalid configuration values."""

    def test_invalid_expiration(self):
        with pytest.raises(ConfigurationError) as exc_info:
            bind_cache_properties({"spring.cache.couchbase.expiration": "soon"})

        assert "spring.cache.couchbase.expiration" in str(exc_info.value)

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError) as exc_info:
            bind_cache_properties({"spring.cache.type": "memcached"})

        assert "spring.cache.type" in str(exc_info.value)
        assert "memcached" in str(exc_info.value)

    def test_all_errors_reported(self):
        with pytest.raises(ConfigurationError) as exc_info:
            bind_cache_properties({"type": "memcached", "couchbase.expiration": "soon"})

        message = str(exc_info.value)
        assert "spring.cache.type" in message
        assert "spring.cache.couchbase.expiration" in message

    def test_invalid_value_leaves_instance_untouched(self):
        properties = CacheProperties(cache_names=["kept"])
        with pytest.raises(ConfigurationError):
            bind_cache_properties(
                {"cache-names": "replaced", "couchbase.expiration": "soon"}, properties=properties
            )

        assert properties.cache_names == ["kept"]


class TestBindFromSources:
    """Tests for binding from property sources and the environment."""

    def test_environment(self):
        with patch.dict(
            os.environ,
            {
                "SPRING_CACHE_TYPE": "couchbase",
                "SPRING_CACHE_CACHE_NAMES": "a,b,c",
                "SPRING_CACHE_COUCHBASE_EXPIRATION": "3000",
            },
        ):
            properties = bind_cache_properties()

        assert properties.type is CacheType.COUCHBASE
        assert properties.cache_names == ["a", "b", "c"]
        assert properties.couchbase.expiration_seconds == 3

    def test_overlay_beats_environment(self):
        sources = PropertySources()
        sources.set_overlay(ConfigPriority.FILE, {"spring.cache.type": "simple"})

        with patch.dict(os.environ, {"SPRING_CACHE_TYPE": "redis"}):
            properties = bind_cache_properties(sources=sources)

        assert properties.type is CacheType.SIMPLE

    def test_overlay_priority(self):
        sources = PropertySources()
        sources.set_overlay(ConfigPriority.DEFAULTS, {"spring.cache.type": "simple"})
        sources.set_overlay(ConfigPriority.OVERRIDES, {"spring.cache.type": "none"})

        assert bind_cache_properties(sources=sources).type is CacheType.NONE

    def test_global_sources(self):
        get_property_sources().set_overlay(
            ConfigPriority.ENVIRONMENT, {"spring.cache.jcache.provider": "com.example.Provider"}
        )
        assert bind_cache_properties().jcache.provider == "com.example.Provider"


class TestGetCacheProperties:
    """Tests for the global cache properties instance."""

    def test_singleton(self):
        assert get_cache_properties() is get_cache_properties()

    def test_bound_from_environment(self, monkeypatch):
        monkeypatch.setenv("SPRING_CACHE_TYPE", "hazelcast")
        assert get_cache_properties().type is CacheType.HAZELCAST

    def test_reset(self, monkeypatch):
        first = get_cache_properties()
        monkeypatch.setenv("SPRING_CACHE_CACHE_NAMES", "fresh")
        reset_cache_properties()

        second = get_cache_properties()
        assert second is not first
        assert second.cache_names == ["fresh"]


class TestBindResources:
    """Tests for binding configuration file locations."""

    def test_resource_object_kept(self, ehcache_xml: Path):
        resource = FileResource(ehcache_xml)
        properties = bind_cache_properties({"spring.cache.ehcache.config": resource})

        assert properties.ehcache.config is resource
        assert properties.resolve_config_location(properties.ehcache.config) is resource

    def test_path_object(self, ehcache_xml: Path):
        properties = bind_cache_properties({"infinispan.config": ehcache_xml})
        assert properties.infinispan.config == FileResource(ehcache_xml)

    def test_unsupported_scheme_rejected(self):
        properties = CacheProperties()
        with pytest.raises(ConfigurationError) as exc_info:
            bind_cache_properties(
                {"cache-names": "users", "spring.cache.jcache.config": "classpath:jcache.xml"},
                properties=properties,
            )

        assert "spring.cache.jcache.config" in str(exc_info.value)
        assert "classpath" in str(exc_info.value)
        assert properties.cache_names == []
        assert properties.jcache.config is None
