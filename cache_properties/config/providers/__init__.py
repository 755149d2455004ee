"""Provider-specific cache configuration groups."""

from .caffeine import CaffeineConfig
from .couchbase import CouchbaseConfig
from .ehcache import EhCacheConfig
from .hazelcast import HazelcastConfig
from .infinispan import InfinispanConfig
from .jcache import JCacheConfig

__all__ = [
    "CaffeineConfig",
    "CouchbaseConfig",
    "EhCacheConfig",
    "HazelcastConfig",
    "InfinispanConfig",
    "JCacheConfig",
]
