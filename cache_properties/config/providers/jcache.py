"""JCache (JSR-107) cache configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..resources import Resource


@dataclass
class JCacheConfig:
    """JCache (JSR-107) specific cache properties.

    Attributes:
        config: Location of the configuration file used to initialize the
            cache manager. Its format depends on the underlying implementation.
        provider: Fully qualified name of the caching provider implementation.
            Only needed when more than one implementation is available.
    """

    config: Optional[Resource] = None
    provider: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.location if self.config else None,
            "provider": self.provider,
        }
