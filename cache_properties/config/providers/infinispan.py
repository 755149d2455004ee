"""Infinispan cache configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..resources import Resource


@dataclass
class InfinispanConfig:
    """Infinispan specific cache properties."""

    # Location of the configuration file used to initialize Infinispan
    config: Optional[Resource] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"config": self.config.location if self.config else None}
