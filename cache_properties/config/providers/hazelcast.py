"""Hazelcast cache configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..resources import Resource


@dataclass
class HazelcastConfig:
    """Hazelcast specific cache properties."""

    # Location of the configuration file used to initialize Hazelcast
    config: Optional[Resource] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"config": self.config.location if self.config else None}
