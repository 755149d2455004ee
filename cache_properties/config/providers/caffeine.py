"""Caffeine cache configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class CaffeineConfig:
    """Caffeine specific cache properties."""

    # Spec used to create caches, e.g. "maximumSize=500,expireAfterAccess=600s"
    spec: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"spec": self.spec}
