"""Couchbase cache configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

MILLIS_PER_SECOND = 1000


@dataclass
class CouchbaseConfig:
    """Couchbase specific cache properties."""

    # Entry expiration in milliseconds, 0 means entries never expire
    expiration: int = 0

    @property
    def expiration_seconds(self) -> int:
        """Return the expiration in whole seconds.

        The conversion truncates toward zero, so 2500 ms is 2 seconds and
        999 ms is 0 (never expire).
        """
        seconds = int(abs(self.expiration) // MILLIS_PER_SECOND)
        return seconds if self.expiration >= 0 else -seconds

    def to_dict(self) -> Dict[str, Any]:
        return {"expiration": self.expiration}
