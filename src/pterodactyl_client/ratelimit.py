"""Thread-safe holder for the last rate-limit snapshot seen by a client.

The panel reports its request quota on every response. The client keeps the
most recent values so callers can inspect remaining quota; nothing is
throttled or queued based on them.
"""

import time
from collections.abc import Mapping
from threading import Lock

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)

LIMIT_HEADER = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"


class RateLimit(BaseModel):
    """Rate-limit quota reported by the panel on a single response."""

    model_config = ConfigDict(frozen=True)

    limit: int
    remaining: int
    observed_at: float = Field(default_factory=time.time)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimit | None":
        """Build a snapshot from response headers.

        Header lookup is case-insensitive when given ``httpx.Headers``.

        Args:
            headers: Response headers.

        Returns:
            The snapshot, or None if either header is absent or not an integer.
        """
        limit = headers.get(LIMIT_HEADER)
        remaining = headers.get(REMAINING_HEADER)
        if limit is None or remaining is None:
            return None
        try:
            return cls(limit=int(limit), remaining=int(remaining))
        except ValueError:
            logger.debug(
                "Ignoring malformed rate-limit headers",
                limit=limit,
                remaining=remaining,
            )
            return None


class RateLimitState:
    """Atomically replaced cell holding the latest :class:`RateLimit`.

    Stands in for a reader/writer lock with a single mutex: snapshots are
    immutable and replaced whole, and both critical sections are one
    attribute access, so readers never contend for long and always see
    either the previous or the new value. The lock is never held across I/O.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._snapshot: RateLimit | None = None

    def get(self) -> RateLimit | None:
        """Return the latest snapshot, or None before any was observed."""
        with self._lock:
            return self._snapshot

    def set(self, snapshot: RateLimit) -> None:
        """Replace the stored snapshot."""
        with self._lock:
            self._snapshot = snapshot

    def update_from_headers(self, headers: Mapping[str, str]) -> RateLimit | None:
        """Replace the snapshot if the headers carry rate-limit values.

        Args:
            headers: Response headers.

        Returns:
            The stored snapshot if one was written, otherwise None.
        """
        snapshot = RateLimit.from_headers(headers)
        if snapshot is None:
            return None
        self.set(snapshot)
        logger.debug(
            "Updated rate limit",
            limit=snapshot.limit,
            remaining=snapshot.remaining,
        )
        return snapshot
