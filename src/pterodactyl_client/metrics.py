"""Prometheus collector exposing a client's last-seen rate limit.

Lets a service embedding the client export its remaining panel quota
alongside its own metrics.
"""

from collections.abc import Iterator

import prometheus_client.core
import structlog
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector

from .client import Client

logger = structlog.get_logger(__name__)


class RateLimitCollector(Collector):
    """Prometheus collector reading a client's rate-limit snapshot.

    Yields nothing until the panel has reported a rate limit. Reading the
    snapshot never blocks on or triggers a request.
    """

    def __init__(self, client: Client):
        """Initialize the collector.

        Args:
            client: Client whose rate-limit snapshot is exported.
        """
        self._client = client

    def collect(self) -> Iterator[Metric]:
        """Collect rate-limit gauges for a Prometheus scrape.

        Yields:
            Limit, remaining and observation-time gauges labelled with the
            panel base URL.
        """
        snapshot = self._client.rate_limit
        if snapshot is None:
            return

        labels = [self._client.base_url]

        limit = GaugeMetricFamily(
            "pterodactyl_ratelimit_limit",
            "Requests allowed per window as last reported by the panel",
            labels=["panel"],
        )
        limit.add_metric(labels, snapshot.limit)
        yield limit

        remaining = GaugeMetricFamily(
            "pterodactyl_ratelimit_remaining",
            "Requests remaining in the window as last reported by the panel",
            labels=["panel"],
        )
        remaining.add_metric(labels, snapshot.remaining)
        yield remaining

        observed = GaugeMetricFamily(
            "pterodactyl_ratelimit_observed_timestamp_seconds",
            "Unix time of the response carrying the last rate limit",
            labels=["panel"],
        )
        observed.add_metric(labels, snapshot.observed_at)
        yield observed


def create_registry(client: Client) -> prometheus_client.core.CollectorRegistry:
    """Create a Prometheus registry with the rate-limit collector.

    Creates a custom registry (not the global one) so several clients can be
    exported independently.

    Args:
        client: Client whose rate limit is exported.

    Returns:
        Registry with a registered :class:`RateLimitCollector`.
    """
    registry = prometheus_client.core.CollectorRegistry()
    registry.register(RateLimitCollector(client))
    logger.info("Registered collector", collector="ratelimit", panel=client.base_url)
    return registry
