"""
Prometheus Metrics for Theo SDK

Provides counters and histograms for request monitoring.
Host application should expose the prometheus_client registry.
"""

import logging
from prometheus_client import Counter, Histogram

logger = logging.getLogger("theo_sdk.metrics")

# Completed exchanges by verb and status code (0 when no response arrived)
REQUEST_COUNT = Counter(
    "theo_sdk_requests_total",
    "Total number of SDK requests",
    ["verb", "code"],
)

REQUEST_LATENCY = Histogram(
    "theo_sdk_request_latency_seconds",
    "SDK request latency in seconds",
    ["verb"],
)


def metrics_request(verb: str, code: int, latency: float) -> None:
    """
    Record metrics for one completed exchange.

    Args:
        verb: HTTP method (e.g., 'GET')
        code: HTTP status code, 0 for transport failures
        latency: Request duration in seconds
    """
    try:
        REQUEST_COUNT.labels(verb=verb, code=str(code)).inc()
        REQUEST_LATENCY.labels(verb=verb).observe(latency)
    except Exception as e:
        # Metrics failures should not break a request
        logger.debug("Failed to record metrics: %s", e)
