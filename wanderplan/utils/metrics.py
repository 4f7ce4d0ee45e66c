"""Prometheus metrics for itinerary generation."""

from prometheus_client import Counter, Histogram

generation_latency_ms = Histogram(
    "itinerary_generation_latency_ms",
    "Itinerary generation latency in milliseconds",
    ["outcome"],
    buckets=[500, 1000, 2000, 4000, 8000, 15000, 30000, 60000],
)

generation_errors_total = Counter(
    "itinerary_generation_errors_total",
    "Total itinerary generation errors",
    ["kind"],
)

map_links_total = Counter(
    "itinerary_map_links_total",
    "Total activities enriched with a map link from grounding",
)


class PrometheusGenerationMetrics:
    """Prometheus-based generation metrics implementation."""

    def record_latency(self, outcome: str, latency_ms: float) -> None:
        """Record generation latency."""
        generation_latency_ms.labels(outcome=outcome).observe(latency_ms)

    def inc_error(self, kind: str) -> None:
        """Increment error counter."""
        generation_errors_total.labels(kind=kind).inc()

    def inc_map_links(self, count: int) -> None:
        """Add enriched map links."""
        if count > 0:
            map_links_total.inc(count)
