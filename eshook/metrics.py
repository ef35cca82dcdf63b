from typing import Optional
from prometheus_client import Counter, Histogram, CollectorRegistry, REGISTRY


class HookMetrics:
    """
    Prometheus metrics for the indexing hook.

    Tracks:
    - Documents written, by outcome
    - Indices provisioned (existence check + optional create)
    - Time spent in a single fire call, provisioning included
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or REGISTRY

        self.documents = Counter(
            'eshook_documents_total',
            'Log documents sent to the search backend',
            ['status'],
            registry=self.registry
        )

        self.indices_provisioned = Counter(
            'eshook_indices_provisioned_total',
            'Index names provisioned by the hook',
            registry=self.registry
        )

        self.fire_latency_seconds = Histogram(
            'eshook_fire_latency_seconds',
            'Latency of a single fire call',
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
            registry=self.registry
        )

    def record_document(self, status: str, latency_seconds: float):
        """Record one fire call outcome (ok/error)."""
        self.documents.labels(status=status).inc()
        self.fire_latency_seconds.observe(latency_seconds)

    def record_index_provisioned(self):
        self.indices_provisioned.inc()

