# File: src/evm_wallet_api/monitoring/metrics.py

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

class MetricsCollector:
    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        # One registry per app so several apps can live in a process
        self.registry = registry or CollectorRegistry()

        # HTTP metrics
        self.requests = Counter(
            'http_requests', 'HTTP requests handled',
            ['method', 'route', 'status'], registry=self.registry
        )
        self.request_latency = Histogram(
            'http_request_duration_seconds', 'HTTP request latency',
            ['route'], registry=self.registry
        )

        # Wallet metrics
        self.wallets_generated = Counter(
            'wallets_generated', 'Wallets generated', registry=self.registry
        )
        self.transactions_broadcast = Counter(
            'transactions_broadcast', 'Signed transactions accepted by the provider',
            registry=self.registry
        )

        # Provider metrics
        self.provider_errors = Counter(
            'provider_errors', 'Failed JSON-RPC operations',
            ['operation'], registry=self.registry
        )

    def observe_request(self, method: str, route: str, status: int, duration: float):
        self.requests.labels(method=method, route=route, status=str(status)).inc()
        self.request_latency.labels(route=route).observe(duration)

    def record_provider_error(self, verb: str):
        self.provider_errors.labels(operation=verb).inc()

    def render(self) -> bytes:
        return generate_latest(self.registry)
