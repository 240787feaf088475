"""
Prometheus Metrics for the Wallet Balances Mock API.

This module defines all metrics exposed at the /metrics endpoint.
The service has no business outcomes beyond serving the static wallet list,
so the metrics cover HTTP traffic, the artificial delay and wallet fetches.
"""
from prometheus_client import Counter, Histogram, Info

# =============================================================================
# SERVICE INFO
# =============================================================================

SERVICE_INFO = Info(
    "wallet_mock_service",
    "Service information"
)
SERVICE_INFO.info({
    "version": "0.1.0",
    "service": "wallet-mock",
})

# =============================================================================
# WALLET METRICS
# =============================================================================

# Counter: Wallet list builds by outcome
WALLET_FETCH_TOTAL = Counter(
    "wallet_mock_wallet_fetch_total",
    "Wallet list builds",
    ["outcome"]  # success, error
)

# Histogram: Time actually spent in the artificial delay
RESPONSE_DELAY = Histogram(
    "wallet_mock_response_delay_seconds",
    "Artificial delay applied before building the wallet list",
    buckets=[0.5, 1.0, 2.0, 2.5, 3.0, 3.05, 3.1, 3.5, 5.0]
)

# =============================================================================
# HTTP METRICS (Standard)
# =============================================================================

HTTP_REQUESTS = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

HTTP_REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 3.0, 3.1, 3.5, 5.0, 10.0]
)

# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def record_http_request(method: str, endpoint: str, status: int, latency_seconds: float = None) -> None:
    """Record a completed (or failed) HTTP request."""
    HTTP_REQUESTS.labels(method=method, endpoint=endpoint, status=status).inc()

    if latency_seconds is not None:
        HTTP_REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(latency_seconds)


def record_response_delay(latency_seconds: float) -> None:
    """Record how long a request was held by the delay stage."""
    RESPONSE_DELAY.observe(latency_seconds)


def record_wallet_fetch(success: bool) -> None:
    """Record the outcome of building the wallet list."""
    outcome = "success" if success else "error"
    WALLET_FETCH_TOTAL.labels(outcome=outcome).inc()
