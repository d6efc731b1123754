"""Prometheus metric definitions for checkout calls."""

from prometheus_client import Counter, Histogram


checkout_requests_total = Counter(
    "checkout_requests_total",
    "Total checkout sessions requested",
    ["provider", "mode"],
)
checkout_failures_total = Counter(
    "checkout_failures_total",
    "Total failed checkout calls",
    ["provider", "kind"],
)
checkout_latency_seconds = Histogram(
    "checkout_latency_seconds",
    "Checkout call latency seconds, token exchange included",
    ["provider"],
)
