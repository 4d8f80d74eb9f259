"""Prometheus metrics for monitoring quote outcomes, solved rates and rate-cap lookups"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Quote metrics
quote_counter = Counter(
    "quote_total",
    "Total payment-plan quotes computed",
    ["product", "outcome"],  # amortized | flat, solved | unsolved
)

taeg_histogram = Histogram(
    "quote_taeg_ratio",
    "Solved effective annual rates (0.1 = 10 %)",
    buckets=[0.0, 0.05, 0.1, 0.15, 0.2, 0.3, 0.5, 1.0, 10.0],
)

# Rate-cap metrics
rate_cap_counter = Counter(
    "rate_cap_lookup_total",
    "Usury-rate cap evaluations",
    ["outcome"],  # capped | unavailable
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(product: str, taeg: Optional[float] = None, solved: bool = True) -> None:
    """Record quote metrics for monitoring solver failures and rate distribution"""
    outcome = "solved" if solved else "unsolved"
    quote_counter.labels(product=product, outcome=outcome).inc()

    if taeg is not None:
        taeg_histogram.observe(taeg)


def record_rate_cap(max_bps: Optional[int]) -> None:
    outcome = "unavailable" if max_bps is None else "capped"
    rate_cap_counter.labels(outcome=outcome).inc()
