"""Prometheus metrics for analysis volume, risk distribution, and transaction source health"""

from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "meridian_cashflow_analysis_total",
    "Total cash flow analyses completed",
    ["overall_risk"],  # low | medium | high
)

analysis_duration_histogram = Histogram(
    "meridian_cashflow_analysis_duration_seconds",
    "Time spent deriving a cash flow summary",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

analyzed_transactions_counter = Counter(
    "meridian_cashflow_transactions_analyzed_total",
    "Transactions fed into analyses",
)

# Input quality
dropped_transactions_counter = Counter(
    "meridian_cashflow_transactions_dropped_total",
    "Malformed transaction records dropped before analysis",
)

# Transaction source metrics
source_fetch_failures_counter = Counter(
    "transaction_source_failures_total",
    "Failed transaction source calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(overall_risk: str, transaction_count: int, duration_seconds: float) -> None:
    """Record analysis metrics for monitoring risk distribution and throughput"""
    analysis_counter.labels(overall_risk=overall_risk).inc()
    analyzed_transactions_counter.inc(transaction_count)
    analysis_duration_histogram.observe(duration_seconds)
