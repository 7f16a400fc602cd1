"""Prometheus metrics for monitoring health bands, crisis lead time and upstream calls"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Outlook metrics
outlook_counter = Counter(
    "oasis_outlook_total",
    "Total outlooks computed",
    ["band"],  # strong | stable | fragile | critical
)

crisis_horizon_counter = Counter(
    "oasis_crisis_horizon",
    "Outlooks by days until first crisis",
    ["bucket"],  # none, 0-6d, 7-13d, 14d+
)

# Alert webhook metrics
alert_latency_histogram = Histogram(
    "alert_webhook_latency_seconds",
    "Crisis alert webhook response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

alert_failure_counter = Counter(
    "alert_webhook_failures_total",
    "Failed crisis alert deliveries",
)

# Persistence API metrics
persistence_fetch_failures_counter = Counter(
    "persistence_fetch_failures_total",
    "Failed persistence API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_outlook(band: str, days_until_crisis: Optional[int]) -> None:
    """Record outlook metrics for monitoring health distribution and crisis lead time"""
    outlook_counter.labels(band=band).inc()

    if days_until_crisis is None:
        bucket = "none"
    elif days_until_crisis < 7:
        bucket = "0-6d"
    elif days_until_crisis < 14:
        bucket = "7-13d"
    else:
        bucket = "14d+"

    crisis_horizon_counter.labels(bucket=bucket).inc()
