"""Prometheus metrics for the secret resolver."""

from __future__ import annotations

from prometheus_client import Counter, Gauge

populate_total = Counter(
    "credref_populate_total",
    "Secret index builds, by outcome",
    ["result"],
)

index_entries = Gauge(
    "credref_index_entries",
    "Number of (URL, Secret type) keys in the most recently built index",
)

lookups_total = Counter(
    "credref_lookups_total",
    "Secret lookups, by outcome (hit or miss)",
    ["result"],
)
