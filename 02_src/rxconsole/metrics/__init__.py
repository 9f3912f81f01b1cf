"""Metrics module."""

from .deriver import DerivedMetrics, MetricsDeriver, compute_rate, parse_timestamp, preview

__all__ = [
    "DerivedMetrics",
    "MetricsDeriver",
    "compute_rate",
    "parse_timestamp",
    "preview",
]
