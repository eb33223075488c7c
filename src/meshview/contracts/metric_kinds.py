"""Metric kind enumeration - selects the formatter for a dashboard column."""

from enum import Enum


class MetricKind(str, Enum):
    """Kinds of metric values the dashboard renders."""
    REQUEST_RATE = "REQUEST_RATE"
    SUCCESS_RATE = "SUCCESS_RATE"
    LATENCY = "LATENCY"
    UNTRUNCATED = "UNTRUNCATED"
    NO_UNIT = "NO_UNIT"
