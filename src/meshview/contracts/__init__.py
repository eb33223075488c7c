from .metric_kinds import MetricKind
from .resources import ResourceType, Resource, FriendlyTitle
from .classification import SuccessRateBand, SuccessRateThresholds

__all__ = [
    "MetricKind",
    "ResourceType",
    "Resource",
    "FriendlyTitle",
    "SuccessRateBand",
    "SuccessRateThresholds",
]
