"""meshview - Formatting and lookup utilities for a service mesh dashboard."""

from .contracts import (
    FriendlyTitle,
    MetricKind,
    Resource,
    ResourceType,
    SuccessRateBand,
    SuccessRateThresholds,
)
from .formatting import (
    PLACEHOLDER,
    NOT_AVAILABLE,
    METRIC_TO_FORMATTER,
    SHORT_NAME_LOOKUP,
    POD_OWNER_LOOKUP,
    add_commas,
    display_name,
    format_latency_ms,
    format_latency_sec,
    format_metric,
    format_percent,
    format_with_comma,
    friendly_title,
    get_sr_classification,
    is_resource,
    public_address_to_string,
    resource_type_to_camel_case,
    round_number,
    singular_resource,
    style_num,
    to_short_resource_name,
)
from .utils.logging import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "FriendlyTitle",
    "MetricKind",
    "Resource",
    "ResourceType",
    "SuccessRateBand",
    "SuccessRateThresholds",
    "PLACEHOLDER",
    "NOT_AVAILABLE",
    "METRIC_TO_FORMATTER",
    "SHORT_NAME_LOOKUP",
    "POD_OWNER_LOOKUP",
    "add_commas",
    "display_name",
    "format_latency_ms",
    "format_latency_sec",
    "format_metric",
    "format_percent",
    "format_with_comma",
    "friendly_title",
    "get_sr_classification",
    "is_resource",
    "public_address_to_string",
    "resource_type_to_camel_case",
    "round_number",
    "singular_resource",
    "style_num",
    "to_short_resource_name",
]

setup_logging()
logger = get_logger("meshview")
