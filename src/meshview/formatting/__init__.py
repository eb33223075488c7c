"""Formatting layer - metric values, resource names, addresses and status bands."""

from .numbers import (
    PLACEHOLDER,
    NOT_AVAILABLE,
    METRIC_TO_FORMATTER,
    add_commas,
    format_latency_ms,
    format_latency_sec,
    format_metric,
    format_percent,
    format_si,
    format_with_comma,
    numeric_sort_key,
    round_number,
    style_num,
)
from .resources import (
    CAMEL_CASE_LOOKUP,
    SHORT_NAME_LOOKUP,
    POD_OWNER_LOOKUP,
    display_name,
    friendly_title,
    is_pod_owner,
    is_resource,
    resource_type_to_camel_case,
    singular_resource,
    to_short_resource_name,
)
from .address import decode_ip_to_octets, public_address_to_string
from .classify import get_sr_classification, sr_status_class
from .text import start_case, to_class_name

__all__ = [
    "PLACEHOLDER",
    "NOT_AVAILABLE",
    "METRIC_TO_FORMATTER",
    "add_commas",
    "format_latency_ms",
    "format_latency_sec",
    "format_metric",
    "format_percent",
    "format_si",
    "format_with_comma",
    "numeric_sort_key",
    "round_number",
    "style_num",
    "CAMEL_CASE_LOOKUP",
    "SHORT_NAME_LOOKUP",
    "POD_OWNER_LOOKUP",
    "display_name",
    "friendly_title",
    "is_pod_owner",
    "is_resource",
    "resource_type_to_camel_case",
    "singular_resource",
    "to_short_resource_name",
    "decode_ip_to_octets",
    "public_address_to_string",
    "get_sr_classification",
    "sr_status_class",
    "start_case",
    "to_class_name",
]
