"""Resource name normalization - singular/plural, short names and camelCase variants."""

from typing import Any, Dict, Mapping, Union
from ..contracts.resources import FriendlyTitle, Resource, ResourceType
from ..utils.logging import get_logger
from .text import start_case

logger = get_logger("formatting.resources")

# Resource types as they appear in the camelCased /pods response
CAMEL_CASE_LOOKUP: Dict[str, str] = {
    ResourceType.REPLICASET.value: "replicaSet",
    ResourceType.REPLICATIONCONTROLLER.value: "replicationController",
    ResourceType.STATEFULSET.value: "statefulSet",
    ResourceType.DAEMONSET.value: "daemonSet",
}

# A simplified version of the kubectl short names for canonical resource names
SHORT_NAME_LOOKUP: Dict[str, str] = {
    ResourceType.DEPLOYMENT.value: "deploy",
    ResourceType.DAEMONSET.value: "ds",
    ResourceType.NAMESPACE.value: "ns",
    ResourceType.POD.value: "po",
    ResourceType.REPLICATIONCONTROLLER.value: "rc",
    ResourceType.REPLICASET.value: "rs",
    ResourceType.SERVICE.value: "svc",
    ResourceType.STATEFULSET.value: "sts",
    ResourceType.AUTHORITY.value: "au",
}

# Types that can own pods
POD_OWNER_LOOKUP: Dict[str, str] = {
    ResourceType.DEPLOYMENT.value: "deploy",
    ResourceType.DAEMONSET.value: "ds",
    ResourceType.REPLICATIONCONTROLLER.value: "rc",
    ResourceType.REPLICASET.value: "rs",
    ResourceType.STATEFULSET.value: "sts",
}


def _lookup(table: Mapping[str, str], name: str, table_name: str) -> str:
    """Table lookup falling back to the name itself."""
    value = table.get(name)
    if not value:
        logger.debug(f"No {table_name} entry for {name!r}, passing through")
        return name
    return value


def singular_resource(resource: str) -> str:
    """Get a singular resource name from a plural resource."""
    if resource == "authorities":
        return "authority"
    if resource.endswith("s"):
        return resource[:-1]
    return resource


def friendly_title(singular_or_plural_resource: str) -> FriendlyTitle:
    """Nicely readable singular and plural titles for a resource type."""
    resource = singular_resource(singular_or_plural_resource)
    if resource == ResourceType.REPLICATIONCONTROLLER.value:
        title = start_case("replication controller")
    else:
        title = start_case(resource)

    if resource == ResourceType.AUTHORITY.value:
        plural = "Authorities"
    else:
        plural = title + "s"
    return FriendlyTitle(singular=title, plural=plural)


def resource_type_to_camel_case(resource: str) -> str:
    return _lookup(CAMEL_CASE_LOOKUP, resource, "camelCase")


def to_short_resource_name(name: str) -> str:
    return _lookup(SHORT_NAME_LOOKUP, name, "short name")


def _field_text(value: Any) -> str:
    return "" if value is None else str(value)


def display_name(resource: Union[Resource, Mapping[str, Any]]) -> str:
    """
    Format a resource as "<shortType>/<name>", e.g. "deploy/web".

    Plain mappings are read with .get, so a missing key renders as an empty part.
    """
    if isinstance(resource, Mapping):
        resource_type, name = resource.get("type"), resource.get("name")
    else:
        resource_type, name = getattr(resource, "type", None), getattr(resource, "name", None)
    return f"{to_short_resource_name(_field_text(resource_type))}/{_field_text(name)}"


def is_resource(name: str) -> bool:
    """True if the (possibly plural) name is a known resource type."""
    return singular_resource(name) in SHORT_NAME_LOOKUP


def is_pod_owner(name: str) -> bool:
    """True if the (possibly plural) name is a type that can own pods."""
    return singular_resource(name) in POD_OWNER_LOOKUP
