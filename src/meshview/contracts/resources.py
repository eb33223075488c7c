"""Pydantic models and vocabulary for mesh resource types."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ResourceType(str, Enum):
    """
    Closed vocabulary of resource types the dashboard knows about.
    
    Names outside this vocabulary are still accepted by the lookup
    functions; they pass through unchanged.
    """
    DEPLOYMENT = "deployment"
    DAEMONSET = "daemonset"
    NAMESPACE = "namespace"
    POD = "pod"
    REPLICATIONCONTROLLER = "replicationcontroller"
    REPLICASET = "replicaset"
    SERVICE = "service"
    STATEFULSET = "statefulset"
    AUTHORITY = "authority"

    @property
    def plural(self) -> str:
        """Plural form as used in API paths."""
        if self is ResourceType.AUTHORITY:
            return "authorities"
        return self.value + "s"

    @classmethod
    def parse(cls, name: str) -> Optional["ResourceType"]:
        """Return the member for a singular or plural name, or None if unknown."""
        for member in cls:
            if name in (member.value, member.plural):
                return member
        return None


class Resource(BaseModel):
    """A (type, name) pair identifying a single resource."""
    type: str = Field(..., description="Resource type, e.g. 'deployment'")
    name: str = Field(..., description="Resource name, e.g. 'web'")


class FriendlyTitle(BaseModel):
    """Human-readable singular and plural titles for a resource type."""
    singular: str = Field(..., description="Title for a single resource, e.g. 'Deployment'")
    plural: str = Field(..., description="Title for a list of resources, e.g. 'Deployments'")
