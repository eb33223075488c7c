"""Pydantic models for display configuration."""

from pydantic import BaseModel, Field
from ..contracts.classification import SuccessRateThresholds


class LatencyConfig(BaseModel):
    """Latency rendering options."""
    ascii: bool = Field(default=False, description="Render the micro suffix as 'us' instead of 'µs'")


class DisplayConfig(BaseModel):
    """Full display configuration tree."""
    success_rate: SuccessRateThresholds = Field(default_factory=SuccessRateThresholds)
    latency: LatencyConfig = Field(default_factory=LatencyConfig)
