"""Success rate status bands."""

from enum import Enum
from pydantic import BaseModel, Field, model_validator


class SuccessRateBand(str, Enum):
    """Qualitative status band for a success ratio."""
    POOR = "poor"
    OK = "ok"
    GOOD = "good"


class SuccessRateThresholds(BaseModel):
    """Lower bounds of the ok and good bands."""
    poor_below: float = Field(default=0.9, description="Ratios below this are poor")
    ok_below: float = Field(default=0.95, description="Ratios below this (and not poor) are ok")
    status_class_prefix: str = Field(default="status-", description="CSS class prefix for a band")

    @model_validator(mode="after")
    def check_order(self) -> "SuccessRateThresholds":
        if self.poor_below > self.ok_below:
            raise ValueError(
                f"poor_below ({self.poor_below}) must not exceed ok_below ({self.ok_below})"
            )
        return self
