"""Success rate classification into qualitative status bands."""

from typing import Optional
from ..contracts.classification import SuccessRateBand, SuccessRateThresholds

DEFAULT_THRESHOLDS = SuccessRateThresholds()


def get_sr_classification(sr: Optional[float], thresholds: Optional[SuccessRateThresholds] = None) -> str:
    """
    Band a success ratio: below 0.9 is "poor", below 0.95 is "ok", the rest "good".

    A missing ratio counts as 0. NaN fails every comparison and lands in "good".
    """
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS
    if sr is None:
        sr = 0.0

    if sr < thresholds.poor_below:
        return SuccessRateBand.POOR.value
    elif sr < thresholds.ok_below:
        return SuccessRateBand.OK.value
    else:
        return SuccessRateBand.GOOD.value


def sr_status_class(sr: Optional[float], thresholds: Optional[SuccessRateThresholds] = None) -> str:
    """CSS class for the band of a success ratio, e.g. "status-poor"."""
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS
    return thresholds.status_class_prefix + get_sr_classification(sr, thresholds)
