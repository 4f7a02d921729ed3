import numpy as np

from neoresus.core.constants import (
    SPO2_BAND_UPPER_BOUNDS_SEC,
    SPO2_BAND_TARGETS,
    STABLE_SPO2_TARGET,
)
from neoresus.core.enums import NodeId

_BAND_BOUNDS = np.array(SPO2_BAND_UPPER_BOUNDS_SEC, dtype=float)

# Reference table for the goals view (minutes after birth -> pre-ductal target).
SPO2_TARGETS = (
    ("1 min", SPO2_BAND_TARGETS[0]),
    ("2 min", SPO2_BAND_TARGETS[1]),
    ("3 min", SPO2_BAND_TARGETS[2]),
    ("4 min", SPO2_BAND_TARGETS[3]),
    ("5 min", SPO2_BAND_TARGETS[4]),
    ("10 min", SPO2_BAND_TARGETS[5]),
)


def spo2_band_index(seconds: float) -> int:
    """
    Index of the target band for elapsed seconds after birth.

    Bands are right-inclusive: exactly 60 s is still in band 0.
    """
    # side="left" puts a value equal to a bound into the lower band
    return int(np.searchsorted(_BAND_BOUNDS, seconds, side="left"))


def target_spo2(global_elapsed_seconds: float, current_node: NodeId) -> str:
    """
    Pre-ductal SpO2 target range for the current moment.

    Post-resuscitation care uses the fixed stable target regardless of time.
    """
    if current_node == NodeId.POST_CARE:
        return STABLE_SPO2_TARGET
    return SPO2_BAND_TARGETS[spo2_band_index(global_elapsed_seconds)]
