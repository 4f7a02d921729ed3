"""
Stopwatch formatting and urgency banding.
"""

from .constants import URGENCY_WARNING_SEC, URGENCY_CRITICAL_SEC
from .enums import UrgencyTier


def elapsed_label(seconds: int) -> str:
    """
    Format elapsed seconds as MM:SS.

    Minutes are not wrapped into hours, so 6000 s renders as "100:00".
    """
    seconds = int(seconds)
    if seconds < 0:
        raise ValueError(f"elapsed seconds must be non-negative, got {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def urgency_tier(seconds: int) -> UrgencyTier:
    """Classify total resuscitation time into normal / warning / critical."""
    if seconds >= URGENCY_CRITICAL_SEC:
        return UrgencyTier.CRITICAL
    if seconds >= URGENCY_WARNING_SEC:
        return UrgencyTier.WARNING
    return UrgencyTier.NORMAL
