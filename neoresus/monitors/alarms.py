import logging

from neoresus.core.constants import STALE_STEP_THRESHOLD_SEC

logger = logging.getLogger(__name__)


class StaleStepAdvisory:
    """
    Advisory raised when the user lingers in one protocol step.

    Fires once per step entry when the per-step counter reaches the
    threshold. Dismissal hides it without touching the counter; it does not
    re-arm until the step changes.
    """
    def __init__(self, threshold_sec: int = STALE_STEP_THRESHOLD_SEC):
        self.threshold_sec = threshold_sec
        self.active = False
        self._fired = False

    def update(self, per_node_seconds: int) -> bool:
        """
        Update with the current per-step elapsed seconds.
        Returns whether the advisory is showing.
        """
        if not self._fired and per_node_seconds >= self.threshold_sec:
            self._fired = True
            self.active = True
            logger.info("Stale-step advisory raised after %ss in step", per_node_seconds)
        return self.active

    def dismiss(self):
        self.active = False

    def rearm(self):
        """Clear the advisory for a new step entry."""
        self.active = False
        self._fired = False
