import logging
import threading
from typing import Optional

from .enums import SideEffect
from .errors import InvalidTransitionError
from .state import SessionConfig, SessionState, SessionSnapshot
from .timekeeping import elapsed_label, urgency_tier
from neoresus.monitors.alarms import StaleStepAdvisory
from neoresus.monitors.spo2 import target_spo2
from neoresus.protocol.graph import ProtocolGraph
from neoresus.protocol.nrp import create_nrp_protocol

logger = logging.getLogger(__name__)


class StepEngine:
    """
    Protocol state machine with elapsed-time instrumentation.

    State management:
    - `self.state` is owned here; the engine is its only writer.
    - Presentation code reads `get_snapshot()` and issues commands
      (advance / toggle_running / reset / dismiss_advisory).
    - `tick()` is driven by an external 1 Hz source and is a no-op
      while paused.
    Every mutation holds one lock so a tick never interleaves with a command.
    """
    def __init__(self, graph: Optional[ProtocolGraph] = None, config: Optional[SessionConfig] = None):
        self.graph = graph or create_nrp_protocol()
        self.config = config or SessionConfig()
        self.state = SessionState(current_node=self.graph.initial)
        self.advisory = StaleStepAdvisory(self.config.advisory_threshold_sec)
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        return self.state.is_running

    def advance(self, label: str) -> SessionSnapshot:
        """
        Follow the transition `label` out of the current node.

        Raises InvalidTransitionError (state unchanged) if the current node
        does not declare that label.
        """
        with self._lock:
            source = self.state.current_node
            transition = self.graph.find_transition(source, label)
            if transition is None:
                available = self.graph.node_definition(source).labels
                logger.warning("Rejected action %r at %s", label, source.value)
                raise InvalidTransitionError(source, label, available)

            if transition.side_effect == SideEffect.FULL_RESET:
                logger.info("%s --%s--> full reset", source.value, label)
                self.reset()
                return self.get_snapshot()

            self.state.current_node = transition.target
            if transition.side_effect == SideEffect.START_TIMER:
                self.state.is_running = True
            self._enter_node()
            logger.info("%s --%s--> %s", source.value, label, transition.target.value)
            return self.get_snapshot()

    def reset(self):
        """Return to the initial node with the stopwatch cleared and stopped."""
        with self._lock:
            self.state.current_node = self.graph.initial
            self.state.is_running = False
            self.state.global_elapsed_seconds = 0
            self.state.per_node_elapsed_seconds = 0
            self.advisory.rearm()
        logger.info("Session reset")

    def start(self):
        """Start the stopwatch."""
        with self._lock:
            self.state.is_running = True

    def stop(self):
        """Pause the stopwatch; elapsed counts are kept."""
        with self._lock:
            self.state.is_running = False

    def toggle_running(self) -> bool:
        with self._lock:
            if self.state.is_running:
                self.stop()
            else:
                self.start()
            logger.info("Stopwatch %s", "running" if self.state.is_running else "paused")
            return self.state.is_running

    def tick(self):
        """Advance both counters by one second while running."""
        with self._lock:
            if not self.state.is_running:
                return
            self.state.global_elapsed_seconds += 1
            self.state.per_node_elapsed_seconds += 1
            self.advisory.update(self.state.per_node_elapsed_seconds)

    def dismiss_advisory(self):
        """Hide the stale-step advisory; the per-step counter keeps running."""
        with self._lock:
            self.advisory.dismiss()

    def get_snapshot(self) -> SessionSnapshot:
        """Return a read-only view of the current session."""
        with self._lock:
            node = self.graph.node_definition(self.state.current_node)
            seconds = self.state.global_elapsed_seconds
            return SessionSnapshot(
                current_node=node.id,
                node=node,
                transitions=node.transitions,
                is_running=self.state.is_running,
                global_elapsed_seconds=seconds,
                per_node_elapsed_seconds=self.state.per_node_elapsed_seconds,
                stale_step_advisory=self.advisory.active,
                target_spo2=target_spo2(seconds, node.id),
                elapsed_label=elapsed_label(seconds),
                urgency_tier=urgency_tier(seconds),
            )

    def _enter_node(self):
        self.state.per_node_elapsed_seconds = 0
        self.advisory.rearm()
