"""
Headless resuscitation session: step engine + 1 Hz tick source + patient.

The session keeps the tick resource in step with the engine's running flag:
the ticker is started when the stopwatch runs and stopped on pause, reset
and close. The desktop UI does the same with a QTimer.
"""

import logging
from typing import Callable, Optional

from .engine import StepEngine
from .state import SessionConfig, SessionSnapshot
from .ticker import RepeatingTicker
from neoresus.patient.dosing import DosageResult, compute_dosages
from neoresus.patient.patient import PatientParameters

logger = logging.getLogger(__name__)


class ResuscitationSession:
    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        engine: Optional[StepEngine] = None,
        ticker_factory: Callable[..., RepeatingTicker] = RepeatingTicker,
    ):
        self.config = config or SessionConfig()
        self.engine = engine or StepEngine(config=self.config)
        self.patient = PatientParameters(
            weight_kg=self.config.default_weight_kg,
            gestational_age_weeks=self.config.default_gestational_age_weeks,
        )
        self.ticker = ticker_factory(self.engine.tick, self.config.tick_interval_sec)
        self._closed = False

    # Commands

    def advance(self, label: str) -> SessionSnapshot:
        try:
            return self.engine.advance(label)
        finally:
            self._sync_ticker()

    def toggle_running(self) -> bool:
        running = self.engine.toggle_running()
        self._sync_ticker()
        return running

    def reset(self):
        self.engine.reset()
        self._sync_ticker()

    def dismiss_advisory(self):
        self.engine.dismiss_advisory()

    def snapshot(self) -> SessionSnapshot:
        return self.engine.get_snapshot()

    # Patient parameters

    def update_patient(self, weight_kg=None, gestational_age_weeks=None) -> PatientParameters:
        """
        Replace patient parameters. Invalid values raise InvalidParameterError
        and the previous parameters stay in effect.
        """
        self.patient = PatientParameters(
            weight_kg=self.patient.weight_kg if weight_kg is None else weight_kg,
            gestational_age_weeks=(
                self.patient.gestational_age_weeks
                if gestational_age_weeks is None else gestational_age_weeks
            ),
        )
        logger.info(
            "Patient parameters: %.2f kg, %d weeks",
            self.patient.weight_kg, self.patient.gestational_age_weeks,
        )
        return self.patient

    def dosages(self) -> DosageResult:
        return compute_dosages(self.patient.weight_kg)

    # Lifecycle

    def _sync_ticker(self):
        if self._closed:
            return
        if self.engine.running and not self.ticker.is_active:
            self.ticker.start()
        elif not self.engine.running and self.ticker.is_active:
            self.ticker.stop()

    def close(self):
        """Stop the tick source. The session cannot be restarted afterwards."""
        self._closed = True
        self.ticker.stop()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
