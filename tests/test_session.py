import threading
import time

import pytest

from neoresus.core.enums import NodeId
from neoresus.core.errors import InvalidParameterError, InvalidTransitionError
from neoresus.core.session import ResuscitationSession
from neoresus.core.state import SessionConfig
from neoresus.core.ticker import RepeatingTicker


class FakeTicker:
    """Records start/stop calls; ticks are driven by the test."""
    def __init__(self, callback, interval_sec):
        self.callback = callback
        self.interval_sec = interval_sec
        self.is_active = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.is_active = True
        self.starts += 1

    def stop(self):
        self.is_active = False
        self.stops += 1

    def fire(self, n=1):
        for _ in range(n):
            self.callback()


@pytest.fixture
def session():
    with ResuscitationSession(ticker_factory=FakeTicker) as s:
        yield s


class TestTickerSync:
    def test_idle_session_has_no_active_ticker(self, session):
        assert not session.ticker.is_active
        assert session.ticker.interval_sec == 1.0

    def test_birth_starts_ticker(self, session):
        session.advance("birth-occurs")
        assert session.ticker.is_active
        session.ticker.fire(3)
        assert session.snapshot().global_elapsed_seconds == 3

    def test_pause_and_resume(self, session):
        session.advance("birth-occurs")
        assert session.toggle_running() is False
        assert not session.ticker.is_active
        assert session.toggle_running() is True
        assert session.ticker.is_active

    def test_reset_stops_ticker(self, session):
        session.advance("birth-occurs")
        session.ticker.fire(10)
        session.reset()
        assert not session.ticker.is_active
        snap = session.snapshot()
        assert snap.current_node == NodeId.PREP
        assert snap.global_elapsed_seconds == 0

    def test_full_reset_transition_stops_ticker(self, session):
        session.advance("birth-occurs")
        session.advance("vigorous")
        session.advance("reset")
        assert not session.ticker.is_active

    def test_rejected_advance_keeps_ticker(self, session):
        session.advance("birth-occurs")
        with pytest.raises(InvalidTransitionError):
            session.advance("birth-occurs")
        assert session.ticker.is_active

    def test_close_stops_ticker_and_ignores_later_commands(self):
        session = ResuscitationSession(ticker_factory=FakeTicker)
        session.advance("birth-occurs")
        session.close()
        assert not session.ticker.is_active
        session.toggle_running()
        session.toggle_running()
        assert not session.ticker.is_active

    def test_dismiss_advisory(self, session):
        session.advance("birth-occurs")
        session.ticker.fire(30)
        assert session.snapshot().stale_step_advisory
        session.dismiss_advisory()
        assert not session.snapshot().stale_step_advisory


class TestPatient:
    def test_defaults_from_config(self):
        config = SessionConfig(default_weight_kg=1.2, default_gestational_age_weeks=29)
        with ResuscitationSession(config=config, ticker_factory=FakeTicker) as session:
            assert session.patient.weight_kg == 1.2
            assert not session.patient.is_term
            assert session.dosages().et_size == "3.0"

    def test_update_patient(self, session):
        session.update_patient(weight_kg=0.8)
        assert session.patient.weight_kg == 0.8
        assert session.patient.gestational_age_weeks == 39
        assert session.dosages().et_size == "2.5"

    def test_invalid_update_keeps_previous(self, session):
        session.update_patient(weight_kg=2.0, gestational_age_weeks=34)
        with pytest.raises(InvalidParameterError):
            session.update_patient(weight_kg=-1)
        with pytest.raises(InvalidParameterError):
            session.update_patient(gestational_age_weeks="abc")
        assert session.patient.weight_kg == 2.0
        assert session.patient.gestational_age_weeks == 34


class TestRepeatingTicker:
    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            RepeatingTicker(lambda: None, 0)

    def test_fires_until_stopped(self):
        fired = threading.Event()
        count = []

        def callback():
            count.append(1)
            if len(count) >= 3:
                fired.set()

        with RepeatingTicker(callback, 0.01) as ticker:
            assert ticker.is_active
            assert fired.wait(timeout=5.0)
        assert not ticker.is_active
        settled = len(count)
        time.sleep(0.05)
        assert len(count) == settled

    def test_restart_while_old_callback_in_flight(self):
        release = threading.Event()
        entered = threading.Event()
        callers = []

        def callback():
            callers.append(threading.current_thread())
            entered.set()
            release.wait(timeout=10.0)

        ticker = RepeatingTicker(callback, 0.01)
        ticker.start()
        assert entered.wait(timeout=5.0)
        old_thread = ticker._thread

        # join times out while the callback is blocked
        ticker.stop()
        assert old_thread.is_alive()
        assert not ticker.is_active

        ticker.start()
        new_thread = ticker._thread
        assert new_thread is not old_thread
        assert ticker.is_active

        release.set()
        old_thread.join(timeout=5.0)
        assert not old_thread.is_alive()
        ticker.stop()

        old_calls = sum(1 for t in callers if t is old_thread)
        assert old_calls == 1

    def test_real_session_counts_time(self):
        config = SessionConfig(tick_interval_sec=0.01)
        with ResuscitationSession(config=config) as session:
            session.advance("birth-occurs")
            deadline = time.monotonic() + 5.0
            while session.snapshot().global_elapsed_seconds < 3 and time.monotonic() < deadline:
                time.sleep(0.01)
            assert session.snapshot().global_elapsed_seconds >= 3
        assert not session.ticker.is_active
