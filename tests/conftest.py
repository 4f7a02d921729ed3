from pathlib import Path
import os
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Qt widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from neoresus.core.engine import StepEngine
from neoresus.core.state import SessionConfig
from neoresus.protocol.nrp import create_nrp_protocol


@pytest.fixture
def graph():
    """The canonical NRP protocol graph."""
    return create_nrp_protocol()


@pytest.fixture
def engine(graph):
    """Fresh engine at PREP with the stopwatch stopped."""
    return StepEngine(graph=graph, config=SessionConfig())


@pytest.fixture
def running_engine(engine):
    """Engine just past birth: at BIRTH with the stopwatch running."""
    engine.advance("birth-occurs")
    return engine


@pytest.fixture
def advance_time():
    """Helper to drive the 1 Hz tick deterministically."""
    def _advance(engine, seconds):
        for _ in range(int(seconds)):
            engine.tick()

    return _advance
