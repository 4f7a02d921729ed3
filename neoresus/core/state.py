import json
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Tuple

from .constants import (
    TICK_INTERVAL_SEC,
    STALE_STEP_THRESHOLD_SEC,
    DEFAULT_WEIGHT_KG,
    DEFAULT_GESTATIONAL_AGE_WEEKS,
)
from .enums import NodeId, UrgencyTier
from neoresus.protocol.graph import ProtocolNode, Transition


def _finite(name: str, value) -> float:
    # bool would silently become 0.0 / 1.0
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return number


def _whole(name: str, value) -> int:
    number = _finite(name, value)
    if not number.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(number)


@dataclass
class SessionConfig:
    """Configuration for a resuscitation session."""
    tick_interval_sec: float = TICK_INTERVAL_SEC
    advisory_threshold_sec: int = STALE_STEP_THRESHOLD_SEC

    # Patient defaults shown on a fresh start.
    default_weight_kg: float = DEFAULT_WEIGHT_KG
    default_gestational_age_weeks: int = DEFAULT_GESTATIONAL_AGE_WEEKS

    def __post_init__(self):
        try:
            self.tick_interval_sec = _finite("tick_interval_sec", self.tick_interval_sec)
            self.advisory_threshold_sec = _whole("advisory_threshold_sec", self.advisory_threshold_sec)
            self.default_weight_kg = _finite("default_weight_kg", self.default_weight_kg)
            self.default_gestational_age_weeks = _whole(
                "default_gestational_age_weeks", self.default_gestational_age_weeks
            )
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"Invalid session configuration: {exc}") from exc
        if self.tick_interval_sec <= 0:
            raise ValueError("tick_interval_sec must be positive")
        if self.advisory_threshold_sec <= 0:
            raise ValueError("advisory_threshold_sec must be positive")
        if self.default_weight_kg <= 0 or self.default_gestational_age_weeks <= 0:
            raise ValueError("default patient parameters must be positive")

    @classmethod
    def from_dict(cls, data: dict) -> "SessionConfig":
        """Build a config from a mapping, ignoring keys it does not know."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path) -> SessionConfig:
    """Load a SessionConfig from a JSON file."""
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return SessionConfig.from_dict(data)


@dataclass(slots=True)
class SessionState:
    """Mutable session state. Only the StepEngine writes to it."""
    current_node: NodeId = NodeId.PREP
    is_running: bool = False
    global_elapsed_seconds: int = 0
    per_node_elapsed_seconds: int = 0


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session handed to presentation code."""
    current_node: NodeId
    node: ProtocolNode
    transitions: Tuple[Transition, ...]
    is_running: bool
    global_elapsed_seconds: int
    per_node_elapsed_seconds: int
    stale_step_advisory: bool
    target_spo2: str
    elapsed_label: str
    urgency_tier: UrgencyTier
