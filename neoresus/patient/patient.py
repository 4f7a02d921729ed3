import math
from dataclasses import dataclass
from numbers import Real

from neoresus.core.constants import (
    DEFAULT_WEIGHT_KG,
    DEFAULT_GESTATIONAL_AGE_WEEKS,
    TERM_GESTATION_WEEKS,
)
from neoresus.core.errors import InvalidParameterError


def require_positive(name: str, value) -> float:
    """Return value as float, or raise InvalidParameterError."""
    # bool is a Real subclass but never a meaningful weight
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value)
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(name, value)
    return value


@dataclass
class PatientParameters:
    """
    Newborn parameters entered by the user.
    """
    weight_kg: float = DEFAULT_WEIGHT_KG              # kg
    gestational_age_weeks: int = DEFAULT_GESTATIONAL_AGE_WEEKS  # completed weeks

    def __post_init__(self):
        self.weight_kg = require_positive("weight_kg", self.weight_kg)
        ga = require_positive("gestational_age_weeks", self.gestational_age_weeks)
        if not ga.is_integer():
            raise InvalidParameterError("gestational_age_weeks", self.gestational_age_weeks)
        self.gestational_age_weeks = int(ga)

    @property
    def is_term(self) -> bool:
        return self.gestational_age_weeks >= TERM_GESTATION_WEEKS
