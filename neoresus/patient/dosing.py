"""
Weight-based airway and drug calculations for neonatal resuscitation.

All results are formatted strings ready for display. Rounding is half-up
on the exact binary value of the product, which is how fixed-point
formatting in the bedside reference behaves (e.g. 0.125 -> "0.13").
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict

from neoresus.core.errors import InvalidParameterError
from .patient import require_positive

# Endotracheal tube internal diameter (mm) by weight.
ETT_SIZE_BANDS = (
    (1.0, "2.5"),   # < 1 kg
    (2.0, "3.0"),   # 1-2 kg
)
ETT_SIZE_DEFAULT = "3.5"

# Insertion depth at the lip: weight (kg) + 6 cm.
ETT_DEPTH_OFFSET_CM = 6.0

# Epinephrine 1:10,000 (0.1 mg/mL), mL/kg.
EPI_IV_ML_KG = (0.1, 0.3)
EPI_ET_ML_KG = (0.5, 1.0)

# Normal saline volume expansion, mL/kg.
VOLUME_ML_KG = (10.0, 20.0)

# Laryngeal mask size by weight.
LMA_WEIGHT_CUTOFF_KG = 2.5

# Emergency umbilical venous catheter insertion depth.
UVC_EMERGENCY_DEPTH = "3-5 cm"


def _fixed(value: float, places: int) -> str:
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize fails if the result has more digits than the context allows
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return f"{exact.quantize(quantum, rounding=ROUND_HALF_UP):f}"


def _dose_range(weight: float, per_kg: tuple, places: int, unit: str = "mL") -> str:
    low, high = per_kg
    return f"{_fixed(weight * low, places)}-{_fixed(weight * high, places)} {unit}"


def ett_size(weight_kg: float) -> str:
    for upper, size in ETT_SIZE_BANDS:
        if weight_kg < upper:
            return size
    return ETT_SIZE_DEFAULT


def lma_size(weight_kg: float) -> str:
    return "1.0" if weight_kg < LMA_WEIGHT_CUTOFF_KG else "2.0"


@dataclass(frozen=True)
class DosageResult:
    """Formatted airway and drug values for one weight."""
    et_size: str
    et_depth: str
    epi_iv: str
    epi_et: str
    volume_expansion: str
    lma_size: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "etSize": self.et_size,
            "etDepth": self.et_depth,
            "epiIV": self.epi_iv,
            "epiET": self.epi_et,
            "volumeExpansion": self.volume_expansion,
            "lmaSize": self.lma_size,
        }


def compute_dosages(weight_kg) -> DosageResult:
    """
    Compute airway sizes and drug volumes for a newborn.

    Raises InvalidParameterError for non-numeric, non-positive or overflowing weight.
    """
    weight = require_positive("weight_kg", weight_kg)
    # Largest product must stay a finite float
    if not math.isfinite(weight * VOLUME_ML_KG[1]):
        raise InvalidParameterError("weight_kg", weight_kg)
    return DosageResult(
        et_size=ett_size(weight),
        et_depth=_fixed(weight + ETT_DEPTH_OFFSET_CM, 1),
        epi_iv=_dose_range(weight, EPI_IV_ML_KG, 2),
        epi_et=_dose_range(weight, EPI_ET_ML_KG, 2),
        volume_expansion=_dose_range(weight, VOLUME_ML_KG, 0),
        lma_size=lma_size(weight),
    )
