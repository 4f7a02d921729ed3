import math

import pytest

from neoresus.core.errors import InvalidParameterError
from neoresus.patient.dosing import UVC_EMERGENCY_DEPTH, compute_dosages
from neoresus.patient.patient import PatientParameters


def test_term_weight():
    assert compute_dosages(3.0).as_dict() == {
        "etSize": "3.5",
        "etDepth": "9.0",
        "epiIV": "0.30-0.90 mL",
        "epiET": "1.50-3.00 mL",
        "volumeExpansion": "30-60 mL",
        "lmaSize": "2.0",
    }


def test_extremely_low_birth_weight():
    result = compute_dosages(0.8)
    assert result.et_size == "2.5"
    assert result.et_depth == "6.8"
    assert result.lma_size == "1.0"
    assert result.epi_iv == "0.08-0.24 mL"
    assert result.volume_expansion == "8-16 mL"


def test_preterm_weight():
    result = compute_dosages(1.5)
    assert result.et_size == "3.0"
    assert result.et_depth == "7.5"
    assert result.epi_et == "0.75-1.50 mL"
    assert result.volume_expansion == "15-30 mL"


@pytest.mark.parametrize("weight, size", [
    (0.99, "2.5"),
    (1.0, "3.0"),
    (1.99, "3.0"),
    (2.0, "3.5"),
    (4.5, "3.5"),
])
def test_tube_size_bands(weight, size):
    assert compute_dosages(weight).et_size == size


@pytest.mark.parametrize("weight, size", [(2.4, "1.0"), (2.5, "2.0")])
def test_laryngeal_mask_cutoff(weight, size):
    assert compute_dosages(weight).lma_size == size


def test_huge_weight_formats_without_decimal_errors():
    result = compute_dosages(1e27)
    assert result.et_size == "3.5"
    assert result.lma_size == "2.0"
    assert result.et_depth == "1000000000000000013287555072.0"
    assert result.volume_expansion.endswith(" mL")
    assert result.epi_iv.count("-") == 1


def test_overflowing_weight_rejected():
    with pytest.raises(InvalidParameterError):
        compute_dosages(1e308)


def test_half_up_rounding():
    # 1.25 * 0.1 is 0.125 exactly in binary
    assert compute_dosages(1.25).epi_iv.startswith("0.13-")
    # 0.25 * 10 = 2.5 rounds up
    assert compute_dosages(0.25).volume_expansion == "3-5 mL"


def test_integer_weight_accepted():
    assert compute_dosages(3) == compute_dosages(3.0)


@pytest.mark.parametrize("bad", [0, -1, -0.5, "abc", "3.0", None, True, math.nan, math.inf])
def test_invalid_weight_rejected(bad):
    with pytest.raises(InvalidParameterError):
        compute_dosages(bad)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        compute_dosages(0)


def test_uvc_depth_constant():
    assert UVC_EMERGENCY_DEPTH == "3-5 cm"


class TestPatientParameters:
    def test_defaults(self):
        patient = PatientParameters()
        assert patient.weight_kg == 3.0
        assert patient.gestational_age_weeks == 39
        assert patient.is_term

    def test_preterm(self):
        assert not PatientParameters(1.2, 30).is_term
        assert PatientParameters(2.8, 37).is_term

    @pytest.mark.parametrize("ga", [0, -2, 32.5, "39", None])
    def test_invalid_gestational_age(self, ga):
        with pytest.raises(InvalidParameterError):
            PatientParameters(3.0, ga)

    def test_whole_float_gestational_age_coerced(self):
        assert PatientParameters(3.0, 38.0).gestational_age_weeks == 38
