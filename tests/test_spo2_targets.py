import pytest

from neoresus.core.constants import SPO2_BAND_TARGETS, STABLE_SPO2_TARGET
from neoresus.core.enums import NodeId
from neoresus.monitors.spo2 import SPO2_TARGETS, spo2_band_index, target_spo2


@pytest.mark.parametrize("seconds, expected", [
    (0, "60%-65%"),
    (60, "60%-65%"),
    (61, "65%-70%"),
    (120, "65%-70%"),
    (121, "70%-75%"),
    (180, "70%-75%"),
    (240, "75%-80%"),
    (300, "80%-85%"),
    (301, "85%-95%"),
    (3600, "85%-95%"),
])
def test_bands_are_right_inclusive(seconds, expected):
    assert target_spo2(seconds, NodeId.PPV) == expected


def test_band_index_monotonic_then_flat():
    indices = [spo2_band_index(s) for s in range(0, 601)]
    assert indices == sorted(indices)
    assert indices[0] == 0
    assert max(indices) == len(SPO2_BAND_TARGETS) - 1
    assert set(indices[301:]) == {len(SPO2_BAND_TARGETS) - 1}


@pytest.mark.parametrize("seconds", [0, 60, 200, 301, 5000])
def test_post_care_uses_stable_target(seconds):
    assert target_spo2(seconds, NodeId.POST_CARE) == STABLE_SPO2_TARGET


def test_reference_table_matches_bands():
    assert [row[1] for row in SPO2_TARGETS] == list(SPO2_BAND_TARGETS)
    assert SPO2_TARGETS[0][0] == "1 min"
    assert SPO2_TARGETS[-1][0] == "10 min"
