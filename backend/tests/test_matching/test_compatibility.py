import pytest

from models.schemas.match_result import Compatibility
from services.matching.compatibility import classify_compatibility


@pytest.mark.parametrize("score,expected", [
    (1.0, Compatibility.EXCELLENT),
    (0.8, Compatibility.EXCELLENT),
    (0.7999, Compatibility.GOOD),
    (0.6, Compatibility.GOOD),
    (0.5999, Compatibility.FAIR),
    (0.4, Compatibility.FAIR),
    (0.3999, Compatibility.POOR),
    (0.0, Compatibility.POOR),
])
def test_band_boundaries(score, expected):
    assert classify_compatibility(score) == expected


def test_labels():
    assert classify_compatibility(0.85).value == "Excellent"
    assert classify_compatibility(0.1).value == "Poor"
