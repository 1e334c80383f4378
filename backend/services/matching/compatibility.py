"""Maps an overall score onto an ordinal compatibility band."""

from models.schemas.match_result import Compatibility

# (lower bound, band), checked from the top
BANDS: tuple[tuple[float, Compatibility], ...] = (
    (0.8, Compatibility.EXCELLENT),
    (0.6, Compatibility.GOOD),
    (0.4, Compatibility.FAIR),
)


def classify_compatibility(score: float) -> Compatibility:
    for lower, band in BANDS:
        if score >= lower:
            return band
    return Compatibility.POOR
