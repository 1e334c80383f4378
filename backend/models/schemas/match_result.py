"""Scoring and ranking outputs."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Compatibility(str, Enum):
    """Ordinal compatibility band derived from an overall score."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class ScoreBreakdown(BaseModel):
    """Per-criterion sub-scores. Only ``skills`` can exceed 1.0."""
    model_config = ConfigDict(frozen=True)

    skills: float = 0.0
    education: float = 0.0
    university: float = 0.0
    experience: float = 0.0
    location: float = 0.0


class MatchScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: float = 0.0  # clamped to [0, 1]
    breakdown: ScoreBreakdown = ScoreBreakdown()


class MatchResult(BaseModel):
    """A single ranked (candidate, listing) pair.

    ``is_qualified`` and ``urgency`` are only populated when ranking
    listings for a candidate.
    """
    candidate_id: str
    listing_id: str
    overall: float
    breakdown: ScoreBreakdown
    compatibility: Compatibility
    is_qualified: bool | None = None
    urgency: float | None = None


class UniversityListing(BaseModel):
    """A listing open to a given university."""
    listing_id: str
    title: str = ""
    company: str = ""
    location: str = ""
    category: str = ""
    featured: bool = False
    is_preferred: bool = False  # university explicitly listed (vs. no preference)
