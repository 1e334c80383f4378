"""Pydantic contracts shared by the matching engine and the API."""

from models.schemas.candidate import Candidate, Qualifications
from models.schemas.listing import Listing, ListingRequirements, ListingType
from models.schemas.match_result import (
    Compatibility,
    MatchResult,
    MatchScore,
    ScoreBreakdown,
    UniversityListing,
)
from models.schemas.skill_gap import CareerPathSuggestion, SkillGapAnalysis, SkillRecommendation

__all__ = [
    "Candidate",
    "Qualifications",
    "Listing",
    "ListingRequirements",
    "ListingType",
    "Compatibility",
    "MatchResult",
    "MatchScore",
    "ScoreBreakdown",
    "UniversityListing",
    "CareerPathSuggestion",
    "SkillGapAnalysis",
    "SkillRecommendation",
]
