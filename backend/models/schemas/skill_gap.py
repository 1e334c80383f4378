"""Skill-gap analysis output."""

from pydantic import BaseModel


class SkillRecommendation(BaseModel):
    skill: str
    resources: list[str] = []
    priority: str = "High"


class SkillGapAnalysis(BaseModel):
    """Missing and covered skills of a candidate against one listing.

    ``existing_skills`` is indexed by candidate skill, so ``coverage`` can
    exceed 1.0 when several candidate skills match the same requirement.
    """
    missing_skills: list[str] = []
    existing_skills: list[str] = []
    coverage: float = 0.0
    recommendations: list[SkillRecommendation] = []


class CareerPathSuggestion(BaseModel):
    field: str = "General"
    suggested_paths: list[str] = []
    growth_areas: list[str] = []
