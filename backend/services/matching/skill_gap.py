"""Missing/covered skill analysis with learning-resource recommendations."""

import logging
from typing import Mapping

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing
from models.schemas.skill_gap import SkillGapAnalysis, SkillRecommendation
from services.matching import tables
from services.similarity import DEFAULT_THRESHOLD, skills_match

logger = logging.getLogger(__name__)

EMPTY_REQUIREMENTS_COVERAGE = 0.5


class SkillGapAnalyzer:
    def __init__(
        self,
        resources: Mapping[str, tuple[str, ...]] = tables.SKILL_RESOURCES,
        generic_resources: tuple[str, ...] = tables.GENERIC_RESOURCES,
        similarity_threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self.similarity_threshold = similarity_threshold
        self.generic_resources = generic_resources
        self._resources = {name.lower(): list(items) for name, items in resources.items()}

    def analyze(self, candidate: Candidate, listing: Listing) -> SkillGapAnalysis:
        required = listing.required_skills
        owned = candidate.skills

        missing = [
            req for req in required
            if not any(skills_match(skill, req, self.similarity_threshold) for skill in owned)
        ]
        existing = [
            skill for skill in owned
            if any(skills_match(skill, req, self.similarity_threshold) for req in required)
        ]
        coverage = len(existing) / len(required) if required else EMPTY_REQUIREMENTS_COVERAGE

        logger.debug(
            "Skill gap for candidate %s vs listing %s: %d missing, coverage %.2f",
            candidate.id, listing.id, len(missing), coverage,
        )
        return SkillGapAnalysis(
            missing_skills=missing,
            existing_skills=existing,
            coverage=coverage,
            recommendations=self.recommend(missing),
        )

    def recommend(self, missing_skills: list[str]) -> list[SkillRecommendation]:
        return [
            SkillRecommendation(
                skill=skill,
                resources=self._resources.get(skill.lower(), list(self.generic_resources)),
            )
            for skill in missing_skills
        ]
