"""Weighted compatibility score between a candidate and a listing.

Five sub-scores are combined with ScoreWeights:
    skills      fuzzy overlap of candidate skills with required skills
    education   course keywords found in the listing text + year relevance
    university  preferred-institution match
    experience  year of study as an experience proxy
    location    city match (text before the first comma)

Only the composite is clamped to [0, 1]. The skills ratio counts candidate
skills, so it can exceed 1.0 when the candidate lists several variants of
a required skill.
"""

import logging
import re
from typing import Mapping

import numpy as np

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing
from models.schemas.match_result import MatchScore, ScoreBreakdown
from services.matching import tables
from services.similarity import DEFAULT_THRESHOLD, skills_match

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 0.5
_KEYWORD_SPLIT = re.compile(r"[\s/&]+")
_MIN_KEYWORD_LEN = 3  # keywords must be longer than this to count


def split_keywords(text: str) -> list[str]:
    """Lower-case and split on whitespace, '/' and '&'. Empty tokens dropped."""
    return [tok for tok in _KEYWORD_SPLIT.split(text.lower().strip()) if tok]


def is_significant_keyword(token: str) -> bool:
    return len(token) > _MIN_KEYWORD_LEN


class ScoreCalculator:
    def __init__(
        self,
        weights: tables.ScoreWeights = tables.DEFAULT_WEIGHTS,
        year_relevance: Mapping[str, Mapping[str, float]] = tables.YEAR_RELEVANCE,
        experience_proxy: Mapping[str, float] = tables.EXPERIENCE_PROXY,
        similarity_threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self.weights = weights
        self.year_relevance = year_relevance
        self.experience_proxy = experience_proxy
        self.similarity_threshold = similarity_threshold

    def score(self, candidate: Candidate, listing: Listing) -> MatchScore:
        breakdown = ScoreBreakdown(
            skills=self.skills_score(listing.required_skills, candidate.skills),
            education=self.education_score(candidate, listing),
            university=self.university_score(listing.preferred_universities, candidate.university),
            experience=self.experience_score(candidate.year),
            location=self.location_score(listing.location, candidate.location),
        )
        overall = self.composite(breakdown)
        logger.debug("Scored candidate %s vs listing %s: %.3f", candidate.id, listing.id, overall)
        return MatchScore(overall=overall, breakdown=breakdown)

    def composite(self, breakdown: ScoreBreakdown) -> float:
        """Weighted sum of sub-scores, clamped to [0, 1]."""
        values = breakdown.model_dump()
        weights = self.weights.model_dump()
        names = list(weights)
        raw = float(np.dot(
            [values[name] for name in names],
            [weights[name] for name in names],
        ))
        return max(0.0, min(1.0, raw))

    def skills_score(self, required_skills: list[str], candidate_skills: list[str]) -> float:
        if not required_skills:
            return NEUTRAL_SCORE

        matching = [
            skill for skill in candidate_skills
            if any(skills_match(skill, req, self.similarity_threshold) for req in required_skills)
        ]
        return len(matching) / len(required_skills)

    def education_score(self, candidate: Candidate, listing: Listing) -> float:
        score = NEUTRAL_SCORE

        listing_text = f"{listing.description} {listing.requirements_text}".lower()
        if candidate.course and listing_text.strip():
            keywords = split_keywords(candidate.course)
            if keywords:
                matched = [
                    kw for kw in keywords
                    if is_significant_keyword(kw) and kw in listing_text
                ]
                score += (len(matched) / len(keywords)) * 0.3

        if candidate.year:
            score += self.year_relevance_score(candidate.year, listing.category.value) * 0.2

        return min(1.0, score)

    def year_relevance_score(self, year: str, category: str) -> float:
        by_category = self.year_relevance.get(year)
        if by_category is None:
            return tables.DEFAULT_YEAR_RELEVANCE
        return by_category.get(category, tables.DEFAULT_YEAR_RELEVANCE)

    def university_score(self, preferred: list[str], university: str) -> float:
        if not preferred:
            return NEUTRAL_SCORE
        return 1.0 if university in preferred else 0.2

    def experience_score(self, year: str | None) -> float:
        if year is None:
            return tables.DEFAULT_EXPERIENCE
        return self.experience_proxy.get(year, tables.DEFAULT_EXPERIENCE)

    def location_score(self, listing_location: str, candidate_location: str) -> float:
        if not candidate_location:
            return NEUTRAL_SCORE
        listing_city = listing_location.split(",")[0].lower().strip()
        candidate_city = candidate_location.split(",")[0].lower().strip()
        return 1.0 if listing_city == candidate_city else 0.3
