"""Id-based matching operations over a repository.

Each operation resolves ids through the repository (NotFoundError
propagates to the caller), then delegates to the pure MatchingEngine.
"""

import logging
from datetime import datetime

from models.schemas.match_result import MatchResult, UniversityListing
from models.schemas.skill_gap import CareerPathSuggestion, SkillGapAnalysis
from services.matching.engine import MatchingEngine
from services.matching.ranker import ApplicantStatus, filter_matches
from services.repository import MatchingRepository

logger = logging.getLogger(__name__)


class MatchingService:
    def __init__(self, repository: MatchingRepository, engine: MatchingEngine) -> None:
        self.repository = repository
        self.engine = engine

    def match_candidates_to_listing(
        self,
        listing_id: str,
        limit: int = 10,
        min_score: float = 0.0,
        status: ApplicantStatus = "all",
    ) -> list[MatchResult]:
        listing = self.repository.get_listing(listing_id)
        candidates = self.repository.list_active_candidates()
        logger.info("Matching %d active candidates to listing %s", len(candidates), listing_id)
        matches = self.engine.rank_candidates_for_job(listing, candidates, limit)
        return filter_matches(matches, min_score=min_score, status=status)

    def recommend_listings_for_candidate(
        self,
        candidate_id: str,
        limit: int = 10,
        now: datetime | None = None,
    ) -> list[MatchResult]:
        candidate = self.repository.get_candidate(candidate_id)
        listings = self.repository.list_active_listings(now)
        logger.info("Recommending from %d active listings for candidate %s", len(listings), candidate_id)
        return self.engine.rank_listings_for_candidate(candidate, listings, limit, now)

    def analyze_skill_gaps(self, candidate_id: str, listing_id: str) -> SkillGapAnalysis:
        candidate = self.repository.get_candidate(candidate_id)
        listing = self.repository.get_listing(listing_id)
        return self.engine.analyze_skill_gap(candidate, listing)

    def university_listings(self, university: str, limit: int = 5) -> list[UniversityListing]:
        listings = self.repository.list_active_listings()
        return self.engine.rank_listings_for_university(university, listings, limit)

    def career_paths(self, candidate_id: str) -> CareerPathSuggestion:
        candidate = self.repository.get_candidate(candidate_id)
        return self.engine.suggest_career_paths(candidate)
