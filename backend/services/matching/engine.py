"""Matching engine facade: wires the scoring components together.

Flow for a (candidate, listing) pair:
    ScoreCalculator.score()        -> MatchScore (overall + breakdown)
    QualificationGate.is_qualified -> bool, never blended into the score
    UrgencyCalculator.urgency()    -> listing ranking boost
    classify_compatibility()       -> Excellent / Good / Fair / Poor

The engine holds no mutable state; every call is pure over its inputs.
"""

from datetime import datetime
from typing import Iterable

from config import Settings
from models.schemas.candidate import Candidate
from models.schemas.listing import Listing
from models.schemas.match_result import Compatibility, MatchResult, MatchScore, UniversityListing
from models.schemas.skill_gap import CareerPathSuggestion, SkillGapAnalysis
from services.matching.career_paths import CareerPathAdvisor
from services.matching.compatibility import classify_compatibility
from services.matching.qualification_gate import QualificationGate
from services.matching.ranker import Ranker, rank_listings_for_university
from services.matching.score_calculator import ScoreCalculator
from services.matching.skill_gap import SkillGapAnalyzer
from services.matching.urgency import UrgencyCalculator


class MatchingEngine:
    def __init__(
        self,
        calculator: ScoreCalculator | None = None,
        gate: QualificationGate | None = None,
        urgency: UrgencyCalculator | None = None,
        skill_gap: SkillGapAnalyzer | None = None,
        career_paths: CareerPathAdvisor | None = None,
        candidate_min_score: float = 0.3,
        listing_min_score: float = 0.4,
        urgency_weight: float = 0.1,
    ) -> None:
        self.calculator = calculator or ScoreCalculator()
        self.gate = gate or QualificationGate()
        self.urgency = urgency or UrgencyCalculator()
        self.skill_gap = skill_gap or SkillGapAnalyzer()
        self.career_paths = career_paths or CareerPathAdvisor()
        self.ranker = Ranker(
            self.calculator,
            self.gate,
            self.urgency,
            candidate_min_score=candidate_min_score,
            listing_min_score=listing_min_score,
            urgency_weight=urgency_weight,
        )

    def score(self, candidate: Candidate, listing: Listing) -> MatchScore:
        return self.calculator.score(candidate, listing)

    def is_qualified(self, candidate: Candidate | None, listing: Listing) -> bool:
        return self.gate.is_qualified(candidate, listing)

    def rank_candidates_for_job(
        self, listing: Listing, candidates: Iterable[Candidate], limit: int = 10
    ) -> list[MatchResult]:
        return self.ranker.rank_candidates_for_job(listing, candidates, limit)

    def rank_listings_for_candidate(
        self,
        candidate: Candidate,
        listings: Iterable[Listing],
        limit: int = 10,
        now: datetime | None = None,
    ) -> list[MatchResult]:
        return self.ranker.rank_listings_for_candidate(candidate, listings, limit, now)

    def rank_listings_for_university(
        self, university: str, listings: Iterable[Listing], limit: int = 5
    ) -> list[UniversityListing]:
        return rank_listings_for_university(university, listings, limit)

    def classify_compatibility(self, score: float) -> Compatibility:
        return classify_compatibility(score)

    def analyze_skill_gap(self, candidate: Candidate, listing: Listing) -> SkillGapAnalysis:
        return self.skill_gap.analyze(candidate, listing)

    def suggest_career_paths(self, candidate: Candidate) -> CareerPathSuggestion:
        return self.career_paths.suggest(candidate)


def build_engine(settings: Settings) -> MatchingEngine:
    """Create an engine from application settings."""
    threshold = settings.similarity_threshold
    return MatchingEngine(
        calculator=ScoreCalculator(similarity_threshold=threshold),
        gate=QualificationGate(on_missing_data=settings.on_missing_data),
        skill_gap=SkillGapAnalyzer(similarity_threshold=threshold),
        candidate_min_score=settings.candidate_min_score,
        listing_min_score=settings.listing_min_score,
        urgency_weight=settings.urgency_weight,
    )
