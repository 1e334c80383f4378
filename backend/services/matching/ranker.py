"""Ranking in both directions: candidates for a listing, listings for a candidate.

Ties on the sort key are broken by ascending id of the ranked entity so
output is reproducible for identical inputs.

Note: candidates ranked for a listing are not passed through the
qualification gate, unlike listings ranked for a candidate.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Literal

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing
from models.schemas.match_result import Compatibility, MatchResult, UniversityListing
from services.matching.compatibility import classify_compatibility
from services.matching.qualification_gate import QualificationGate
from services.matching.score_calculator import ScoreCalculator
from services.matching.urgency import UrgencyCalculator, as_utc

logger = logging.getLogger(__name__)

ApplicantStatus = Literal["all", "qualified", "highly-qualified"]

_STATUS_BANDS: dict[str, frozenset[Compatibility]] = {
    "qualified": frozenset({Compatibility.GOOD, Compatibility.EXCELLENT}),
    "highly-qualified": frozenset({Compatibility.EXCELLENT}),
}


class Ranker:
    def __init__(
        self,
        calculator: ScoreCalculator,
        gate: QualificationGate,
        urgency: UrgencyCalculator,
        candidate_min_score: float = 0.3,
        listing_min_score: float = 0.4,
        urgency_weight: float = 0.1,
    ) -> None:
        self.calculator = calculator
        self.gate = gate
        self.urgency = urgency
        self.candidate_min_score = candidate_min_score
        self.listing_min_score = listing_min_score
        self.urgency_weight = urgency_weight

    def rank_candidates_for_job(
        self,
        listing: Listing,
        candidates: Iterable[Candidate],
        limit: int = 10,
    ) -> list[MatchResult]:
        """Top candidates with overall > candidate_min_score, best first."""
        pool = list(candidates)
        results: list[MatchResult] = []
        for candidate in pool:
            match = self.calculator.score(candidate, listing)
            if match.overall <= self.candidate_min_score:
                continue
            results.append(MatchResult(
                candidate_id=candidate.id,
                listing_id=listing.id,
                overall=match.overall,
                breakdown=match.breakdown,
                compatibility=classify_compatibility(match.overall),
            ))

        results.sort(key=lambda r: (-r.overall, r.candidate_id))
        ranked = results[:max(limit, 0)]
        logger.info(
            "Ranked candidates for listing %s: %d -> %d (limit %d)",
            listing.id, len(pool), len(ranked), limit,
        )
        return ranked

    def rank_listings_for_candidate(
        self,
        candidate: Candidate,
        listings: Iterable[Listing],
        limit: int = 10,
        now: datetime | None = None,
    ) -> list[MatchResult]:
        """Qualified listings with overall > listing_min_score.

        Sorted by overall + urgency * urgency_weight, best first.
        """
        now = now or datetime.now(timezone.utc)
        pool = list(listings)
        results: list[MatchResult] = []
        for listing in pool:
            match = self.calculator.score(candidate, listing)
            qualified = self.gate.is_qualified(candidate, listing)
            if not qualified or match.overall <= self.listing_min_score:
                continue
            results.append(MatchResult(
                candidate_id=candidate.id,
                listing_id=listing.id,
                overall=match.overall,
                breakdown=match.breakdown,
                compatibility=classify_compatibility(match.overall),
                is_qualified=qualified,
                urgency=self.urgency.urgency(listing, now),
            ))

        results.sort(key=lambda r: (-(r.overall + r.urgency * self.urgency_weight), r.listing_id))
        ranked = results[:max(limit, 0)]
        logger.info(
            "Ranked listings for candidate %s: %d -> %d (limit %d)",
            candidate.id, len(pool), len(ranked), limit,
        )
        return ranked


def rank_listings_for_university(
    university: str,
    listings: Iterable[Listing],
    limit: int = 5,
) -> list[UniversityListing]:
    """Listings that prefer this university or have no preference.

    Featured listings first, then newest, then ascending id.
    """
    eligible = [
        listing for listing in listings
        if not listing.preferred_universities or university in listing.preferred_universities
    ]
    # Stable sorts, least significant key first
    eligible.sort(key=lambda l: l.id)
    eligible.sort(
        key=lambda l: as_utc(l.created_at).timestamp() if l.created_at else float("-inf"),
        reverse=True,
    )
    eligible.sort(key=lambda l: l.featured, reverse=True)

    return [
        UniversityListing(
            listing_id=listing.id,
            title=listing.title,
            company=listing.company,
            location=listing.location,
            category=listing.category.value,
            featured=listing.featured,
            is_preferred=university in listing.preferred_universities,
        )
        for listing in eligible[:max(limit, 0)]
    ]


def filter_matches(
    matches: Iterable[MatchResult],
    min_score: float = 0.0,
    status: ApplicantStatus = "all",
) -> list[MatchResult]:
    """Narrow ranked matches by minimum score and compatibility band."""
    filtered = list(matches)
    if min_score > 0:
        filtered = [m for m in filtered if m.overall >= min_score]
    bands = _STATUS_BANDS.get(status)
    if bands is not None:
        filtered = [m for m in filtered if m.compatibility in bands]
    return filtered
