"""Tests for both ranking directions and the supplementary listing views."""

from datetime import datetime, timedelta, timezone

import pytest

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing, ListingRequirements
from models.schemas.match_result import Compatibility, MatchResult, MatchScore, ScoreBreakdown
from services.matching.qualification_gate import QualificationGate
from services.matching.ranker import Ranker, filter_matches, rank_listings_for_university
from services.matching.score_calculator import ScoreCalculator
from services.matching.urgency import UrgencyCalculator

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class _FixedScores:
    """Stands in for ScoreCalculator with predetermined overall scores."""

    def __init__(self, scores: dict[str, float], by: str = "candidate") -> None:
        self.scores = scores
        self.by = by

    def score(self, candidate: Candidate, listing: Listing) -> MatchScore:
        key = candidate.id if self.by == "candidate" else listing.id
        return MatchScore(overall=self.scores[key], breakdown=ScoreBreakdown())


def _ranker(calculator) -> Ranker:
    return Ranker(calculator, QualificationGate(), UrgencyCalculator())


def _open_listing(listing_id: str, **overrides) -> Listing:
    return Listing(id=listing_id, requirements=ListingRequirements(), **overrides)


class TestRankCandidatesForJob:
    def test_sorted_descending_and_thresholded(self):
        scores = {"a": 0.5, "b": 0.9, "c": 0.3, "d": 0.31, "e": 0.1}
        ranker = _ranker(_FixedScores(scores))
        pool = [Candidate(id=cid) for cid in scores]

        results = ranker.rank_candidates_for_job(Listing(id="l1"), pool, limit=10)

        assert [r.candidate_id for r in results] == ["b", "a", "d"]
        assert all(r.overall > 0.3 for r in results)
        assert all(r.listing_id == "l1" for r in results)

    def test_limit_respected(self):
        scores = {f"c{i}": 0.5 + i / 100 for i in range(20)}
        ranker = _ranker(_FixedScores(scores))
        results = ranker.rank_candidates_for_job(
            Listing(id="l1"), [Candidate(id=cid) for cid in scores], limit=5
        )
        assert len(results) == 5
        assert results[0].candidate_id == "c19"

    def test_ties_broken_by_candidate_id(self):
        scores = {"zed": 0.7, "amy": 0.7, "max": 0.7}
        ranker = _ranker(_FixedScores(scores))
        pool = [Candidate(id=cid) for cid in scores]
        results = ranker.rank_candidates_for_job(Listing(id="l1"), pool)
        assert [r.candidate_id for r in results] == ["amy", "max", "zed"]

    def test_gate_not_applied(self):
        ranker = _ranker(_FixedScores({"c1": 0.9}))
        listing = Listing(id="l1", requirements=ListingRequirements(min_gpa=3.9))
        results = ranker.rank_candidates_for_job(listing, [Candidate(id="c1", gpa=2.0)])
        assert len(results) == 1
        assert results[0].is_qualified is None
        assert results[0].urgency is None

    def test_compatibility_attached(self):
        ranker = _ranker(_FixedScores({"c1": 0.85, "c2": 0.45}))
        results = ranker.rank_candidates_for_job(
            Listing(id="l1"), [Candidate(id="c1"), Candidate(id="c2")]
        )
        assert results[0].compatibility == Compatibility.EXCELLENT
        assert results[1].compatibility == Compatibility.FAIR

    def test_real_calculator_end_to_end(self):
        ranker = _ranker(ScoreCalculator())
        listing = Listing(
            id="l1",
            required_skills=["Python", "SQL"],
            description="Data engineering internship for computer science students",
            category="internship",
            location="Maseru",
        )
        pool = [
            Candidate(id="strong", skills=["Python", "SQL"], course="Computer Science", year="2", location="Maseru"),
            Candidate(id="weak", skills=["Painting"], course="Fine Art", year="1", location="Leribe"),
            Candidate(id="mid", skills=["python"], course="Statistics", year="3"),
        ]
        results = ranker.rank_candidates_for_job(listing, pool, limit=2)
        assert len(results) <= 2
        assert results[0].candidate_id == "strong"
        assert all(r.overall > 0.3 for r in results)


class TestRankListingsForCandidate:
    def test_filters_unqualified_and_low_scores(self):
        scores = {"ok": 0.6, "low": 0.4, "gated": 0.9, "nogate": 0.8}
        ranker = _ranker(_FixedScores(scores, by="listing"))
        listings = [
            _open_listing("ok"),
            _open_listing("low"),
            Listing(id="gated", requirements=ListingRequirements(portfolio_required=True)),
            Listing(id="nogate"),  # no requirements block
        ]
        results = ranker.rank_listings_for_candidate(Candidate(id="c1"), listings, now=NOW)
        assert [r.listing_id for r in results] == ["ok"]
        assert results[0].is_qualified is True
        assert results[0].urgency == 0.5

    def test_urgency_breaks_close_scores(self):
        scores = {"calm": 0.62, "urgent": 0.60}
        ranker = _ranker(_FixedScores(scores, by="listing"))
        listings = [_open_listing("calm"), _open_listing("urgent", urgent=True)]
        results = ranker.rank_listings_for_candidate(Candidate(id="c1"), listings, now=NOW)
        # 0.60 + 0.8 * 0.1 = 0.68 beats 0.62 + 0.5 * 0.1 = 0.67
        assert [r.listing_id for r in results] == ["urgent", "calm"]

    def test_deadline_proximity_feeds_urgency(self):
        ranker = _ranker(_FixedScores({"soon": 0.7}, by="listing"))
        listing = _open_listing("soon", application_deadline=NOW + timedelta(days=2))
        results = ranker.rank_listings_for_candidate(Candidate(id="c1"), [listing], now=NOW)
        assert results[0].urgency == pytest.approx(0.9)

    def test_ties_broken_by_listing_id(self):
        scores = {"l3": 0.7, "l1": 0.7, "l2": 0.7}
        ranker = _ranker(_FixedScores(scores, by="listing"))
        listings = [_open_listing(lid) for lid in scores]
        results = ranker.rank_listings_for_candidate(Candidate(id="c1"), listings, now=NOW)
        assert [r.listing_id for r in results] == ["l1", "l2", "l3"]

    def test_limit_respected(self):
        scores = {f"l{i:02d}": 0.5 + i / 100 for i in range(15)}
        ranker = _ranker(_FixedScores(scores, by="listing"))
        listings = [_open_listing(lid) for lid in scores]
        results = ranker.rank_listings_for_candidate(Candidate(id="c1"), listings, limit=3, now=NOW)
        assert [r.listing_id for r in results] == ["l14", "l13", "l12"]


class TestUniversityListings:
    def test_preferred_or_open_listings_ordered(self):
        listings = [
            Listing(id="pref", preferred_universities=["NUL"], created_at=datetime(2025, 1, 2)),
            Listing(id="featured", featured=True, created_at=datetime(2025, 1, 1)),
            Listing(id="other", preferred_universities=["Limkokwing"]),
            Listing(id="undated"),
        ]
        results = rank_listings_for_university("NUL", listings)
        assert [r.listing_id for r in results] == ["featured", "pref", "undated"]
        assert [r.is_preferred for r in results] == [False, True, False]

    def test_mixed_naive_and_aware_created_at_compare_in_utc(self):
        listings = [
            # 08:00 UTC
            Listing(id="aware", created_at=datetime(2025, 1, 1, 13, 0, tzinfo=timezone(timedelta(hours=5)))),
            # naive, taken as 12:00 UTC
            Listing(id="naive", created_at=datetime(2025, 1, 1, 12, 0)),
        ]
        results = rank_listings_for_university("NUL", listings)
        assert [r.listing_id for r in results] == ["naive", "aware"]

    def test_limit(self):
        listings = [Listing(id=f"l{i}") for i in range(10)]
        assert len(rank_listings_for_university("NUL", listings, limit=5)) == 5


class TestFilterMatches:
    def setup_method(self):
        self.matches = [
            MatchResult(
                candidate_id=cid, listing_id="l1", overall=score,
                breakdown=ScoreBreakdown(), compatibility=band,
            )
            for cid, score, band in [
                ("a", 0.85, Compatibility.EXCELLENT),
                ("b", 0.65, Compatibility.GOOD),
                ("c", 0.45, Compatibility.FAIR),
            ]
        ]

    def test_all(self):
        assert len(filter_matches(self.matches)) == 3

    def test_min_score(self):
        assert [m.candidate_id for m in filter_matches(self.matches, min_score=0.6)] == ["a", "b"]

    def test_status(self):
        assert [m.candidate_id for m in filter_matches(self.matches, status="qualified")] == ["a", "b"]
        assert [m.candidate_id for m in filter_matches(self.matches, status="highly-qualified")] == ["a"]
