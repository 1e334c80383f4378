"""Tests for skill-gap analysis."""

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing
from models.schemas.skill_gap import SkillGapAnalysis, SkillRecommendation
from services.matching.skill_gap import SkillGapAnalyzer


class TestSkillGapAnalyzer:
    def setup_method(self):
        self.analyzer = SkillGapAnalyzer()

    def test_missing_and_existing(self):
        candidate = Candidate(id="c1", skills=["Javascript", "Python"])
        listing = Listing(id="l1", required_skills=["JavaScript", "SQL"])

        result = self.analyzer.analyze(candidate, listing)
        assert isinstance(result, SkillGapAnalysis)
        assert result.missing_skills == ["SQL"]
        assert result.existing_skills == ["Javascript"]
        assert result.coverage == 0.5

    def test_recommendations_for_known_skill(self):
        candidate = Candidate(id="c1", skills=[])
        listing = Listing(id="l1", required_skills=["SQL"])

        result = self.analyzer.analyze(candidate, listing)
        assert result.recommendations == [
            SkillRecommendation(skill="SQL", resources=["SQLBolt", "Khan Academy SQL"], priority="High")
        ]

    def test_recommendation_lookup_ignores_case(self):
        recs = self.analyzer.recommend(["react"])
        assert recs[0].resources == ["React Official Tutorial", "FreeCodeCamp React Course"]

    def test_unknown_skill_gets_generic_resource(self):
        recs = self.analyzer.recommend(["Rust"])
        assert recs[0].skill == "Rust"
        assert recs[0].resources == ["General online courses and practice"]

    def test_coverage_counts_candidate_skills(self):
        candidate = Candidate(id="c1", skills=["Python", "python3"])
        listing = Listing(id="l1", required_skills=["Python"])

        result = self.analyzer.analyze(candidate, listing)
        assert result.missing_skills == []
        assert result.existing_skills == ["Python", "python3"]
        assert result.coverage == 2.0

    def test_no_required_skills(self):
        candidate = Candidate(id="c1", skills=["Python"])
        result = self.analyzer.analyze(candidate, Listing(id="l1"))
        assert result.missing_skills == []
        assert result.existing_skills == []
        assert result.coverage == 0.5
        assert result.recommendations == []

    def test_custom_resources(self):
        analyzer = SkillGapAnalyzer(resources={"Go": ("Tour of Go",)})
        assert analyzer.recommend(["go"])[0].resources == ["Tour of Go"]
