from pydantic import BaseModel

from models.schemas.match_result import Compatibility, MatchResult, ScoreBreakdown, UniversityListing


class ScoreResponse(BaseModel):
    overall: float = 0.0
    breakdown: ScoreBreakdown = ScoreBreakdown()
    compatibility: Compatibility = Compatibility.POOR


class QualificationResponse(BaseModel):
    candidate_id: str
    listing_id: str
    is_qualified: bool = False


class ClassifyResponse(BaseModel):
    score: float
    compatibility: Compatibility


class RankingResponse(BaseModel):
    matches: list[MatchResult] = []
    total: int = 0  # pool size before filtering
    returned: int = 0


class UniversityListingsResponse(BaseModel):
    university: str
    listings: list[UniversityListing] = []
