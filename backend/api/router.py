from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_engine, get_matching_service
from config import settings
from models.requests import PairRequest, RankCandidatesRequest, RankListingsRequest
from models.responses import (
    ClassifyResponse,
    QualificationResponse,
    RankingResponse,
    ScoreResponse,
    UniversityListingsResponse,
)
from models.schemas.match_result import MatchResult
from models.schemas.skill_gap import CareerPathSuggestion, SkillGapAnalysis
from services.matching.engine import MatchingEngine
from services.matching.ranker import ApplicantStatus
from services.matching_service import MatchingService
from services.repository import NotFoundError

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "on_missing_data": settings.on_missing_data,
    }


# ---------------------------------------------------------------------------
# Stateless matching: records are supplied in the request body
# ---------------------------------------------------------------------------

@router.post("/match/score", response_model=ScoreResponse)
async def score(body: PairRequest, engine: MatchingEngine = Depends(get_engine)):
    result = engine.score(body.candidate, body.listing)
    return ScoreResponse(
        overall=result.overall,
        breakdown=result.breakdown,
        compatibility=engine.classify_compatibility(result.overall),
    )


@router.post("/match/qualify", response_model=QualificationResponse)
async def qualify(body: PairRequest, engine: MatchingEngine = Depends(get_engine)):
    return QualificationResponse(
        candidate_id=body.candidate.id,
        listing_id=body.listing.id,
        is_qualified=engine.is_qualified(body.candidate, body.listing),
    )


@router.post("/match/skill-gap", response_model=SkillGapAnalysis)
async def skill_gap(body: PairRequest, engine: MatchingEngine = Depends(get_engine)):
    return engine.analyze_skill_gap(body.candidate, body.listing)


@router.get("/match/classify", response_model=ClassifyResponse)
async def classify(score: float = Query(..., ge=0.0, le=1.0), engine: MatchingEngine = Depends(get_engine)):
    return ClassifyResponse(score=score, compatibility=engine.classify_compatibility(score))


@router.post("/match/rank/candidates", response_model=RankingResponse)
@limiter.limit("60/minute")
async def rank_candidates(
    request: Request,
    body: RankCandidatesRequest,
    engine: MatchingEngine = Depends(get_engine),
):
    matches = engine.rank_candidates_for_job(body.listing, body.candidates, body.limit)
    return RankingResponse(matches=matches, total=len(body.candidates), returned=len(matches))


@router.post("/match/rank/listings", response_model=RankingResponse)
@limiter.limit("60/minute")
async def rank_listings(
    request: Request,
    body: RankListingsRequest,
    engine: MatchingEngine = Depends(get_engine),
):
    matches = engine.rank_listings_for_candidate(body.candidate, body.listings, body.limit)
    return RankingResponse(matches=matches, total=len(body.listings), returned=len(matches))


# ---------------------------------------------------------------------------
# Repository-backed matching: records are resolved by id
# ---------------------------------------------------------------------------

@router.get("/listings/{listing_id}/candidates", response_model=list[MatchResult])
@limiter.limit("60/minute")
async def listing_candidates(
    request: Request,
    listing_id: str,
    limit: int = Query(50, ge=1, le=100),
    min_score: float = Query(0.0, ge=0.0, le=1.0),
    status: ApplicantStatus = "all",
    service: MatchingService = Depends(get_matching_service),
):
    try:
        return service.match_candidates_to_listing(listing_id, limit, min_score, status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/candidates/{candidate_id}/recommendations", response_model=list[MatchResult])
@limiter.limit("60/minute")
async def candidate_recommendations(
    request: Request,
    candidate_id: str,
    limit: int = Query(settings.default_limit, ge=1, le=100),
    service: MatchingService = Depends(get_matching_service),
):
    try:
        return service.recommend_listings_for_candidate(candidate_id, limit)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/candidates/{candidate_id}/skill-gap/{listing_id}", response_model=SkillGapAnalysis)
async def candidate_skill_gap(
    candidate_id: str,
    listing_id: str,
    service: MatchingService = Depends(get_matching_service),
):
    try:
        return service.analyze_skill_gaps(candidate_id, listing_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/candidates/{candidate_id}/career-paths", response_model=CareerPathSuggestion)
async def candidate_career_paths(
    candidate_id: str,
    service: MatchingService = Depends(get_matching_service),
):
    try:
        return service.career_paths(candidate_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/universities/{university}/listings", response_model=UniversityListingsResponse)
async def university_listings(
    university: str,
    limit: int = Query(settings.university_limit, ge=1, le=100),
    service: MatchingService = Depends(get_matching_service),
):
    return UniversityListingsResponse(
        university=university,
        listings=service.university_listings(university, limit),
    )
