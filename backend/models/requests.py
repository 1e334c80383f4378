from pydantic import BaseModel, Field

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing


class PairRequest(BaseModel):
    candidate: Candidate
    listing: Listing


class RankCandidatesRequest(BaseModel):
    listing: Listing
    candidates: list[Candidate] = Field(..., max_length=5000)
    limit: int = Field(10, ge=1, le=100)


class RankListingsRequest(BaseModel):
    candidate: Candidate
    listings: list[Listing] = Field(..., max_length=5000)
    limit: int = Field(10, ge=1, le=100)
