"""Listing (opportunity) snapshot consumed by the matching engine."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ListingType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    REMOTE = "remote"
    FREELANCE = "freelance"


class ListingRequirements(BaseModel):
    """Hard eligibility requirements checked by the qualification gate.

    Every field is optional; a rule only applies when the listing sets it.
    """
    model_config = ConfigDict(frozen=True)

    min_gpa: float | str | None = None
    required_qualifications: list[str] = []
    course_keyword_text: str | None = None  # e.g. "Computer Science / Software Engineering"
    min_experience: int | str | None = None  # ordinal, see EXPERIENCE_ORDINAL
    portfolio_required: bool = False


class Listing(BaseModel):
    """Read-only listing record."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    company: str = ""
    required_skills: list[str] = []
    preferred_universities: list[str] = []  # empty = no preference
    description: str = ""
    requirements_text: str = ""
    category: ListingType = ListingType.FULL_TIME
    location: str = ""
    application_deadline: datetime | None = None
    urgent: bool = False
    featured: bool = False
    requirements: ListingRequirements | None = None
    status: str = "active"
    created_at: datetime | None = None
