"""Candidate profile snapshot consumed by the matching engine."""

from pydantic import BaseModel, ConfigDict, field_validator


class Qualifications(BaseModel):
    """Academic qualifications block of a candidate profile."""
    model_config = ConfigDict(frozen=True)

    subjects: list[str] | str | None = None  # list, or a comma-separated string
    portfolio: bool = False

    def subject_list(self) -> list[str]:
        """Normalize subjects to a list of trimmed strings."""
        if self.subjects is None:
            return []
        if isinstance(self.subjects, str):
            return [s.strip() for s in self.subjects.split(",") if s.strip()]
        return list(self.subjects)


class Candidate(BaseModel):
    """Read-only candidate record.

    ``year`` is the year of study: "1".."4" or "5+". Integers are coerced to
    their string form. ``gpa`` keeps malformed strings as-is so the
    qualification gate can reject them.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    skills: list[str] = []
    course: str = ""
    year: str | None = None
    university: str = ""
    gpa: float | str | None = None
    location: str = ""
    qualifications: Qualifications = Qualifications()
    is_active: bool = True
    profile_completed: bool = True

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)
