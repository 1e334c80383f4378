"""Career path and growth-area suggestions from a candidate's course."""

from typing import Mapping

from models.schemas.candidate import Candidate
from models.schemas.skill_gap import CareerPathSuggestion
from services.matching import tables


class CareerPathAdvisor:
    def __init__(
        self,
        course_fields: Mapping[str, str] = tables.COURSE_FIELDS,
        career_paths: Mapping[str, tuple[str, ...]] = tables.CAREER_PATHS,
        growth_skills: Mapping[str, tuple[str, ...]] = tables.FIELD_GROWTH_SKILLS,
    ) -> None:
        self.course_fields = course_fields
        self.career_paths = career_paths
        self.growth_skills = growth_skills

    def field_for_course(self, course: str) -> str:
        for key, field in self.course_fields.items():
            if course and key in course:
                return field
        return tables.DEFAULT_FIELD

    def suggest(self, candidate: Candidate) -> CareerPathSuggestion:
        field = self.field_for_course(candidate.course)
        paths = self.career_paths.get(field, tables.DEFAULT_CAREER_PATHS)
        owned = set(candidate.skills)
        growth = [s for s in self.growth_skills.get(field, ()) if s not in owned]
        return CareerPathSuggestion(
            field=field,
            suggested_paths=list(paths),
            growth_areas=growth,
        )
