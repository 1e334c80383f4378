"""Static lookup tables and weights for the matching engine.

Tables are read-only mappings so components can share them safely; pass
a different mapping to a component to swap one out.
"""

import math
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, model_validator


class ScoreWeights(BaseModel):
    """Composite score weights. Must sum to 1.0."""
    model_config = ConfigDict(frozen=True)

    skills: float = 0.35
    education: float = 0.25
    university: float = 0.15
    experience: float = 0.15
    location: float = 0.10

    @model_validator(mode="after")
    def _check_sum(self) -> "ScoreWeights":
        total = sum(self.model_dump().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"score weights must sum to 1.0, got {total}")
        return self


DEFAULT_WEIGHTS = ScoreWeights()

# year of study -> listing type -> relevance
YEAR_RELEVANCE: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "1": MappingProxyType({"internship": 0.8, "part-time": 0.6, "full-time": 0.3}),
    "2": MappingProxyType({"internship": 0.9, "part-time": 0.7, "full-time": 0.4}),
    "3": MappingProxyType({"internship": 0.7, "part-time": 0.8, "full-time": 0.7}),
    "4": MappingProxyType({"internship": 0.5, "part-time": 0.6, "full-time": 0.9}),
    "5+": MappingProxyType({"internship": 0.3, "part-time": 0.4, "full-time": 1.0}),
})
DEFAULT_YEAR_RELEVANCE = 0.5

# Year of study used as a proxy for work experience
EXPERIENCE_PROXY: Mapping[str, float] = MappingProxyType({
    "1": 0.2, "2": 0.4, "3": 0.6, "4": 0.8, "5+": 1.0,
})
DEFAULT_EXPERIENCE = 0.5

# Year of study -> years of experience, compared against min_experience
EXPERIENCE_ORDINAL: Mapping[str, int] = MappingProxyType({
    "1": 0, "2": 1, "3": 2, "4": 3, "5+": 4,
})

SKILL_RESOURCES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "JavaScript": ("freeCodeCamp JavaScript Course", "MDN JavaScript Guide"),
    "Python": ("Python.org Tutorial", "Real Python Tutorials"),
    "React": ("React Official Tutorial", "FreeCodeCamp React Course"),
    "Node.js": ("Node.js Official Docs", "The Net Ninja Node.js Course"),
    "MongoDB": ("MongoDB University", "MongoDB Docs"),
    "SQL": ("SQLBolt", "Khan Academy SQL"),
    "Communication": ("Coursera Communication Skills", "Toastmasters"),
    "Problem Solving": ("HackerRank", "LeetCode"),
    "Teamwork": ("LinkedIn Learning Teamwork Course",),
})
GENERIC_RESOURCES: tuple[str, ...] = ("General online courses and practice",)

# Checked in order; the first key contained in the course name wins
COURSE_FIELDS: Mapping[str, str] = MappingProxyType({
    "Computer Science": "Computer Science",
    "Information Technology": "Computer Science",
    "Software Engineering": "Computer Science",
    "Business Administration": "Business Administration",
    "Accounting": "Business Administration",
    "Marketing": "Business Administration",
    "Mechanical Engineering": "Engineering",
    "Civil Engineering": "Engineering",
    "Electrical Engineering": "Engineering",
    "Nursing": "Healthcare",
    "Medicine": "Healthcare",
    "Pharmacy": "Healthcare",
    "Graphic Design": "Creative Arts",
    "Multimedia Design": "Creative Arts",
})
DEFAULT_FIELD = "General"

CAREER_PATHS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Computer Science": ("Software Developer", "Data Scientist", "Web Developer", "Systems Analyst"),
    "Business Administration": ("Business Analyst", "Project Manager", "Marketing Specialist", "HR Coordinator"),
    "Engineering": ("Mechanical Engineer", "Civil Engineer", "Electrical Engineer", "Project Engineer"),
    "Healthcare": ("Registered Nurse", "Medical Technician", "Healthcare Administrator", "Pharmaceutical Sales"),
    "Creative Arts": ("Graphic Designer", "Content Creator", "UX Designer", "Marketing Coordinator"),
})
DEFAULT_CAREER_PATHS: tuple[str, ...] = ("Various professional roles",)

FIELD_GROWTH_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Computer Science": ("Cloud Computing", "Machine Learning", "DevOps", "Cybersecurity"),
    "Business Administration": ("Data Analysis", "Digital Marketing", "Financial Modeling", "Leadership"),
    "Engineering": ("CAD Software", "Project Management", "Sustainable Design", "Technical Writing"),
    "Healthcare": ("Telemedicine", "Healthcare IT", "Patient Care Technology", "Medical Research"),
    "Creative Arts": ("Digital Marketing", "UI/UX Design", "Video Editing", "Social Media Management"),
})
