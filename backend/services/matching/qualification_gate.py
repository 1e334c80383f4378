"""Hard pass/fail eligibility check, independent of the numeric score.

A rule applies only when the listing's requirements impose it. If the
candidate lacks the data the rule needs, the ``on_missing_data`` policy
decides: "pass" skips the rule, "fail" rejects the candidate.

Two rules ignore the policy:
    - min GPA fails on a malformed GPA on either side (fail-closed)
    - a required portfolio fails any candidate without one
"""

import logging
import math
from typing import Literal, Mapping

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing, ListingRequirements
from services.matching import tables
from services.matching.score_calculator import is_significant_keyword, split_keywords

logger = logging.getLogger(__name__)

MissingDataPolicy = Literal["pass", "fail"]

# Rule outcomes
_PASS = "pass"
_FAIL = "fail"
_MISSING = "missing"
_SKIP = "skip"  # listing does not impose the rule


def _parse_float(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _parse_int(value) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _present(value) -> bool:
    return value is not None and value != ""


class QualificationGate:
    def __init__(
        self,
        on_missing_data: MissingDataPolicy = "pass",
        experience_ordinal: Mapping[str, int] = tables.EXPERIENCE_ORDINAL,
    ) -> None:
        if on_missing_data not in ("pass", "fail"):
            raise ValueError(f"on_missing_data must be 'pass' or 'fail', got {on_missing_data!r}")
        self.on_missing_data = on_missing_data
        self.experience_ordinal = experience_ordinal

    def is_qualified(self, candidate: Candidate | None, listing: Listing) -> bool:
        if candidate is None or listing.requirements is None:
            return False

        reqs = listing.requirements
        rules = (
            ("min_gpa", self._check_gpa),
            ("qualifications", self._check_qualifications),
            ("course", self._check_course),
            ("experience", self._check_experience),
            ("portfolio", self._check_portfolio),
        )
        for name, rule in rules:
            outcome = rule(candidate, reqs)
            if outcome == _FAIL or (outcome == _MISSING and self.on_missing_data == "fail"):
                logger.debug(
                    "Candidate %s not qualified for listing %s: %s rule (%s)",
                    candidate.id, listing.id, name, outcome,
                )
                return False
        return True

    def _check_gpa(self, candidate: Candidate, reqs: ListingRequirements) -> str:
        if not _present(reqs.min_gpa):
            return _SKIP
        if not _present(candidate.gpa):
            return _MISSING
        candidate_gpa = _parse_float(candidate.gpa)
        required_gpa = _parse_float(reqs.min_gpa)
        if math.isnan(candidate_gpa) or math.isnan(required_gpa) or candidate_gpa < required_gpa:
            return _FAIL
        return _PASS

    def _check_qualifications(self, candidate: Candidate, reqs: ListingRequirements) -> str:
        if not reqs.required_qualifications:
            return _SKIP
        subjects = [s.lower() for s in candidate.qualifications.subject_list()]
        if not subjects:
            return _MISSING
        for required in reqs.required_qualifications:
            needle = required.lower()
            if not any(needle in subject for subject in subjects):
                return _FAIL
        return _PASS

    def _check_course(self, candidate: Candidate, reqs: ListingRequirements) -> str:
        if not reqs.course_keyword_text:
            return _SKIP
        if not candidate.course:
            return _MISSING
        course = candidate.course.lower()
        if any(
            is_significant_keyword(kw) and kw in course
            for kw in split_keywords(reqs.course_keyword_text)
        ):
            return _PASS
        return _FAIL

    def _check_experience(self, candidate: Candidate, reqs: ListingRequirements) -> str:
        if not _present(reqs.min_experience):
            return _SKIP
        required = _parse_int(reqs.min_experience)
        ordinal = self.experience_ordinal.get(candidate.year) if candidate.year else None
        if required is None or ordinal is None:
            return _MISSING
        return _PASS if ordinal >= required else _FAIL

    def _check_portfolio(self, candidate: Candidate, reqs: ListingRequirements) -> str:
        if not reqs.portfolio_required:
            return _SKIP
        return _PASS if candidate.qualifications.portfolio else _FAIL
