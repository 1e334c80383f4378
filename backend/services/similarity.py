"""Jaro-Winkler string similarity for fuzzy skill-name matching.

Skill names are compared lexically, so "Node.js" and "nodejs" score high
while topically related terms only score high if they share characters
and a prefix. Callers pass the candidate's skill first and the listing's
skill second; the prefix boost makes the metric slightly order-sensitive.
"""

from rapidfuzz.distance import JaroWinkler

# Skill strings scoring above this are treated as the same skill
DEFAULT_THRESHOLD = 0.7

_PREFIX_WEIGHT = 0.1


def skill_similarity(candidate_skill: str, listing_skill: str) -> float:
    """Case-insensitive Jaro-Winkler similarity of two skill names, in [0, 1]."""
    return JaroWinkler.similarity(
        candidate_skill.casefold(),
        listing_skill.casefold(),
        prefix_weight=_PREFIX_WEIGHT,
    )


def skills_match(
    candidate_skill: str,
    listing_skill: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> bool:
    """True if the two skill names denote the same skill."""
    return skill_similarity(candidate_skill, listing_skill) > threshold
