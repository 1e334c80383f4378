"""Listing urgency from deadline proximity and promotion flags."""

import math
from datetime import datetime, timezone

from models.schemas.listing import Listing

BASE_URGENCY = 0.5
_SECONDS_PER_DAY = 24 * 60 * 60


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_until(deadline: datetime, now: datetime) -> int:
    """Whole days until the deadline, rounded up. Negative once passed."""
    delta = as_utc(deadline) - as_utc(now)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


class UrgencyCalculator:
    """Urgency in [0.5, 1.0].

    Deadline within 3 days adds 0.4, otherwise within 7 days adds 0.2.
    A passed deadline counts as within 3 days. The urgent flag adds 0.3
    and the featured flag 0.1.
    """

    def __init__(
        self,
        near_days: int = 3,
        near_bonus: float = 0.4,
        soon_days: int = 7,
        soon_bonus: float = 0.2,
        urgent_bonus: float = 0.3,
        featured_bonus: float = 0.1,
    ) -> None:
        self.near_days = near_days
        self.near_bonus = near_bonus
        self.soon_days = soon_days
        self.soon_bonus = soon_bonus
        self.urgent_bonus = urgent_bonus
        self.featured_bonus = featured_bonus

    def urgency(self, listing: Listing, now: datetime | None = None) -> float:
        now = now or datetime.now(timezone.utc)
        urgency = BASE_URGENCY

        if listing.application_deadline is not None:
            days = days_until(listing.application_deadline, now)
            if days <= self.near_days:
                urgency += self.near_bonus
            elif days <= self.soon_days:
                urgency += self.soon_bonus

        if listing.urgent:
            urgency += self.urgent_bonus
        if listing.featured:
            urgency += self.featured_bonus

        return min(1.0, urgency)
