"""Read-only data access for candidates and listings.

The matching engine never fetches data itself; callers resolve records
through a MatchingRepository and hand the snapshots to the engine.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Protocol

from models.schemas.candidate import Candidate
from models.schemas.listing import Listing
from services.matching.urgency import as_utc

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """A candidate or listing id did not resolve."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class MatchingRepository(Protocol):
    def get_candidate(self, candidate_id: str) -> Candidate: ...

    def get_listing(self, listing_id: str) -> Listing: ...

    def list_active_candidates(self) -> list[Candidate]: ...

    def list_active_listings(self, now: datetime | None = None) -> list[Listing]: ...


class InMemoryRepository:
    """Dict-backed repository, optionally seeded from a JSON file."""

    def __init__(
        self,
        candidates: Iterable[Candidate] = (),
        listings: Iterable[Listing] = (),
    ) -> None:
        self._candidates = {c.id: c for c in candidates}
        self._listings = {l.id: l for l in listings}

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryRepository":
        """Load ``{"candidates": [...], "listings": [...]}`` from disk."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        repo = cls(
            candidates=[Candidate.model_validate(c) for c in raw.get("candidates", [])],
            listings=[Listing.model_validate(l) for l in raw.get("listings", [])],
        )
        logger.info(
            "Loaded %d candidates and %d listings from %s",
            len(repo._candidates), len(repo._listings), path,
        )
        return repo

    def get_candidate(self, candidate_id: str) -> Candidate:
        try:
            return self._candidates[candidate_id]
        except KeyError:
            raise NotFoundError("Candidate", candidate_id) from None

    def get_listing(self, listing_id: str) -> Listing:
        try:
            return self._listings[listing_id]
        except KeyError:
            raise NotFoundError("Listing", listing_id) from None

    def list_active_candidates(self) -> list[Candidate]:
        return [c for c in self._candidates.values() if c.is_active and c.profile_completed]

    def list_active_listings(self, now: datetime | None = None) -> list[Listing]:
        now = now or datetime.now(timezone.utc)
        return [
            l for l in self._listings.values()
            if l.status == "active" and (
                l.application_deadline is None or as_utc(l.application_deadline) > as_utc(now)
            )
        ]
