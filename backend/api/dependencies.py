"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.matching.engine import MatchingEngine, build_engine
from services.matching_service import MatchingService
from services.repository import InMemoryRepository


@lru_cache
def get_engine() -> MatchingEngine:
    return build_engine(settings)


@lru_cache
def get_repository() -> InMemoryRepository:
    if settings.data_file:
        return InMemoryRepository.from_json_file(settings.data_file)
    return InMemoryRepository()


def get_matching_service() -> MatchingService:
    return MatchingService(get_repository(), get_engine())
