import os
from typing import Literal

from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Matching engine settings
    similarity_threshold: float = 0.7  # Jaro-Winkler score above which two skills are "the same"
    candidate_min_score: float = 0.3  # rank_candidates_for_job keeps overall > this
    listing_min_score: float = 0.4  # rank_listings_for_candidate keeps overall > this
    urgency_weight: float = 0.1  # listing sort key = overall + urgency * weight
    default_limit: int = 10
    university_limit: int = 5
    on_missing_data: Literal["pass", "fail"] = "pass"  # qualification gate policy

    # Optional JSON seed for the in-memory repository
    data_file: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
