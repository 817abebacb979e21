import os
from pydantic_settings import BaseSettings

from models.policy import RankingPolicy, ScoringPolicy


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
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    rate_limit: str = "60/minute"

    # Input limits for the HTTP surface
    max_resume_chars: int = 50000
    max_job_description_chars: int = 10000

    # Text feature extraction
    skill_vocabulary_path: str = ""  # empty -> bundled services/data/skill_vocabulary.json
    domain_tfidf_top_n: int = 5  # 0 disables TF-IDF domain term discovery

    # Heuristic policies, overridable as e.g. SCORING__KEYWORD_WEIGHT=0.5
    scoring: ScoringPolicy = ScoringPolicy()
    ranking: RankingPolicy = RankingPolicy()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
