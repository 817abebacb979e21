"""Tunable constants of the scoring and ranking heuristics."""

from pydantic import BaseModel

from models.schemas.parsed_job import ExperienceLevel


class ScoringPolicy(BaseModel):
    # Sub-score weights for the overall compatibility score
    keyword_weight: float = 0.4
    skills_weight: float = 0.3
    experience_weight: float = 0.2
    education_weight: float = 0.1

    # Experience entries a resume should list for each role level
    expected_experience: dict[ExperienceLevel, int] = {
        ExperienceLevel.ENTRY: 1,
        ExperienceLevel.MID: 3,
        ExperienceLevel.SENIOR: 5,
    }
    expected_education_entries: int = 3

    # Suggestion rules
    overqualified_factor: float = 2.0
    max_keywords_in_suggestion: int = 5


class RankingPolicy(BaseModel):
    location_boost: float = 0.2
    requirements_boost: float = 0.3
    default_top_n: int = 10
