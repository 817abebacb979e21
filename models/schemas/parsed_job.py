"""Structured record extracted from a raw job description."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.parsed_resume import ParseStatus


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class ParsedJobDescription(BaseModel):
    """Skills and keywords a job description asks for.

    ``keywords`` always contains ``required_skills | preferred_skills``
    plus any domain terms recognized in the text.
    """
    raw_text: str = ""
    required_skills: set[str] = set()
    preferred_skills: set[str] = set()
    experience_level: ExperienceLevel = ExperienceLevel.ENTRY
    keywords: set[str] = set()
    status: ParseStatus = ParseStatus.COMPLETE
