"""Structured record extracted from raw resume text."""

from enum import Enum

from pydantic import BaseModel


class ParseStatus(str, Enum):
    """How much structure the extractor recovered from its input.

    Extraction never raises on bad text; a sparse or empty result is
    reported here instead so callers can branch on it explicitly.
    """
    COMPLETE = "complete"
    SPARSE = "sparse"  # text present, but nothing recognizable
    EMPTY = "empty"  # blank input


class ParsedResume(BaseModel):
    raw_text: str = ""
    skills: set[str] = set()
    experience_entries: list[str] = []
    education_entries: list[str] = []
    sections_found: list[str] = []
    status: ParseStatus = ParseStatus.COMPLETE
