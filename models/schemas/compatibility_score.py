"""Weighted resume/job compatibility breakdown."""

from pydantic import BaseModel, Field


class CompatibilityScore(BaseModel):
    """All fields are integers clamped to 0-100."""
    overall: int = Field(default=0, ge=0, le=100)
    keyword_match: int = Field(default=0, ge=0, le=100)
    skills_match: int = Field(default=0, ge=0, le=100)
    experience_match: int = Field(default=0, ge=0, le=100)
    education_match: int = Field(default=0, ge=0, le=100)
