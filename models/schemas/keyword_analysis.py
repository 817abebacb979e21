"""Keyword coverage of a resume against a job description."""

from pydantic import BaseModel, Field


class KeywordAnalysis(BaseModel):
    overall_keyword_score: int = Field(default=0, ge=0, le=100)
    matched_keywords: set[str] = set()
    missing_keywords: set[str] = set()
    suggestions: list[str] = []  # in rule-definition order
