"""Payload handed to the saved-analysis persistence service."""

from pydantic import BaseModel


class SavedAnalysisRecord(BaseModel):
    resume_file_name: str = ""
    job_description: str = ""
    score: int = 0
    keyword_matches: list[str] = []
    missing_keywords: list[str] = []
    suggestions: list[str] = []
