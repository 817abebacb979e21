"""Candidate and job posting records owned by the external document store."""

from pydantic import BaseModel


class CandidateProfile(BaseModel):
    id: str
    embedding: list[float] | None = None  # None until the embedding job has run
    location: str = ""
    skills_text: str = ""
    education_text: str = ""


class JobPosting(BaseModel):
    id: str
    embedding: list[float] | None = None
    location: str = ""
    requirements_text: str = ""
