from pydantic import BaseModel, Field

from models.schemas.profiles import CandidateProfile, JobPosting


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(..., description="Plain text resume content")
    job_description: str = Field(..., description="Job description text")
    resume_file_name: str = Field("", description="Original upload name, echoed into the saved-analysis payload")


class RecommendationRequest(BaseModel):
    candidate: CandidateProfile
    postings: list[JobPosting] = []
    top_n: int = Field(10, ge=1, le=100)
