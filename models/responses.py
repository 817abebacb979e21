from pydantic import BaseModel

from models.schemas.compatibility_score import CompatibilityScore
from models.schemas.keyword_analysis import KeywordAnalysis
from models.schemas.parsed_job import ExperienceLevel
from models.schemas.parsed_resume import ParseStatus
from models.schemas.recommendation import RankedRecommendation, SkippedPosting
from models.schemas.saved_analysis import SavedAnalysisRecord


class SectionAnalysis(BaseModel):
    detected_sections: list[str] = []
    experience_entries: int = 0
    education_entries: int = 0


class AnalysisResponse(BaseModel):
    score: CompatibilityScore = CompatibilityScore()
    keyword_analysis: KeywordAnalysis = KeywordAnalysis()
    keyword_density: dict[str, float] = {}
    summary: str = ""
    # Extraction transparency fields
    resume_skills: list[str] = []
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    experience_level: ExperienceLevel = ExperienceLevel.ENTRY
    section_analysis: SectionAnalysis = SectionAnalysis()
    resume_status: ParseStatus = ParseStatus.COMPLETE
    job_description_status: ParseStatus = ParseStatus.COMPLETE
    vocabulary_version: str = ""
    saved_analysis: SavedAnalysisRecord = SavedAnalysisRecord()


class ReportResponse(BaseModel):
    report: str
    saved_analysis: SavedAnalysisRecord = SavedAnalysisRecord()


class RecommendationResponse(BaseModel):
    recommendations: list[RankedRecommendation] = []
    skipped: list[SkippedPosting] = []
