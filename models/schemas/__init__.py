"""Typed records passed between the extractor, scorer and ranker."""

from models.schemas.compatibility_score import CompatibilityScore
from models.schemas.keyword_analysis import KeywordAnalysis
from models.schemas.parsed_job import ExperienceLevel, ParsedJobDescription
from models.schemas.parsed_resume import ParsedResume, ParseStatus
from models.schemas.profiles import CandidateProfile, JobPosting
from models.schemas.recommendation import RankedRecommendation, SkippedPosting
from models.schemas.saved_analysis import SavedAnalysisRecord
from models.schemas.vocabulary import SkillVocabulary

__all__ = [
    "CandidateProfile",
    "CompatibilityScore",
    "ExperienceLevel",
    "JobPosting",
    "KeywordAnalysis",
    "ParseStatus",
    "ParsedJobDescription",
    "ParsedResume",
    "RankedRecommendation",
    "SavedAnalysisRecord",
    "SkillVocabulary",
    "SkippedPosting",
]
