"""Orchestrator: single resume / job description analysis.

Pipeline:
1. Text feature extraction (resume + JD -> structured records)
2. Keyword matching + suggestion rules
3. Weighted compatibility score
4. Keyword density, summary and saved-analysis payload for reporting
"""

import logging

from models.policy import ScoringPolicy
from models.responses import AnalysisResponse, SectionAnalysis
from models.schemas.vocabulary import SkillVocabulary
from services import ats_scorer, keyword_extractor
from services.feature_extractor import parse_job_description, parse_resume
from services.report import build_saved_analysis, build_summary
from services.vocabulary import get_default_vocabulary

logger = logging.getLogger(__name__)


def analyze(
    resume_text: str,
    job_description: str,
    vocabulary: SkillVocabulary | None = None,
    policy: ScoringPolicy | None = None,
    resume_file_name: str = "",
) -> AnalysisResponse:
    """Run the full analysis pipeline for one resume/JD pair."""
    if vocabulary is None:
        vocabulary = get_default_vocabulary()

    # --- Stage 1: Extraction ---
    resume = parse_resume(resume_text, vocabulary)
    job = parse_job_description(job_description, vocabulary)

    # --- Stage 2: Keyword matching ---
    keyword_analysis = ats_scorer.analyze_keywords(resume, job, vocabulary=vocabulary, policy=policy)

    # --- Stage 3: Scoring ---
    score = ats_scorer.calculate_ats_score(
        resume, job, keyword_analysis=keyword_analysis, vocabulary=vocabulary, policy=policy
    )

    # --- Stage 4: Reporting extras ---
    all_keywords = sorted(job.keywords, key=str.lower)
    keyword_density = keyword_extractor.compute_keyword_density(resume_text, all_keywords)

    logger.info(
        "Analysis complete: overall=%d, %d/%d keywords matched, resume=%s, jd=%s",
        score.overall,
        len(keyword_analysis.matched_keywords),
        len(job.keywords),
        resume.status.value,
        job.status.value,
    )

    return AnalysisResponse(
        score=score,
        keyword_analysis=keyword_analysis,
        keyword_density=keyword_density,
        summary=build_summary(score, keyword_analysis),
        resume_skills=sorted(resume.skills, key=str.lower),
        required_skills=sorted(job.required_skills, key=str.lower),
        preferred_skills=sorted(job.preferred_skills, key=str.lower),
        experience_level=job.experience_level,
        section_analysis=SectionAnalysis(
            detected_sections=resume.sections_found,
            experience_entries=len(resume.experience_entries),
            education_entries=len(resume.education_entries),
        ),
        resume_status=resume.status,
        job_description_status=job.status,
        vocabulary_version=vocabulary.version,
        saved_analysis=build_saved_analysis(
            score, keyword_analysis, job_description, resume_file_name=resume_file_name
        ),
    )
