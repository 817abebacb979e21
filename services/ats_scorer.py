"""Keyword matching and ATS compatibility scoring.

Pure functions: identical inputs always give identical outputs. Every
score is an integer in 0-100. Rounding is half-up (66.5 -> 67), not
Python's round-half-even.
"""

import logging
import math

from config import settings
from models.policy import ScoringPolicy
from models.schemas.compatibility_score import CompatibilityScore
from models.schemas.keyword_analysis import KeywordAnalysis
from models.schemas.parsed_job import ParsedJobDescription
from models.schemas.parsed_resume import ParsedResume
from models.schemas.vocabulary import SkillVocabulary
from services.keyword_extractor import match_keywords
from services.skill_extractor import get_skill_gap
from services.suggestions import SuggestionContext, build_suggestions
from services.vocabulary import get_default_vocabulary

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_score(value: int) -> int:
    return max(0, min(100, value))


def _percent(numerator: int, denominator: int) -> int:
    return clamp_score(round_half_up(100 * numerator / denominator))


def compute_keyword_score(matched: int, total: int) -> int:
    """Share of JD keywords found; 100 when the JD has no keywords."""
    if total == 0:
        return 100
    return _percent(matched, total)


def _check_inputs(resume: ParsedResume, job: ParsedJobDescription) -> None:
    if resume is None or job is None:
        raise TypeError("resume and job description records are required")


def analyze_keywords(
    resume: ParsedResume,
    job: ParsedJobDescription,
    vocabulary: SkillVocabulary | None = None,
    policy: ScoringPolicy | None = None,
) -> KeywordAnalysis:
    """Match JD keywords against the resume and derive suggestions."""
    _check_inputs(resume, job)
    if vocabulary is None:
        vocabulary = get_default_vocabulary()
    policy = policy or settings.scoring

    matched, missing = match_keywords(resume.raw_text, resume.skills, job.keywords, vocabulary)
    suggestions = build_suggestions(SuggestionContext(
        resume=resume,
        job=job,
        missing_keywords=missing,
        vocabulary=vocabulary,
        policy=policy,
    ))

    return KeywordAnalysis(
        overall_keyword_score=compute_keyword_score(len(matched), len(job.keywords)),
        matched_keywords=matched,
        missing_keywords=missing,
        suggestions=suggestions,
    )


def compute_skills_match(
    resume: ParsedResume, job: ParsedJobDescription, vocabulary: SkillVocabulary
) -> int:
    """Share of required skills on the resume; 0 when none are required."""
    if not job.required_skills:
        return 0
    matched, _ = get_skill_gap(resume.skills, job.required_skills, vocabulary)
    return _percent(len(matched), len(job.required_skills))


def compute_experience_match(
    resume: ParsedResume, job: ParsedJobDescription, policy: ScoringPolicy
) -> int:
    expected = policy.expected_experience.get(job.experience_level, 1)
    if expected <= 0:
        return 100
    return _percent(len(resume.experience_entries), expected)


def compute_education_match(resume: ParsedResume, policy: ScoringPolicy) -> int:
    if policy.expected_education_entries <= 0:
        return 100
    return _percent(len(resume.education_entries), policy.expected_education_entries)


def calculate_ats_score(
    resume: ParsedResume,
    job: ParsedJobDescription,
    keyword_analysis: KeywordAnalysis | None = None,
    vocabulary: SkillVocabulary | None = None,
    policy: ScoringPolicy | None = None,
) -> CompatibilityScore:
    """Compute the weighted compatibility breakdown.

    ``keyword_analysis`` may be passed in to avoid matching keywords twice.
    """
    _check_inputs(resume, job)
    if vocabulary is None:
        vocabulary = get_default_vocabulary()
    policy = policy or settings.scoring
    if keyword_analysis is None:
        keyword_analysis = analyze_keywords(resume, job, vocabulary=vocabulary, policy=policy)

    keyword_match = clamp_score(keyword_analysis.overall_keyword_score)
    skills_match = compute_skills_match(resume, job, vocabulary)
    experience_match = compute_experience_match(resume, job, policy)
    education_match = compute_education_match(resume, policy)

    overall = clamp_score(round_half_up(
        policy.keyword_weight * keyword_match
        + policy.skills_weight * skills_match
        + policy.experience_weight * experience_match
        + policy.education_weight * education_match
    ))

    logger.debug(
        "ATS score %d (keywords=%d skills=%d experience=%d education=%d)",
        overall, keyword_match, skills_match, experience_match, education_match,
    )
    return CompatibilityScore(
        overall=overall,
        keyword_match=keyword_match,
        skills_match=skills_match,
        experience_match=experience_match,
        education_match=education_match,
    )
