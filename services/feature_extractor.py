"""Text feature extraction: raw resume / JD text -> structured records.

Both entry points are total over strings. Text with no recognizable
structure yields empty collections and a SPARSE or EMPTY status, never an
exception. Passing None is a caller bug and raises TypeError.
"""

import logging
import re

from config import settings
from models.schemas.parsed_job import ParsedJobDescription
from models.schemas.parsed_resume import ParsedResume, ParseStatus
from models.schemas.vocabulary import SkillVocabulary
from services import keyword_extractor
from services.section_parser import (
    classify_experience_level,
    extract_education_entries,
    extract_experience_entries,
    parse_sections,
)
from services.skill_extractor import extract_skills_combined, extract_skills_pattern
from services.vocabulary import get_default_vocabulary

logger = logging.getLogger(__name__)


def _require_text(value: str, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must be a string, got None")


def parse_resume(raw_text: str, vocabulary: SkillVocabulary | None = None) -> ParsedResume:
    """Extract skills, experience entries and education entries from a resume."""
    _require_text(raw_text, "raw_text")
    if not raw_text.strip():
        return ParsedResume(raw_text=raw_text, status=ParseStatus.EMPTY)

    if vocabulary is None:
        vocabulary = get_default_vocabulary()
    sections = parse_sections(raw_text)

    skills = extract_skills_combined(raw_text, vocabulary, sections=sections)
    experience = extract_experience_entries(raw_text, sections)
    education = extract_education_entries(raw_text, sections)

    status = ParseStatus.COMPLETE
    if not (skills or experience or education):
        logger.warning("No recognizable structure in resume text (%d chars)", len(raw_text))
        status = ParseStatus.SPARSE

    logger.debug(
        "Parsed resume: %d skills, %d experience entries, %d education entries",
        len(skills), len(experience), len(education),
    )
    return ParsedResume(
        raw_text=raw_text,
        skills=skills,
        experience_entries=experience,
        education_entries=education,
        sections_found=sorted(name for name in sections if name != "header"),
        status=status,
    )


def _skills_mentioned(text: str, skills: set[str], vocabulary: SkillVocabulary) -> set[str]:
    """The subset of ``skills`` that ``text`` mentions."""
    if not text:
        return set()
    found_keys = {vocabulary.skill_key(s) for s in extract_skills_pattern(text, vocabulary)}
    return {s for s in skills if vocabulary.skill_key(s) in found_keys}


def _token_set(terms: set[str]) -> set[str]:
    tokens: set[str] = set()
    for term in terms:
        tokens.update(t for t in re.split(r"[^a-z0-9]+", term.lower()) if t)
    return tokens


def parse_job_description(
    raw_text: str,
    vocabulary: SkillVocabulary | None = None,
    tfidf_top_n: int | None = None,
) -> ParsedJobDescription:
    """Extract required/preferred skills, seniority and keywords from a JD.

    Skills near a "preferred"/"nice to have" marker are preferred; all
    others are required. Without any markers every skill is required.
    """
    _require_text(raw_text, "raw_text")
    if not raw_text.strip():
        return ParsedJobDescription(raw_text=raw_text, status=ParseStatus.EMPTY)

    if vocabulary is None:
        vocabulary = get_default_vocabulary()
    if tfidf_top_n is None:
        tfidf_top_n = settings.domain_tfidf_top_n

    all_skills = extract_skills_combined(raw_text, vocabulary, known_only=True)
    required_text, preferred_text, general_text = (
        keyword_extractor.extract_jd_priority_sections(raw_text)
    )

    if required_text or preferred_text:
        elsewhere = _skills_mentioned(f"{required_text}\n{general_text}", all_skills, vocabulary)
        preferred = _skills_mentioned(preferred_text, all_skills, vocabulary) - elsewhere
    else:
        preferred = set()
    required = all_skills - preferred

    domain_terms = keyword_extractor.extract_domain_terms(raw_text, vocabulary)
    extra_terms = keyword_extractor.extract_keywords_tfidf(
        raw_text,
        top_n=tfidf_top_n,
        exclude=_token_set(all_skills | domain_terms),
    )

    keywords = required | preferred | domain_terms | set(extra_terms)
    status = ParseStatus.COMPLETE if keywords else ParseStatus.SPARSE
    if status is ParseStatus.SPARSE:
        logger.warning("No keywords recognized in job description (%d chars)", len(raw_text))

    return ParsedJobDescription(
        raw_text=raw_text,
        required_skills=required,
        preferred_skills=preferred,
        experience_level=classify_experience_level(raw_text),
        keywords=keywords,
        status=status,
    )
