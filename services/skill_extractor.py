"""Vocabulary-driven skill extraction.

Combines:
1. Word-boundary matching against the injected skill vocabulary
   (skills and their aliases, resolved to canonical names)
2. Positional heuristic: items listed under a "skills" heading are taken
   as skills even when the vocabulary doesn't know them
"""

import logging
import re

from models.schemas.vocabulary import SkillVocabulary
from services.section_parser import parse_sections

logger = logging.getLogger(__name__)

# Item separators inside a listed skills section:
# "Python, JavaScript; React" / "Python | Go" / "• Docker • AWS" / "Git / GitHub"
_LIST_SPLIT_RE = re.compile(r"[,;|•·▪▸►◦‣]|\s/\s|\s&\s")

# Leading label on a skills line: "Languages: Python, Go"
_LABEL_RE = re.compile(r"^[A-Za-z][A-Za-z &/-]{1,30}:\s*")

# Parenthetical qualifiers: "Python (5 years)"
_PAREN_RE = re.compile(r"\([^)]*\)")

_MAX_LISTED_SKILL_WORDS = 4
_MAX_LISTED_SKILL_CHARS = 40


def _normalize_skill(skill: str) -> str:
    """Normalize a listed skill item, keeping its original casing."""
    skill = _PAREN_RE.sub("", skill)
    skill = skill.strip().lstrip("-–—*•").strip().rstrip(".,:;")
    return re.sub(r"\s+", " ", skill)


def extract_skills_pattern(text: str, vocabulary: SkillVocabulary) -> set[str]:
    """Find known skills anywhere in the text.

    Uses boundary-aware matching so "java" does not match inside
    "javascript" and "sql" does not match inside "mysql".
    """
    text_lower = text.lower()
    found: set[str] = set()

    for term in vocabulary.search_terms():
        escaped = re.escape(term)
        if re.search(rf"(?<![a-z0-9.#+]){escaped}(?![a-z0-9#+])", text_lower):
            found.add(vocabulary.canonical(term))

    return found


def extract_listed_skills(
    section_text: str, vocabulary: SkillVocabulary, known_only: bool = False
) -> set[str]:
    """Extract items from a skills section as skills.

    Known items resolve to their canonical name; unknown short items are
    kept as written unless ``known_only`` is set.
    """
    found: set[str] = set()
    for line in section_text.split("\n"):
        line = _LABEL_RE.sub("", line.strip())
        for item in _LIST_SPLIT_RE.split(line):
            item = _normalize_skill(item)
            if not item or item.isdigit():
                continue
            if len(item) > _MAX_LISTED_SKILL_CHARS or len(item.split()) > _MAX_LISTED_SKILL_WORDS:
                continue
            canonical = vocabulary.canonical(item)
            if canonical is None and known_only:
                continue
            found.add(canonical or item)
    return found


def dedupe_skills(skills: set[str], vocabulary: SkillVocabulary) -> set[str]:
    """Collapse skills that differ only by case or alias."""
    by_key: dict[str, str] = {}
    for skill in sorted(skills):
        by_key.setdefault(vocabulary.skill_key(skill), skill)
    return set(by_key.values())


def extract_skills_combined(
    text: str,
    vocabulary: SkillVocabulary,
    sections: dict[str, str] | None = None,
    known_only: bool = False,
) -> set[str]:
    """Extract all skills from text using vocabulary and section heuristics.

    Returns a deduplicated set of canonical skill names.
    """
    skills = extract_skills_pattern(text, vocabulary)

    if sections is None:
        sections = parse_sections(text)
    if sections.get("skills"):
        listed = extract_listed_skills(sections["skills"], vocabulary, known_only=known_only)
        logger.debug("Skills section listed %d items", len(listed))
        skills |= listed

    return dedupe_skills(skills, vocabulary)


def get_skill_gap(
    resume_skills: set[str], jd_skills: set[str], vocabulary: SkillVocabulary
) -> tuple[set[str], set[str]]:
    """Get matched and missing JD skills, comparing case-insensitively via aliases.

    Returns (matched_skills, missing_skills), both named as in ``jd_skills``.
    """
    resume_keys = {vocabulary.skill_key(s) for s in resume_skills}
    matched = {s for s in jd_skills if vocabulary.skill_key(s) in resume_keys}
    missing = jd_skills - matched
    return matched, missing
