"""Rule-template improvement suggestions.

Each rule inspects one gap between a resume and a job description and
returns a single suggestion or None. Rules are independent; output keeps
rule-definition order.
"""

import re
from dataclasses import dataclass

from models.policy import ScoringPolicy
from models.schemas.parsed_job import ExperienceLevel, ParsedJobDescription
from models.schemas.parsed_resume import ParsedResume
from models.schemas.vocabulary import SkillVocabulary
from services.section_parser import DATE_RANGE_RE
from services.skill_extractor import get_skill_gap

_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_DIGIT_RE = re.compile(r"\d")


@dataclass(frozen=True)
class SuggestionContext:
    resume: ParsedResume
    job: ParsedJobDescription
    missing_keywords: set[str]
    vocabulary: SkillVocabulary
    policy: ScoringPolicy


def has_quantified_result(entry: str) -> bool:
    """True if an entry contains a number other than its dates."""
    text = DATE_RANGE_RE.sub(" ", entry)
    text = _YEAR_RE.sub(" ", text)
    return bool(_DIGIT_RE.search(text))


def _top(terms: set[str], limit: int) -> list[str]:
    return sorted(terms, key=str.lower)[:limit]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def _missing_keywords_rule(ctx: SuggestionContext) -> str | None:
    if not ctx.missing_keywords:
        return None
    top = _top(ctx.missing_keywords, ctx.policy.max_keywords_in_suggestion)
    return f"Add these keywords from the job description where they apply to you: {', '.join(top)}"


def _quantify_rule(ctx: SuggestionContext) -> str | None:
    entries = ctx.resume.experience_entries
    if not entries:
        return None
    quantified = sum(1 for entry in entries if has_quantified_result(entry))
    if quantified * 2 >= len(entries):
        return None
    return (
        "Quantify your achievements with concrete numbers "
        '(e.g. "cut page load time by 40%" or "served 2M monthly users")'
    )


def _soft_skills_rule(ctx: SuggestionContext) -> str | None:
    text = ctx.resume.raw_text.lower()
    if any(term.lower() in text for term in ctx.vocabulary.soft_skills):
        return None
    return "Mention communication and teamwork skills, e.g. collaborating with stakeholders or cross-functional teams"


def _overqualified_rule(ctx: SuggestionContext) -> str | None:
    level = ctx.job.experience_level
    if level is ExperienceLevel.SENIOR:
        return None
    expected = ctx.policy.expected_experience.get(level, 1)
    if len(ctx.resume.experience_entries) <= ctx.policy.overqualified_factor * expected:
        return None
    return (
        f"Your experience substantially exceeds this {level.value}-level role. "
        "Trim older positions and explain your interest in the summary to avoid reading as overqualified"
    )


def _education_rule(ctx: SuggestionContext) -> str | None:
    if ctx.resume.education_entries:
        return None
    return "Add an education section with your degree, institution and graduation year"


def _skills_section_rule(ctx: SuggestionContext) -> str | None:
    if "skills" in ctx.resume.sections_found:
        return None
    _, missing_required = get_skill_gap(ctx.resume.skills, ctx.job.required_skills, ctx.vocabulary)
    if not missing_required:
        return None
    top = _top(missing_required, ctx.policy.max_keywords_in_suggestion)
    return f"Add a dedicated skills section listing the required skills you have, such as: {', '.join(top)}"


SUGGESTION_RULES = (
    _missing_keywords_rule,
    _quantify_rule,
    _soft_skills_rule,
    _overqualified_rule,
    _education_rule,
    _skills_section_rule,
)


def build_suggestions(ctx: SuggestionContext) -> list[str]:
    """Run every rule in order and collect the suggestions they produce."""
    suggestions: list[str] = []
    for rule in SUGGESTION_RULES:
        suggestion = rule(ctx)
        if suggestion:
            suggestions.append(suggestion)
    return suggestions
