"""Keyword extraction and matching for resume-JD analysis.

Splits job descriptions into required / preferred / general text,
recognizes domain terms from the vocabulary, optionally discovers extra
distinctive terms with TF-IDF, and matches keywords against resumes.
"""

import logging
import re
from collections import Counter

from models.schemas.vocabulary import SkillVocabulary
from services.similarity import extract_tfidf_keywords

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# JD boilerplate filtering: non-technical terms TF-IDF often picks up
# These are common in job descriptions but NOT job requirements/skills
# ---------------------------------------------------------------------------
JD_STOPWORDS: frozenset[str] = frozenset({
    # Company / HR boilerplate
    "opportunity", "opportunities", "position", "positions", "role", "roles",
    "candidate", "candidates", "applicant", "applicants", "application",
    "applications", "employment", "employer", "employee", "employees",
    "company", "organization", "team", "teams", "department",
    # Compensation & benefits
    "compensation", "salary", "benefits", "bonus", "bonuses", "equity",
    "insurance", "pto", "vacation", "retirement",
    "medical", "dental", "vision",
    # Legal / EEO / privacy
    "privacy", "notice", "policy", "policies",
    "equal", "discrimination", "disability", "veteran", "race", "color",
    "religion", "sex", "gender", "orientation", "national", "origin", "age",
    "genetic", "genetics", "protected", "status", "regard",
    "eeo", "affirmative", "accommodation", "accessible",
    # Generic JD filler
    "facing", "range", "related", "including",
    "based", "preferred", "required", "minimum", "maximum",
    "experience", "qualified", "qualification", "qualifications",
    "responsible", "responsibilities", "requirement", "requirements",
    "description", "overview", "summary", "mission",
    "proud", "committed", "dedicated", "passionate", "exciting",
    "thriving", "innovative", "dynamic", "diverse", "inclusive",
    "competitive", "exceptional", "flexible", "remote", "hybrid",
    "onsite", "location", "office", "looking", "seeking", "hiring",
    "ideal", "ability", "plus", "nice", "familiarity", "knowledge",
    "understanding", "proficiency", "proven", "hands-on", "etc",
    # Generic action words that aren't skills
    "deliver", "manage", "create", "build", "develop", "maintain",
    "implement", "design", "support", "ensure", "provide", "engage",
    "communicate", "collaborate", "utilize", "leverage",
    "connect", "serve", "help", "join", "apply", "submit",
    "building", "developing", "designing", "working",
    # Common words that sneak through TF-IDF
    "job", "work", "workers", "career", "careers",
    "people", "person", "individual", "individuals",
    "year", "years", "day", "days", "time",
    "great", "best", "good", "strong", "key", "core",
    "new", "first", "well", "also", "part",
    "full", "level", "senior", "junior", "mid", "staff",
    "engineer", "engineers", "developer", "developers",
    "information", "data",
})

# ---------------------------------------------------------------------------
# JD section headers that indicate boilerplate (not requirements)
# Text under these headings is stripped before TF-IDF term discovery
# ---------------------------------------------------------------------------
_JD_BOILERPLATE_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"(?:^|\n)\s*(?:"
        r"(?:as\s+part\s+of\s+(?:our|the)\s+team|what\s+we\s+offer|"
        r"(?:our|the)\s+(?:benefits|perks|compensation)|"
        r"(?:salary|pay|compensation)\s+(?:range|information)|"
        r"equal\s+(?:opportunity|employment)|"
        r"privacy\s+(?:notice|policy)|"
        r"eeo\s+statement|"
        r"about\s+(?:us|the\s+company|our\s+mission)|"
        r"(?:our|the)\s+mission|"
        r"who\s+we\s+are)"
        r")",
        re.IGNORECASE | re.MULTILINE,
    ),
]

# ---------------------------------------------------------------------------
# Required / preferred markers
# A marker heading opens a block that runs until the next heading; an
# inline phrase ("... is a plus") only tags its own line.
# ---------------------------------------------------------------------------
_HEADING_END = r"\s*(?::\s*(.*)|$)"

_PREFERRED_MARKER_RE = re.compile(
    r"^[#*\-•\s]*(?:"
    r"preferred(?:\s+(?:skills|qualifications|experience))?|"
    r"nice[\s-]to[\s-]haves?|good[\s-]to[\s-]have|"
    r"bonus(?:\s+points)?|pluses|desired(?:\s+skills)?"
    rf"){_HEADING_END}",
    re.IGNORECASE,
)
_REQUIRED_MARKER_RE = re.compile(
    r"^[#*\-•\s]*(?:"
    r"(?:minimum\s+|basic\s+)?qualifications|"
    r"required(?:\s+(?:skills|qualifications|experience))?|"
    r"requirements|must[\s-]haves?|what\s+you(?:'ll)?\s+need"
    rf"){_HEADING_END}",
    re.IGNORECASE,
)
# Any other short "Heading:" line closes the current block
_GENERIC_HEADING_RE = re.compile(r"^[#*\s]*[A-Za-z][A-Za-z '&/-]{1,40}:\s*$")

_INLINE_PREFERRED_RE = re.compile(
    r"\b(?:preferred|nice[\s-]to[\s-]have|a\s+plus|bonus|desirable)\b", re.IGNORECASE
)
_INLINE_REQUIRED_RE = re.compile(r"\b(?:required|must[\s-]have|mandatory)\b", re.IGNORECASE)


def _extract_relevant_jd_sections(job_description: str) -> str:
    """Extract only the relevant sections from a job description.

    Strips boilerplate: benefits, EEO statements, privacy notices, company info.
    Keeps: responsibilities, requirements, qualifications, technical details.
    """
    text = job_description

    # Find the earliest boilerplate section and truncate there
    # This handles the common pattern where requirements come first, then boilerplate
    earliest_boilerplate = len(text)
    for pattern in _JD_BOILERPLATE_PATTERNS:
        match = pattern.search(text)
        if match:
            earliest_boilerplate = min(earliest_boilerplate, match.start())

    # Only truncate if we found boilerplate and there's meaningful content before it
    if earliest_boilerplate > 50 and earliest_boilerplate < len(text):
        text = text[:earliest_boilerplate]

    return text.strip()


def _is_technical_term(term: str) -> bool:
    """Check if a single-word TF-IDF term is likely a job-relevant keyword."""
    word = term.lower()
    return word not in JD_STOPWORDS and len(word) > 1


def extract_jd_priority_sections(job_description: str) -> tuple[str, str, str]:
    """Split a job description into (required, preferred, general) text.

    Lines under a "Requirements"/"Qualifications" heading are required,
    lines under "Preferred"/"Nice to have" are preferred, and everything
    else is general. A line with an inline marker ("Kafka is a plus")
    goes to that marker's bucket regardless of the current heading.
    """
    buckets: dict[str, list[str]] = {"required": [], "preferred": [], "general": []}
    mode = "general"

    for line in job_description.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue

        marker = _PREFERRED_MARKER_RE.match(stripped)
        if marker:
            mode = "preferred"
        else:
            marker = _REQUIRED_MARKER_RE.match(stripped)
            if marker:
                mode = "required"
        if marker:
            rest = (marker.group(1) or "").strip()
            if rest:
                buckets[mode].append(rest)
            continue

        if _GENERIC_HEADING_RE.match(stripped):
            mode = "general"
            continue

        line_mode = mode
        if _INLINE_PREFERRED_RE.search(stripped):
            line_mode = "preferred"
        elif _INLINE_REQUIRED_RE.search(stripped):
            line_mode = "required"
        buckets[line_mode].append(stripped)

    return (
        "\n".join(buckets["required"]),
        "\n".join(buckets["preferred"]),
        "\n".join(buckets["general"]),
    )


def extract_domain_terms(text: str, vocabulary: SkillVocabulary) -> set[str]:
    """Find the vocabulary's domain terms (e.g. "Backend", "Payments") in text."""
    text_lower = text.lower()
    found: set[str] = set()
    for term in vocabulary.domain_search_terms():
        if re.search(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])", text_lower):
            found.add(vocabulary.domain_term(term))
    return found


def extract_keywords_tfidf(
    job_description: str,
    top_n: int = 5,
    exclude: set[str] | None = None,
    min_occurrences: int = 2,
) -> list[str]:
    """Discover distinctive single-word terms in a JD with TF-IDF.

    Pre-filters the JD to remove boilerplate sections, then keeps terms
    that pass the technical-term filter, occur at least ``min_occurrences``
    times, and are not already covered by ``exclude`` (lowercase tokens).
    """
    if top_n <= 0:
        return []

    relevant_jd = _extract_relevant_jd_sections(job_description) or job_description
    relevant_lower = relevant_jd.lower()
    exclude = exclude or set()

    terms: list[str] = []
    for term in extract_tfidf_keywords(relevant_jd, top_n=top_n * 4):
        if term in exclude or not _is_technical_term(term):
            continue
        occurrences = len(re.findall(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])", relevant_lower))
        if occurrences < min_occurrences:
            continue
        terms.append(term)
        if len(terms) == top_n:
            break

    logger.debug("TF-IDF discovered %d extra JD terms: %s", len(terms), terms)
    return terms


def match_keywords(
    resume_text: str,
    resume_skills: set[str],
    job_keywords: set[str],
    vocabulary: SkillVocabulary,
) -> tuple[set[str], set[str]]:
    """Match job keywords against a resume.

    A keyword matches when it appears case-insensitively in the resume
    text, or names (directly, via an alias, or as a substring) one of the
    resume's skills. Returns (matched, missing); together they are exactly
    ``job_keywords``.
    """
    resume_lower = resume_text.lower()
    skill_keys = {vocabulary.skill_key(s) for s in resume_skills}
    skills_lower = [s.lower() for s in resume_skills]

    matched: set[str] = set()
    for keyword in job_keywords:
        kw_lower = keyword.lower().strip()
        if (
            kw_lower in resume_lower
            or vocabulary.skill_key(keyword) in skill_keys
            or any(kw_lower in skill for skill in skills_lower)
        ):
            matched.add(keyword)

    return matched, set(job_keywords) - matched


def compute_keyword_density(
    resume_text: str, keywords: list[str]
) -> dict[str, float]:
    """Compute keyword density (frequency / total words) for each keyword.

    Returns dict of keyword -> density percentage.
    ATS optimal range: 1-3% per primary keyword.
    """
    resume_lower = resume_text.lower()
    words = re.findall(r"[a-z0-9.#+/-]+", resume_lower)
    total_words = len(words)
    if total_words == 0:
        return {}

    word_counts = Counter(w.rstrip(".") for w in words)
    densities = {}
    for kw in keywords:
        kw_lower = kw.lower()
        if " " in kw_lower:
            count = resume_lower.count(kw_lower)
        else:
            count = word_counts.get(kw_lower, 0)
        densities[kw] = round((count / total_words) * 100, 2)

    return densities
