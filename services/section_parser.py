"""Resume section segmentation, entry splitting and experience-level rules."""

import re

from models.schemas.parsed_job import ExperienceLevel

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|path)",
        r"(?:positions?\s*held|roles)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills(?:\s*(?:&|and)\s*(?:tools|technologies))?",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:technical\s+)?(?:stack|toolkit|tooling)",
        r"(?:programming\s+)?languages",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

# Sections whose heading may carry content on the same line, e.g. "Skills: Python, Go"
_INLINE_SECTIONS = ("skills", "education")

_HEADING_PREFIX = r"^[#*\s]*"

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
_INLINE_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"{_HEADING_PREFIX}(?:{combined})\s*:?\s*$", re.IGNORECASE
    )
    if section in _INLINE_SECTIONS:
        _INLINE_COMPILED[section] = re.compile(
            rf"{_HEADING_PREFIX}(?:{combined})\s*:\s*(.+)$", re.IGNORECASE
        )

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "March 2018 – Nov 2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_YEAR = r"(?<!\d)(?:19|20)\d{2}(?!\d)"
_MONTH_YEAR = rf"\b{_MONTHS}\.?\s*{_YEAR}"
DATE_RANGE_RE = re.compile(
    rf"({_MONTH_YEAR}|{_YEAR})"
    r"\s*(?:[-–—]|to)\s*"
    rf"({_MONTH_YEAR}|{_YEAR}|present|current)\b",
    re.IGNORECASE,
)

# Degree mentions. Abbreviations require their dots so plain words
# like "as" or "ms" don't register as degrees.
DEGREE_PATTERNS: list[str] = [
    r"ph\.?\s?d", r"doctorate", r"doctoral",
    r"masters", r"master'?s?\s+(?:of|in|degree)", r"m\.sc?", r"msc", r"mba", r"m\.tech",
    r"bachelor'?s?", r"b\.sc?", r"bsc", r"b\.tech", r"b\.eng?", r"b\.a",
    r"associate'?s? degree", r"diploma",
]
DEGREE_RE = re.compile(
    rf"(?<![a-z])(?:{'|'.join(DEGREE_PATTERNS)})(?![a-z])", re.IGNORECASE
)

# "5+ years", "3-5 years", "2 yrs". Group 1 is the lower bound.
YEARS_RE = re.compile(
    r"(?<!\d)(\d{1,2})\s*(?:\+|(?:-|–|to)\s*\d{1,2}\s*\+?)?\s*(?:years?|yrs?)\b",
    re.IGNORECASE,
)
_SENIOR_RE = re.compile(r"\bsenior\b", re.IGNORECASE)
_MID_RE = re.compile(r"\bmid\b", re.IGNORECASE)


def _match_heading(line: str) -> tuple[str | None, str]:
    """Return (section name, inline content) if the line is a section heading."""
    for section_name, pattern in _COMPILED.items():
        if pattern.match(line):
            return section_name, ""
    for section_name, pattern in _INLINE_COMPILED.items():
        match = pattern.match(line)
        if match:
            return section_name, match.group(1).strip()
    return None, ""


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Unmatched text at the top goes into 'header'. A heading that repeats
    appends to the earlier section instead of replacing it.
    """
    chunks: dict[str, list[str]] = {}
    current_section = "header"
    current_lines: list[str] = []

    for line in text.split("\n"):
        stripped = line.strip()
        matched_section, inline = _match_heading(stripped) if stripped else (None, "")

        if matched_section:
            chunks.setdefault(current_section, []).append("\n".join(current_lines).strip())
            current_section = matched_section
            current_lines = [inline] if inline else []
        else:
            current_lines.append(line)

    chunks.setdefault(current_section, []).append("\n".join(current_lines).strip())

    sections: dict[str, str] = {}
    for name, parts in chunks.items():
        content = "\n\n".join(p for p in parts if p)
        if content or name != "header":
            sections[name] = content
    return sections


def split_entries(section_text: str, anchor: re.Pattern | None = None) -> list[str]:
    """Split a section into entries (one job, one degree, ...).

    A new entry starts at a non-bullet line that follows a blank line or a
    bullet, or at a line matching ``anchor`` when the current entry already
    has one. Bullets and continuation lines fold into the current entry.
    """
    entries: list[list[str]] = []
    current: list[str] = []
    previous_blank = True
    previous_bullet = False

    for line in section_text.split("\n"):
        stripped = line.strip()
        if not stripped:
            previous_blank = True
            continue

        bullet = stripped[0] in BULLET_MARKERS
        anchored = anchor is not None and anchor.search(stripped) is not None
        starts_entry = (
            (previous_blank and not bullet)
            or (previous_bullet and not bullet)
            or (anchored and any(anchor.search(seen) for seen in current))
        )
        if starts_entry and current:
            entries.append(current)
            current = []

        current.append(stripped)
        previous_blank = False
        previous_bullet = bullet

    if current:
        entries.append(current)
    return ["\n".join(entry) for entry in entries]


def extract_experience_entries(text: str, sections: dict[str, str]) -> list[str]:
    """Experience entries from the experience section, else from dated lines."""
    if sections.get("experience"):
        return split_entries(sections["experience"], anchor=DATE_RANGE_RE)

    searchable = "\n".join(
        content for name, content in sections.items() if name != "education"
    )
    return [
        line.strip()
        for line in searchable.split("\n")
        if DATE_RANGE_RE.search(line) and not DEGREE_RE.search(line)
    ]


def extract_education_entries(text: str, sections: dict[str, str]) -> list[str]:
    """Education entries from the education section, else from degree lines."""
    if sections.get("education"):
        return split_entries(sections["education"], anchor=DEGREE_RE)

    return [line.strip() for line in text.split("\n") if DEGREE_RE.search(line)]


def classify_experience_level(text: str) -> ExperienceLevel:
    """Classify the seniority a job description asks for.

    First matching rule wins: 5+ years or "senior" -> senior; 2-4 years or
    "mid" -> mid; otherwise entry. For ranges like "3-5 years" the lower
    bound counts.
    """
    years = [int(m.group(1)) for m in YEARS_RE.finditer(text)]

    if any(y >= 5 for y in years) or _SENIOR_RE.search(text):
        return ExperienceLevel.SENIOR
    if any(2 <= y <= 4 for y in years) or _MID_RE.search(text):
        return ExperienceLevel.MID
    return ExperienceLevel.ENTRY
