"""Plain-text report and saved-analysis payloads for downstream services.

The PDF/email renderers and the saved-analysis store are external; they
consume what this module produces.
"""

from models.schemas.compatibility_score import CompatibilityScore
from models.schemas.keyword_analysis import KeywordAnalysis
from models.schemas.saved_analysis import SavedAnalysisRecord


def fit_label(score: int) -> str:
    if score >= 80:
        return "strong"
    elif score >= 60:
        return "moderate"
    elif score >= 40:
        return "partial"
    return "weak"


def build_summary(score: CompatibilityScore, analysis: KeywordAnalysis) -> str:
    """Generate a short summary of the analysis."""
    parts = [f"Overall match score: {score.overall}/100 ({fit_label(score.overall)} fit)."]

    n_matched = len(analysis.matched_keywords)
    n_missing = len(analysis.missing_keywords)
    if n_matched and not n_missing:
        parts.append(f"All {n_matched} job keywords are covered.")
    elif n_matched:
        parts.append(f"{n_matched} keywords matched, {n_missing} missing.")
    elif n_missing:
        parts.append("No job keywords found on the resume.")

    if score.experience_match < 50:
        parts.append("Experience history is thin for this role's level.")
    return " ".join(parts)


def render_text_report(
    score: CompatibilityScore,
    analysis: KeywordAnalysis,
    improved_resume: str = "",
) -> str:
    """Render the "ATS Score Report" text used for downloads and email attachments."""
    lines = [
        "ATS Score Report",
        "",
        f"Score: {score.overall}%",
        "",
        "Breakdown:",
        f"Skills Match: {score.skills_match}%",
        f"Experience Match: {score.experience_match}%",
        f"Education Match: {score.education_match}%",
        f"Keyword Match: {score.keyword_match}%",
        "",
        "Matched Keywords: " + (", ".join(sorted(analysis.matched_keywords, key=str.lower)) or "none"),
        "Missing Keywords: " + (", ".join(sorted(analysis.missing_keywords, key=str.lower)) or "none"),
        "",
        "Suggestions:",
    ]
    lines.extend(f"- {s}" for s in analysis.suggestions)
    if improved_resume:
        lines.extend(["", "Improved Resume", "", improved_resume])
    return "\n".join(lines)


def build_saved_analysis(
    score: CompatibilityScore,
    analysis: KeywordAnalysis,
    job_description: str,
    resume_file_name: str = "",
) -> SavedAnalysisRecord:
    return SavedAnalysisRecord(
        resume_file_name=resume_file_name,
        job_description=job_description,
        score=score.overall,
        keyword_matches=sorted(analysis.matched_keywords, key=str.lower),
        missing_keywords=sorted(analysis.missing_keywords, key=str.lower),
        suggestions=list(analysis.suggestions),
    )
