"""End-to-end analysis against the bundled vocabulary."""

import pytest

from models.schemas.parsed_resume import ParseStatus
from services.resume_analyzer import analyze

pytestmark = pytest.mark.integration


RESUME = """Jane Doe
jane.doe@email.com

Summary
Backend engineer who enjoys collaboration with product teams.

Experience
Senior Software Engineer | PayCo | 2021 - Present
• Built Python and PostgreSQL payment services handling 2M transactions/day
• Moved deployments to Docker and Kubernetes

Software Engineer | StartupXYZ | 2018 - 2021
• Developed React frontend components

Education
B.Sc. Computer Science | State University | 2018

Skills
Python, PostgreSQL, Docker, Kubernetes, React
"""

JD = """Senior Backend Engineer

Requirements:
- 5+ years of Python
- PostgreSQL, Docker, GraphQL

Nice to have:
- Kafka
"""


def test_analyze_full_pipeline():
    result = analyze(RESUME, JD, resume_file_name="jane.txt")

    assert result.resume_status is ParseStatus.COMPLETE
    assert result.job_description_status is ParseStatus.COMPLETE
    assert result.vocabulary_version == "2025.1"
    assert set(result.required_skills) == {"Python", "PostgreSQL", "Docker", "GraphQL"}
    assert result.preferred_skills == ["Kafka"]
    assert result.experience_level.value == "senior"
    assert result.score.skills_match == 75
    assert "GraphQL" in result.keyword_analysis.missing_keywords
    assert "Python" in result.keyword_analysis.matched_keywords
    assert result.section_analysis.experience_entries == 2
    assert result.section_analysis.education_entries == 1


def test_analyze_saved_analysis_mirrors_result():
    result = analyze(RESUME, JD, resume_file_name="jane.txt")
    saved = result.saved_analysis
    assert saved.resume_file_name == "jane.txt"
    assert saved.job_description == JD
    assert saved.score == result.score.overall
    assert set(saved.keyword_matches) == result.keyword_analysis.matched_keywords
    assert saved.suggestions == result.keyword_analysis.suggestions


def test_analyze_empty_resume():
    result = analyze("", JD)
    assert result.resume_status is ParseStatus.EMPTY
    assert result.score.skills_match == 0
    assert result.keyword_analysis.matched_keywords == set()
    assert 0 <= result.score.overall <= 100
